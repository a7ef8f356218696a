"""
TemplateRegistry — in-memory store of parsed templates.

Templates are parsed elsewhere; the registry only holds them by name for the
lifetime of the process so macro collections can reference their macro maps.

    registry = TemplateRegistry.load_json("build/templates.json")
    collection = registry.build_macro_collection("page.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from pydantic import TypeAdapter

from macrograph.core.config import Settings
from macrograph.schemas import Template
from macrograph.services.macros.collection import MacroCollection
from macrograph.services.macros.errors import UnresolvedTemplateError

logger = logging.getLogger(__name__)

_TEMPLATE_LIST = TypeAdapter(list[Template])


class TemplateRegistry:
    def __init__(self) -> None:
        self._templates: dict[str, Template] = {}

    # ---------------------------------------------------------------- register

    def add(self, template: Template) -> None:
        if template.name in self._templates:
            logger.debug("Replacing template: %s", template.name)
        self._templates[template.name] = template

    @classmethod
    def from_templates(cls, templates: Iterable[Template]) -> "TemplateRegistry":
        registry = cls()
        for template in templates:
            registry.add(template)
        return registry

    @classmethod
    def load_json(cls, path: str | Path) -> "TemplateRegistry":
        """
        Create a registry from a JSON list of already-parsed templates.

        Raises:
            FileNotFoundError: If the file doesn't exist
            pydantic.ValidationError: If a template entry is malformed
        """
        path = Path(path)
        templates = _TEMPLATE_LIST.validate_json(path.read_bytes())
        registry = cls.from_templates(templates)
        logger.info("Loaded %d templates from %s", len(registry), path)
        return registry

    def clear(self) -> None:
        self._templates.clear()

    # ------------------------------------------------------------------ lookup

    def get_template(self, name: str) -> Template:
        """Return the template called *name*, raising UnresolvedTemplateError."""
        template = self._templates.get(name)
        if template is None:
            raise UnresolvedTemplateError(name)
        return template

    def get(self, name: str) -> Optional[Template]:
        return self._templates.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def names(self) -> list[str]:
        return sorted(self._templates)

    # ---------------------------------------------------------- introspection

    def missing_references(self) -> list[tuple[str, str]]:
        """
        (template, missing name) for every import or parent that is not
        registered.  Building a collection never calls this; it is an
        up-front check for callers that want to fail before rendering.
        """
        missing: list[tuple[str, str]] = []
        for name in self.names():
            for reference in self._templates[name].references():
                if reference not in self._templates:
                    missing.append((name, reference))
        return missing

    def build_macro_collection(
        self, name: str, settings: Optional[Settings] = None
    ) -> MacroCollection:
        return MacroCollection.from_original_template(self.get_template(name), self, settings)


# Default registry shared across the application
template_registry = TemplateRegistry()
