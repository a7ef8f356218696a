"""
MacroCollection
===============
Index of every macro reachable from one root template.

A template can import macro files (`{% import "forms.html" as forms %}`) and
inherit from parents (`{% extends "base.html" %}`).  Both kinds of template
may in turn import and inherit, so the collection walks the whole graph once
and records, per template, which namespaces it can call into:

    { template => { namespace => (origin template, { macro => definition }) } }

`self` is the namespace for a template's own macros.  The macro maps are the
dicts owned by the parsed templates; nothing is copied, so a collection must
not outlive the templates held by the registry it was built from.

Usage::

    collection = MacroCollection.from_original_template(tpl, registry)
    origin, definition = collection.lookup_macro("page.html", "forms", "input")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Protocol, Union

from macrograph.core.config import Settings, get_settings
from macrograph.schemas import SELF_NAMESPACE, MacroDefinition, Template

from .calls import MacroCall, parse_macro_call
from .errors import (
    CyclicImportError,
    MacroNotFoundError,
    NamespaceNotFoundError,
    TraversalDepthError,
    UnresolvedTemplateError,
)

logger = logging.getLogger(__name__)


# { macro => macro_definition }
MacroDefinitionMap = dict[str, MacroDefinition]
# { namespace => (macro_template, { macro => macro_definition }) }
MacroNamespaceMap = dict[str, tuple[str, MacroDefinitionMap]]
# { template => { namespace => (macro_template, { macro => macro_definition }) } }
MacroTemplateMap = dict[str, MacroNamespaceMap]


class TemplateSource(Protocol):
    """Anything that can hand out parsed templates by name."""

    def get_template(self, name: str) -> Template: ...


@dataclass
class _Frame:
    """One template being visited on the explicit walk stack."""

    template: Template
    via_import: bool
    namespaces: MacroNamespaceMap
    imports: Iterator[tuple[str, str]]
    parents: Optional[Iterator[str]] = None   # set once the template is inserted


class MacroCollection:
    """
    Collection of all macro templates by file.

    Built once per root template and read-only afterwards; lookups can be
    shared across threads, construction cannot.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._macros: MacroTemplateMap = {}
        self._settings = settings or get_settings()

    @classmethod
    def from_original_template(
        cls,
        template: Template,
        registry: TemplateSource,
        settings: Optional[Settings] = None,
    ) -> "MacroCollection":
        """Build the collection for *template* and everything it reaches."""
        collection = cls(settings)
        collection.add_macros_from_template(registry, template)
        logger.info(
            "Collected macros for %s: %d template(s)", template.name, len(collection)
        )
        return collection

    # ------------------------------------------------------------- construction

    def add_macros_from_template(self, registry: TemplateSource, template: Template) -> None:
        """
        Add *template* and every template it imports or inherits from.

        Imports are collected (and visited) before a template is inserted, so
        its namespace map is complete when it becomes visible; parents are
        visited afterwards.  A template already present is skipped.

        Any error from the registry aborts the walk and leaves this
        collection partially filled; it must then be discarded.
        """
        if template.name in self._macros:
            return

        stack: list[_Frame] = []
        self._push(stack, template, via_import=False)

        while stack:
            frame = stack[-1]

            if frame.parents is None:
                entry = next(frame.imports, None)
                if entry is not None:
                    filename, namespace = entry
                    imported = self._resolve(registry, filename, frame.template.name)
                    frame.namespaces[namespace] = (imported.name, imported.macros)
                    if imported.name not in self._macros:
                        self._check_import_cycle(stack, imported.name)
                        self._push(stack, imported, via_import=True)
                    continue

                self._macros[frame.template.name] = frame.namespaces
                frame.parents = iter(frame.template.parents)
                logger.debug(
                    "Inserted %s with namespaces %s",
                    frame.template.name, sorted(frame.namespaces),
                )

            parent_name = next(frame.parents, None)
            if parent_name is None:
                stack.pop()
                continue

            parent = self._resolve(registry, parent_name, frame.template.name)
            if parent.name not in self._macros:
                self._push(stack, parent, via_import=False)

    @staticmethod
    def _resolve(registry: TemplateSource, name: str, referenced_by: str) -> Template:
        try:
            return registry.get_template(name)
        except UnresolvedTemplateError as exc:
            if exc.referenced_by is not None:
                raise
            raise UnresolvedTemplateError(name, referenced_by) from exc

    def _push(self, stack: list[_Frame], template: Template, via_import: bool) -> None:
        max_depth = self._settings.max_traversal_depth
        if len(stack) >= max_depth:
            raise TraversalDepthError(template.name, len(stack) + 1, max_depth)

        namespaces: MacroNamespaceMap = {}
        if template.macros:
            namespaces[SELF_NAMESPACE] = (template.name, template.macros)

        logger.debug(
            "Visiting %s (%s, depth %d)",
            template.name, "import" if via_import else "root/parent", len(stack) + 1,
        )
        stack.append(_Frame(
            template=template,
            via_import=via_import,
            namespaces=namespaces,
            imports=iter(template.imported_macro_files),
        ))

    def _check_import_cycle(self, stack: list[_Frame], name: str) -> None:
        """
        Fail if *name* is already waiting on its own imports further down the
        current chain of import edges; visiting it again would never finish.
        """
        if not self._settings.detect_import_cycles:
            return

        chain: list[str] = []
        for frame in reversed(stack):
            chain.append(frame.template.name)
            if frame.template.name == name:
                chain.reverse()
                chain.append(name)
                raise CyclicImportError(chain)
            if not frame.via_import:
                break

    # ------------------------------------------------------------------ lookup

    def lookup_macro(
        self,
        template_name: str,
        macro_namespace: str,
        macro_name: str,
    ) -> tuple[str, MacroDefinition]:
        """
        Resolve `macro_namespace::macro_name` as called from *template_name*.

        Returns the template the macro is declared in together with its
        definition; calls made from the macro body resolve from that template.
        """
        namespace = self._macros.get(template_name, {}).get(macro_namespace)
        if namespace is None:
            raise NamespaceNotFoundError(macro_namespace, template_name)

        macro_template, macro_definition_map = namespace
        definition = macro_definition_map.get(macro_name)
        if definition is None:
            raise MacroNotFoundError(macro_namespace, macro_name, template_name)
        return macro_template, definition

    def resolve(
        self, template_name: str, call: Union[MacroCall, str]
    ) -> tuple[str, MacroDefinition]:
        """Like lookup_macro() but takes a `namespace::macro_name` reference."""
        if isinstance(call, str):
            call = parse_macro_call(call)
        return self.lookup_macro(template_name, call.namespace, call.name)

    def resolve_nested(
        self, template_name: str, calls: Iterable[Union[MacroCall, str]]
    ) -> list[tuple[str, MacroDefinition]]:
        """
        Follow a chain of calls, each made from inside the previous macro.

        The first call is resolved from *template_name*, every later one from
        the origin template of the macro that made it.
        """
        results: list[tuple[str, MacroDefinition]] = []
        current = template_name
        for call in calls:
            origin, definition = self.resolve(current, call)
            results.append((origin, definition))
            current = origin
        return results

    # ---------------------------------------------------------- introspection

    def __contains__(self, template_name: object) -> bool:
        return template_name in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    def template_names(self) -> list[str]:
        return sorted(self._macros)

    def namespace_map(self, template_name: str) -> Mapping[str, tuple[str, MacroDefinitionMap]]:
        """Read-only view of one template's namespaces; KeyError if not collected."""
        return MappingProxyType(self._macros[template_name])

    def __repr__(self) -> str:
        return f"<MacroCollection templates={self.template_names()!r}>"
