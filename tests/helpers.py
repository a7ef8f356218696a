"""
Builders for parsed templates used across the test suite.
"""

from __future__ import annotations

from typing import Iterable

from macrograph.schemas import MacroDefinition, Template
from macrograph.services.templates import TemplateRegistry


def make_macro(name: str, body: str = "", **args) -> MacroDefinition:
    return MacroDefinition(name=name, args=args, body=body or f"<{name}>")


def make_template(
    name: str,
    macros: Iterable[str] = (),
    imports: Iterable[tuple[str, str]] = (),
    parents: Iterable[str] = (),
) -> Template:
    return Template(
        name=name,
        macros=[make_macro(m) for m in macros],
        imported_macro_files=list(imports),
        parents=list(parents),
    )


def make_registry(*templates: Template) -> TemplateRegistry:
    return TemplateRegistry.from_templates(templates)


def snapshot(collection) -> dict:
    """{template: {namespace: (origin, sorted macro names)}} for comparisons."""
    return {
        name: {
            namespace: (origin, sorted(macros))
            for namespace, (origin, macros) in collection.namespace_map(name).items()
        }
        for name in collection.template_names()
    }
