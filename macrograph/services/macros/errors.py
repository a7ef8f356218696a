"""
Exceptions raised while collecting and resolving macros.

Every error keeps the offending identifiers as attributes so callers can
report them without parsing the message.
"""

from __future__ import annotations

from typing import Optional, Sequence


class MacroGraphError(Exception):
    """Base class for all macrograph errors."""


# -----------------------------------------------------------------------------
# Construction

class UnresolvedTemplateError(MacroGraphError, LookupError):
    """A template name used by an import or a parent chain is not registered."""

    def __init__(self, template_name: str, referenced_by: Optional[str] = None):
        self.template_name = template_name
        self.referenced_by = referenced_by
        message = f"Template `{template_name}` not found"
        if referenced_by:
            message += f" (referenced by `{referenced_by}`)"
        super().__init__(message)


class CyclicImportError(MacroGraphError):
    """Templates import each other's macros in a loop."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__(
            "Cyclic macro import detected: " + " -> ".join(f"`{name}`" for name in self.chain)
        )


class TraversalDepthError(MacroGraphError):
    """The import/inheritance walk went deeper than the configured limit."""

    def __init__(self, template_name: str, depth: int, max_depth: int):
        self.template_name = template_name
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Maximum macro traversal depth ({max_depth}) exceeded "
            f"while visiting template `{template_name}`"
        )


# -----------------------------------------------------------------------------
# Lookup

class MacroLookupError(MacroGraphError, LookupError):
    """A render-time macro reference could not be resolved."""


class NamespaceNotFoundError(MacroLookupError):

    def __init__(self, namespace: str, template_name: str):
        self.namespace = namespace
        self.template_name = template_name
        super().__init__(
            f"Macro namespace `{namespace}` was not found in template `{template_name}`. "
            "Have you maybe forgotten to import it, or misspelled it?"
        )


class MacroNotFoundError(MacroLookupError):

    def __init__(self, namespace: str, macro_name: str, template_name: str):
        self.namespace = namespace
        self.macro_name = macro_name
        self.template_name = template_name
        super().__init__(
            f"Macro `{namespace}::{macro_name}` not found in template `{template_name}`"
        )


class InvalidMacroCallError(MacroGraphError, ValueError):
    """Text that is not a `namespace::macro_name` reference."""

    def __init__(self, call: str):
        self.call = call
        super().__init__(f"Invalid macro call `{call}`, expected `namespace::macro_name`")
