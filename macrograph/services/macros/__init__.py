"""
Macro subsystem — public API.
"""

from .calls import MacroCall, parse_macro_call
from .collection import MacroCollection, TemplateSource
from .errors import (
    CyclicImportError,
    InvalidMacroCallError,
    MacroGraphError,
    MacroLookupError,
    MacroNotFoundError,
    NamespaceNotFoundError,
    TraversalDepthError,
    UnresolvedTemplateError,
)

__all__ = [
    "MacroCall",
    "parse_macro_call",
    "MacroCollection",
    "TemplateSource",
    "MacroGraphError",
    "MacroLookupError",
    "UnresolvedTemplateError",
    "CyclicImportError",
    "TraversalDepthError",
    "NamespaceNotFoundError",
    "MacroNotFoundError",
    "InvalidMacroCallError",
]
