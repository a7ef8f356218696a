"""
Macro call references
---------------------
Templates call macros as `namespace::macro_name(...)`.  This module only
deals with the `namespace::macro_name` part; arguments belong to the renderer.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .errors import InvalidMacroCallError

# ---------------------------------------------------------------------------
# Pattern explanation:
#   ns::name       — namespace and macro name, both identifiers
#   "  ns::name "  — surrounding whitespace is tolerated
# ---------------------------------------------------------------------------
_CALL_PATTERN = re.compile(
    r'^\s*([A-Za-z_][A-Za-z0-9_]*)::([A-Za-z_][A-Za-z0-9_]*)\s*$'
)


class MacroCall(NamedTuple):
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}::{self.name}"


def parse_macro_call(text: str) -> MacroCall:
    match = _CALL_PATTERN.match(text)
    if match is None:
        raise InvalidMacroCallError(text)
    return MacroCall(match.group(1), match.group(2))
