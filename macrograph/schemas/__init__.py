"""
Pydantic v2 models for parsed templates and the macros they declare.

These are produced by whatever parses template source; macrograph only reads
them.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


SELF_NAMESPACE = "self"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Macros
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MacroDefinition(BaseModel):
    """A `{% macro name(args) %}...{% endmacro %}` block."""

    name: str = Field(..., min_length=1)
    # argument name -> default value (None when the argument is required)
    args: dict[str, Any] = Field(default_factory=dict)
    body: str = ""


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Templates
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Template(BaseModel):
    name: str = Field(..., min_length=1)
    path: Optional[str] = None
    macros: dict[str, MacroDefinition] = Field(default_factory=dict)
    # (file name, alias) in declaration order
    imported_macro_files: list[tuple[str, str]] = Field(default_factory=list)
    parents: list[str] = Field(default_factory=list)

    @field_validator("macros", mode="before")
    @classmethod
    def macros_from_list(cls, v: Any) -> Any:
        """Accept a list of definitions and key it by macro name."""
        if not isinstance(v, (list, tuple)):
            return v
        keyed: dict[str, Any] = {}
        for item in v:
            if isinstance(item, MacroDefinition):
                name = item.name
            elif isinstance(item, dict):
                name = item.get("name")
            else:
                raise ValueError(f"Invalid macro entry {item!r}")
            if name in keyed:
                raise ValueError(f"Macro '{name}' is defined more than once")
            keyed[name] = item
        return keyed

    @field_validator("imported_macro_files")
    @classmethod
    def aliases_unique(cls, v: list[tuple[str, str]]) -> list[tuple[str, str]]:
        seen: set[str] = set()
        for _filename, alias in v:
            if alias == SELF_NAMESPACE:
                raise ValueError(f"'{SELF_NAMESPACE}' is reserved and cannot be used as an import alias")
            if alias in seen:
                raise ValueError(f"Import alias '{alias}' is used more than once")
            seen.add(alias)
        return v

    @model_validator(mode="after")
    def macro_keys_match_names(self) -> "Template":
        for key, definition in self.macros.items():
            if key != definition.name:
                raise ValueError(
                    f"Macro key '{key}' does not match its definition name '{definition.name}'"
                )
        return self

    def references(self) -> list[str]:
        """Names of every template this one imports or inherits from."""
        return [filename for filename, _alias in self.imported_macro_files] + list(self.parents)


# -----------------------------------------------------------------------------

__all__ = ["SELF_NAMESPACE", "MacroDefinition", "Template"]
