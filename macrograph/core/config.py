#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Library configuration.

All values can be overridden via MACROGRAPH_* environment variables or a
.env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MACROGRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Traversal ──────────────────────────────────────────────────────────

    # Frames allowed on the import/inheritance walk at any one time
    max_traversal_depth: int = Field(default=256, ge=1)
    # When off, an import cycle is only stopped by max_traversal_depth
    detect_import_cycles: bool = True

    # ── Logging ────────────────────────────────────────────────────────────

    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
