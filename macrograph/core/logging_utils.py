#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Logging setup for applications embedding macrograph."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Optional

from macrograph.core.config import Settings, get_settings


# -----------------------------------------------------------------------------

def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from *settings* (defaults to get_settings())."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if settings.debug:
        logging.getLogger("macrograph").setLevel(logging.DEBUG)


# -----------------------------------------------------------------------------
