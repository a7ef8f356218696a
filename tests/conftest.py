#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Settings are built without reading .env so local overrides never leak into
the suite; the template graphs below are shared by several test modules.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from macrograph.core.config import Settings
from macrograph.services.templates import TemplateRegistry

from helpers import make_registry, make_template


# ── Settings ─────────────────────────────────────────────────────────────────
@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


# ── page.html -> forms.html -> widgets.html, page.html extends base.html ─────
@pytest.fixture
def site_registry() -> TemplateRegistry:
    """
    A small site:

        base.html     imports layout.html as layout, own macro `title`
        page.html     extends base.html, imports forms.html as forms
        forms.html    imports widgets.html as w, own macros `input`, `helper`
        widgets.html  own macro `label`
        layout.html   own macros `header`, `footer`
    """
    return make_registry(
        make_template("base.html", macros=["title"], imports=[("layout.html", "layout")]),
        make_template(
            "page.html",
            macros=["body"],
            imports=[("forms.html", "forms")],
            parents=["base.html"],
        ),
        make_template(
            "forms.html",
            macros=["input", "helper"],
            imports=[("widgets.html", "w")],
        ),
        make_template("widgets.html", macros=["label"]),
        make_template("layout.html", macros=["header", "footer"]),
    )


# ── Diamond: top imports left and right, both import shared ──────────────────
@pytest.fixture
def diamond_registry() -> TemplateRegistry:
    return make_registry(
        make_template("top.html", imports=[("left.html", "l"), ("right.html", "r")]),
        make_template("left.html", macros=["l1"], imports=[("shared.html", "s")]),
        make_template("right.html", macros=["r1"], imports=[("shared.html", "s")]),
        make_template("shared.html", macros=["common"]),
    )


# -----------------------------------------------------------------------------
