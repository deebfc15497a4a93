# pricetick/config/themes.py
# -*- coding: utf-8 -*-
"""
Theme tokens for PriceTick.

- Pure data (no logic): each theme is a dict of semantic tokens.
- The price view reads colors and glyph sizes from these tokens.

Conventions (must-have keys in every theme):
  BG, SURFACE, ON_SURFACE, ON_SURFACE_VARIANT, PRIMARY,
  SUCCESS (price up), ERROR (price down),
  FONT_FAMILY, GLYPH_LARGE, GLYPH_SMALL, SMALL_RAISE
"""

from __future__ import annotations
from typing import Dict

# ---------- Dark ----------
_DARK: Dict[str, object] = {
    "NAME": "dark",
    "BG": "#0a0a0f",
    "SURFACE": "#1a1a22",
    "ON_SURFACE": "#f0f2f5",
    "ON_SURFACE_VARIANT": "#a1a8b0",
    "PRIMARY": "#00e5c7",
    "SUCCESS": "#22d67e",
    "ERROR": "#ff6b6b",
    # Glyphs: integer part is twice the size of symbol/cents
    "FONT_FAMILY": "",
    "GLYPH_LARGE": 64,
    "GLYPH_SMALL": 32,
    "SMALL_RAISE": 14,  # px the small glyphs sit above the baseline
}

# ---------- Light ----------
_LIGHT: Dict[str, object] = {
    "NAME": "light",
    "BG": "#fbfcfe",
    "SURFACE": "#ffffff",
    "ON_SURFACE": "#1c1e21",
    "ON_SURFACE_VARIANT": "#5a6572",
    "PRIMARY": "#0066cc",
    "SUCCESS": "#28a745",
    "ERROR": "#dc3545",
    "FONT_FAMILY": "",
    "GLYPH_LARGE": 64,
    "GLYPH_SMALL": 32,
    "SMALL_RAISE": 14,
}

THEMES: Dict[str, Dict[str, object]] = {
    "dark": _DARK,
    "light": _LIGHT,
}

# Order to toggle through (first is default)
THEME_ORDER = ["dark", "light"]

DEFAULT_THEME = "dark"


def get_theme(name: str) -> Dict[str, object]:
    """Return a theme dict by name with safe fallback to DEFAULT_THEME."""
    key = (name or "").strip().lower()
    return THEMES.get(key) or THEMES[DEFAULT_THEME]


def next_theme_name(current: str) -> str:
    """Return the next theme name in THEME_ORDER (cyclic)."""
    try:
        idx = THEME_ORDER.index((current or "").strip().lower())
    except ValueError:
        idx = -1
    return THEME_ORDER[(idx + 1) % len(THEME_ORDER)]
