# pricetick/core/errors.py
# -*- coding: utf-8 -*-
"""
Exception hierarchy for PriceTick.

All errors derive from PriceTickError so callers can catch broadly at the UI
boundary while the ticker service handles the specific cases.
"""

from __future__ import annotations


class PriceTickError(Exception):
    """Base exception for all PriceTick errors."""


class FormatError(PriceTickError, ValueError):
    """A value cannot be rendered as a price (negative, NaN, not a number)."""


class ParseError(PriceTickError, ValueError):
    """A string is not a well-formed formatted price."""


class TokenizeError(PriceTickError):
    """Strict tokenization met a character outside the price alphabet."""


class StructuralChangeError(PriceTickError):
    """The glyph layout changed between two prices and strict mode is on.

    Raised by the differ when ``structural_policy="strict"`` and the old and
    new strings no longer share the same sequence of token kinds (for example
    ``$999.99`` -> ``$1,000.00``).
    """

    def __init__(self, old_text: str, new_text: str) -> None:
        super().__init__(f"Glyph layout changed: {old_text!r} -> {new_text!r}")
        self.old_text = old_text
        self.new_text = new_text
