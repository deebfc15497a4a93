# pricetick/utils/price/rules.py
# -*- coding: utf-8 -*-
"""
Price rules & shared constants for the USD ticker formatter.

This module centralizes the glyphs and decimal precision used by the formatter,
the tokenizer and the differ so all of them agree on one fixed configuration.

Design notes
------------
- Keep *policy* here, *logic* in the dedicated format/compute modules.
- Only one locale is supported: en_US, currency "$", grouping ",", decimal ".".
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

__all__ = [
    # glyphs
    "CURRENCY_SYMBOL", "GROUPING_SEP", "DECIMAL_SEP",
    # decimals policy
    "FRACTION_DIGITS", "CENT", "ROUNDING",
]

# ------------------------------ Common glyphs --------------------------------
#: Currency symbol, always the first glyph
CURRENCY_SYMBOL: str = "$"
#: Thousands separator
GROUPING_SEP: str = ","
#: Decimal separator
DECIMAL_SEP: str = "."

# ------------------------------ Decimals policy -------------------------------
#: Exactly two fraction digits are always rendered
FRACTION_DIGITS: int = 2
#: Quantum used with Decimal.quantize (0.01)
CENT: Decimal = Decimal(1).scaleb(-FRACTION_DIGITS)
#: Rounding mode applied when a value carries more than two fraction digits
ROUNDING: str = ROUND_HALF_UP
