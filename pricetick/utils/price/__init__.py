# pricetick/utils/price/__init__.py
# -*- coding: utf-8 -*-
"""
Unified Price Utils API (USD).

This package is the formatter collaborator of the ticker: a fixed en_US
configuration consumed as ``format(value) -> str`` and ``parse(str) -> value``.
  • Formatting: format_usd ('$1,234.56'), parse_usd (strict inverse)
  • Delta computations: compute_delta_amount, compute_direction
  • Policy glyphs: CURRENCY_SYMBOL, GROUPING_SEP, DECIMAL_SEP

Import examples
---------------
from pricetick.utils.price import format_usd, parse_usd, compute_direction
"""

from __future__ import annotations

from .rules import (
    CENT,
    CURRENCY_SYMBOL,
    GROUPING_SEP,
    DECIMAL_SEP,
    FRACTION_DIGITS,
)
from .format_full import (
    Number,
    format_usd,
    parse_usd,
    to_decimal,
    quantize_cents,
)
from .compute import (
    compute_delta_amount,
    compute_direction,
)

__all__ = [
    # rules
    "CENT",
    "CURRENCY_SYMBOL",
    "GROUPING_SEP",
    "DECIMAL_SEP",
    "FRACTION_DIGITS",
    # formatters
    "Number",
    "format_usd",
    "parse_usd",
    "to_decimal",
    "quantize_cents",
    # compute
    "compute_delta_amount",
    "compute_direction",
]
