# pricetick/utils/price/format_full.py
# -*- coding: utf-8 -*-
"""
Full USD price formatter and its strict inverse.

Scope
-----
- Render non-negative values as '$1,234.56' (grouped thousands, two decimals,
  half-up rounding).
- Parse exactly that shape back into a Decimal.
- Respect shared policy constants (glyphs, precision) from rules.py.

Public API
----------
format_usd(value) -> str
    '$159.95', '$1,000.00'; raises FormatError for negative/NaN/non-numeric.

parse_usd(text) -> Decimal
    Decimal('159.95'); raises ParseError unless text is a formatter output."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from pricetick.core.errors import FormatError, ParseError
from .rules import (
    CENT,
    CURRENCY_SYMBOL,
    DECIMAL_SEP,
    FRACTION_DIGITS,
    GROUPING_SEP,
    ROUNDING,
)

Number = Union[int, float, Decimal, str]

__all__ = ["format_usd", "parse_usd", "to_decimal", "quantize_cents"]

_PRICE_RE = re.compile(
    re.escape(CURRENCY_SYMBOL)
    + r"(0|[1-9][0-9]{0,2}(?:" + re.escape(GROUPING_SEP) + r"[0-9]{3})*)"
    + re.escape(DECIMAL_SEP)
    + r"([0-9]{" + str(FRACTION_DIGITS) + r"})"
)


def to_decimal(value: Number) -> Decimal:
    """Coerce a numeric input into a finite Decimal.

    Floats go through ``repr`` so 159.95 stays 159.95 instead of its binary
    expansion. Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool):
        raise FormatError(f"Not a price: {value!r}")
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        d = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            d = Decimal(value.strip())
        except InvalidOperation:
            raise FormatError(f"Not a number: {value!r}") from None
    else:
        raise FormatError(f"Unsupported price type: {type(value).__name__}")

    if not d.is_finite():
        raise FormatError(f"Price must be finite, got {value!r}")
    return d


def quantize_cents(d: Decimal) -> Decimal:
    """Round to cents (half-up) with enough precision for any magnitude.

    The default 28-digit context cannot hold 1e26 plus two decimals, so the
    precision is widened to fit the integer part.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + FRACTION_DIGITS + 2)
        return d.quantize(CENT, rounding=ROUNDING)


def _grouped(n: int) -> str:
    """Return thousands-grouped integer: 1234567 -> '1,234,567'."""
    return f"{n:,}".replace(",", GROUPING_SEP)


def format_usd(value: Number) -> str:
    """Format a non-negative value as a USD price string.

    Parameters
    ----------
    value : int | float | Decimal | str
        Amount in dollars. Rounded half-up to cents.

    Returns
    -------
    str
        '$' + grouped integer part + '.' + exactly two digits.

    Raises
    ------
    FormatError
        For negative, non-finite or non-numeric input.

    Examples
    --------
    >>> format_usd(159.95)
    '$159.95'
    >>> format_usd(1000)
    '$1,000.00'
    """
    d = to_decimal(value)
    if d < 0:
        raise FormatError(f"Negative prices are not supported: {value!r}")

    q = quantize_cents(d).copy_abs()  # drops the sign of -0
    int_part, frac_part = f"{q:.{FRACTION_DIGITS}f}".split(".")
    return f"{CURRENCY_SYMBOL}{_grouped(int(int_part))}{DECIMAL_SEP}{frac_part}"


def parse_usd(text: str) -> Decimal:
    """Parse a string produced by format_usd back into a Decimal.

    Only the exact formatter grammar is accepted; whitespace, missing
    fraction digits, misplaced separators or a missing '$' raise ParseError.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected str, got {type(text).__name__}")
    m = _PRICE_RE.fullmatch(text)
    if not m:
        raise ParseError(f"Malformed price string: {text!r}")
    int_part = m.group(1).replace(GROUPING_SEP, "")
    return Decimal(f"{int_part}.{m.group(2)}")

