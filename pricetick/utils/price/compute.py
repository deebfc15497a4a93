# pricetick/utils/price/compute.py
# -*- coding: utf-8 -*-
"""
Delta computations for USD prices.

Pure helpers that compare two prices independent of any UI formatting.
Always compute first, then format or color in presentation layers.

Public API
----------
compute_delta_amount(current, previous) -> Decimal
    Signed difference ``current - previous``.

compute_direction(previous, current) -> Direction
    INCREASED / DECREASED / UNCHANGED.
"""

from __future__ import annotations

from decimal import Decimal

from pricetick.core.tokens import Direction
from .format_full import Number, to_decimal

__all__ = ["compute_delta_amount", "compute_direction"]


def compute_delta_amount(current: Number, previous: Number) -> Decimal:
    """Return the signed amount delta ``current - previous`` as a Decimal."""
    return to_decimal(current) - to_decimal(previous)


def compute_direction(previous: Number, current: Number) -> Direction:
    """Return which way the price moved from ``previous`` to ``current``."""
    delta = compute_delta_amount(current, previous)
    if delta > 0:
        return Direction.INCREASED
    if delta < 0:
        return Direction.DECREASED
    return Direction.UNCHANGED
