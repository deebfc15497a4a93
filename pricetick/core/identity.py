# pricetick/core/identity.py
# -*- coding: utf-8 -*-
"""
Identity allocators.

An allocator is any zero-argument callable returning a new unique string.
The tokenizer and the differ take one as a parameter so tests can pin exact
identity sequences:

    alloc = CounterAllocator()
    alloc(), alloc()   # 't1', 't2'
"""

from __future__ import annotations

import itertools
import uuid
from typing import Callable

IdentityAllocator = Callable[[], str]

__all__ = [
    "IdentityAllocator",
    "UuidAllocator",
    "CounterAllocator",
    "currency_identity",
    "default_allocator",
]


def currency_identity(symbol: str) -> str:
    """Identity of the currency symbol; derived from the glyph so it never changes."""
    return f"currency_symbol.{symbol}"


class UuidAllocator:
    """Random identities (uuid4 hex). Default for the running app."""

    def __call__(self) -> str:
        return uuid.uuid4().hex


class CounterAllocator:
    """Monotonic identities 'prefix1', 'prefix2', ... for deterministic tests."""

    def __init__(self, prefix: str = "t", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


default_allocator: IdentityAllocator = UuidAllocator()
