# pricetick/core/tokens.py
# -*- coding: utf-8 -*-
"""
Glyph tokens for a formatted price.

A token is one visual unit of a string like '$1,234.56': the currency symbol,
a digit, a grouping separator or the decimal separator. Tokens are immutable;
a price update produces a brand-new list.

The ``identity`` is what a renderer keys its widgets on. An identity that
survives an update means "same glyph, do not animate"; a fresh identity means
"this glyph changed".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union


class TokenKind(str, Enum):
    CURRENCY_SYMBOL = "currency_symbol"
    DIGIT = "digit"
    GROUP_SEPARATOR = "group_separator"
    DECIMAL_SEPARATOR = "decimal_separator"


class Direction(str, Enum):
    """Which way the numeric value moved on the latest update."""
    INCREASED = "increased"
    DECREASED = "decreased"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Token:
    """One classified glyph of a formatted price."""
    kind: TokenKind
    identity: str
    value: Union[int, str]          # int 0..9 for digits, literal glyph otherwise
    is_fractional: bool = False     # digit placed after the decimal separator
    is_highlighted: bool = False    # identity freshly minted on the latest update

    @property
    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class DiffResult:
    """
    Output of one update.

    'boundary' is the character index from which glyphs were treated as
    changed, or None when nothing was (identical strings, no fallback).
    """
    tokens: List[Token]
    direction: Direction
    boundary: Optional[int]

    @property
    def highlighted(self) -> List[Token]:
        return [t for t in self.tokens if t.is_highlighted]


def tokens_to_text(tokens: Iterable[Token]) -> str:
    """Concatenate the glyphs of a token list back into a string."""
    return "".join(t.text for t in tokens)
