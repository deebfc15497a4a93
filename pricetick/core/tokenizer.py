# pricetick/core/tokenizer.py
# -*- coding: utf-8 -*-
"""
Tokenizer: formatted price string -> list of glyph tokens.

Walks the string left to right. Digits seen after the decimal separator are
flagged fractional so the renderer can draw cents smaller. Characters outside
the price alphabet are dropped (best effort) and logged at DEBUG, or rejected
with TokenizeError when ``strict=True``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pricetick.core.errors import TokenizeError
from pricetick.core.identity import IdentityAllocator, currency_identity, default_allocator
from pricetick.core.tokens import Token, TokenKind
from pricetick.utils.price.rules import CURRENCY_SYMBOL, DECIMAL_SEP, GROUPING_SEP

logger = logging.getLogger(__name__)

__all__ = ["classify", "make_token", "tokenize"]

_ASCII_DIGITS = frozenset("0123456789")


def classify(ch: str) -> Optional[TokenKind]:
    """Return the token kind of a single character, or None if it is not a price glyph."""
    if ch == CURRENCY_SYMBOL:
        return TokenKind.CURRENCY_SYMBOL
    if ch == GROUPING_SEP:
        return TokenKind.GROUP_SEPARATOR
    if ch == DECIMAL_SEP:
        return TokenKind.DECIMAL_SEPARATOR
    if ch in _ASCII_DIGITS:
        return TokenKind.DIGIT
    return None


def make_token(
    kind: TokenKind,
    ch: str,
    identity: str,
    *,
    past_decimal: bool = False,
    highlighted: bool = False,
) -> Token:
    """Build a token for an already classified character."""
    if kind is TokenKind.CURRENCY_SYMBOL:
        return Token(kind=kind, identity=currency_identity(ch), value=ch)
    if kind is TokenKind.DIGIT:
        return Token(
            kind=kind,
            identity=identity,
            value=int(ch),
            is_fractional=past_decimal,
            is_highlighted=highlighted,
        )
    return Token(kind=kind, identity=identity, value=ch, is_highlighted=highlighted)


def tokenize(
    text: str,
    *,
    allocator: Optional[IdentityAllocator] = None,
    strict: bool = False,
) -> List[Token]:
    """Classify every character of ``text`` into a token, in order.

    Every non-currency token gets a fresh identity from ``allocator`` and
    ``is_highlighted=False``; highlighting only happens on updates.
    """
    alloc = allocator or default_allocator
    tokens: List[Token] = []
    past_decimal = False

    for i, ch in enumerate(text):
        kind = classify(ch)
        if kind is None:
            if strict:
                raise TokenizeError(f"Unexpected character {ch!r} at {i} in {text!r}")
            logger.debug("Dropping unrecognized character %r at %d in %r", ch, i, text)
            continue

        identity = "" if kind is TokenKind.CURRENCY_SYMBOL else alloc()
        tokens.append(make_token(kind, ch, identity, past_decimal=past_decimal))
        if kind is TokenKind.DECIMAL_SEPARATOR:
            past_decimal = True

    return tokens
