# pricetick/core/differ.py
# -*- coding: utf-8 -*-
"""
Differ: decide which glyphs changed between two formatted prices.

Algorithm
---------
1) Change boundary: the first index where the old and new strings disagree.
2) Re-tokenize the new string. A glyph at index ``i`` is "new" when
   ``i >= boundary`` (digits) or ``i + 1 >= boundary`` (grouping and decimal
   separators, so a separator right before a changed digit joins the
   highlighted run). Glyphs that are not new carry the identity of the old
   token at the same index. New glyphs get a fresh identity and are highlighted.
   The currency symbol always keeps its fixed identity.
3) Direction: compare the parsed numeric values.

Policies
--------
unchanged_policy
    What to do when the strings do not diverge at all.
    "none"           -> nothing is highlighted, every identity carries over.
    "highlight_last" -> the last glyph is treated as changed anyway.

structural_policy
    What to do when positional correspondence breaks (old token at index i
    missing or not the same glyph, e.g. '$999.99' -> '$1,000.00').
    "fallback" -> mint a fresh, highlighted identity for that glyph.
    "strict"   -> raise StructuralChangeError if the glyph layout changed.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pricetick.core.errors import StructuralChangeError
from pricetick.core.identity import IdentityAllocator, default_allocator
from pricetick.core.tokenizer import classify, make_token
from pricetick.core.tokens import DiffResult, Token, TokenKind
from pricetick.utils.price import compute_direction, parse_usd

logger = logging.getLogger(__name__)

__all__ = [
    "UNCHANGED_NONE",
    "UNCHANGED_HIGHLIGHT_LAST",
    "UNCHANGED_POLICIES",
    "STRUCTURAL_FALLBACK",
    "STRUCTURAL_STRICT",
    "STRUCTURAL_POLICIES",
    "find_change_boundary",
    "diff",
]

UNCHANGED_NONE = "none"
UNCHANGED_HIGHLIGHT_LAST = "highlight_last"
UNCHANGED_POLICIES = (UNCHANGED_NONE, UNCHANGED_HIGHLIGHT_LAST)

STRUCTURAL_FALLBACK = "fallback"
STRUCTURAL_STRICT = "strict"
STRUCTURAL_POLICIES = (STRUCTURAL_FALLBACK, STRUCTURAL_STRICT)

_LOOKAHEAD_KINDS = (TokenKind.GROUP_SEPARATOR, TokenKind.DECIMAL_SEPARATOR)


def find_change_boundary(old_text: str, new_text: str) -> Optional[int]:
    """Return the first index where the strings differ, or None if the overlap is equal."""
    for i, (a, b) in enumerate(zip(old_text, new_text)):
        if a != b:
            return i
    return None


def _layout(text: str) -> List[TokenKind]:
    return [k for k in map(classify, text) if k is not None]


def _carried_identity(old_tokens: Sequence[Token], i: int, kind: TokenKind, ch: str) -> Optional[str]:
    """Identity of the old token at index i if it is the same glyph, else None."""
    if i >= len(old_tokens):
        return None
    old = old_tokens[i]
    if old.kind is not kind or old.text != ch:
        return None
    return old.identity


def diff(
    old_tokens: Sequence[Token],
    old_text: str,
    new_text: str,
    *,
    allocator: Optional[IdentityAllocator] = None,
    unchanged_policy: str = UNCHANGED_NONE,
    structural_policy: str = STRUCTURAL_FALLBACK,
) -> DiffResult:
    """Build the token list for ``new_text`` from the previous one.

    Parameters
    ----------
    old_tokens : Sequence[Token]
        Token list currently on screen (rendering of ``old_text``).
    old_text, new_text : str
        Formatter outputs for the previous and the new value.
    allocator : IdentityAllocator, optional
        Source of fresh identities (uuid4 by default).
    unchanged_policy, structural_policy : str
        See module docstring.

    Returns
    -------
    DiffResult
        New tokens, the direction of the move and the boundary used.

    Raises
    ------
    ParseError
        If either string is not a formatter output.
    StructuralChangeError
        Only with ``structural_policy="strict"``.
    """
    if unchanged_policy not in UNCHANGED_POLICIES:
        raise ValueError(f"Unknown unchanged_policy: {unchanged_policy!r}")
    if structural_policy not in STRUCTURAL_POLICIES:
        raise ValueError(f"Unknown structural_policy: {structural_policy!r}")

    strict = structural_policy == STRUCTURAL_STRICT
    if strict and _layout(old_text) != _layout(new_text):
        raise StructuralChangeError(old_text, new_text)

    direction = compute_direction(parse_usd(old_text), parse_usd(new_text))

    boundary = find_change_boundary(old_text, new_text)
    if boundary is None and unchanged_policy == UNCHANGED_HIGHLIGHT_LAST:
        boundary = len(new_text) - 1

    alloc = allocator or default_allocator
    tokens: List[Token] = []
    past_decimal = False

    for i, ch in enumerate(new_text):
        kind = classify(ch)
        if kind is None:
            logger.debug("Dropping unrecognized character %r at %d in %r", ch, i, new_text)
            continue

        if kind is TokenKind.CURRENCY_SYMBOL:
            tokens.append(make_token(kind, ch, ""))
            continue

        lookahead = 1 if kind in _LOOKAHEAD_KINDS else 0
        is_new = boundary is not None and i + lookahead >= boundary

        identity: Optional[str] = None
        if not is_new:
            identity = _carried_identity(old_tokens, i, kind, ch)
            if identity is None:
                if strict:
                    raise StructuralChangeError(old_text, new_text)
                logger.debug("No positional match for %r at %d; minting a fresh identity", ch, i)
                is_new = True
        if is_new:
            identity = alloc()

        tokens.append(make_token(kind, ch, identity, past_decimal=past_decimal, highlighted=is_new))
        if kind is TokenKind.DECIMAL_SEPARATOR:
            past_decimal = True

    return DiffResult(tokens=tokens, direction=direction, boundary=boundary)
