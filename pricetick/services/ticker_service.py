# pricetick/services/ticker_service.py
# -*- coding: utf-8 -*-
"""
PriceTicker: owns the token list currently on screen and applies updates.

Listens:
  - PriceUpdateRequested(value, source)

Publishes:
  - PriceTokensChanged(tokens, direction, boundary)
  - PriceUpdateFailed(value, error)

Notes:
  - Each update is a pure function of (current tokens, new value); the only
    state kept is the latest token list, replaced wholesale on success.
  - The old string is rebuilt as format(parse(tokens)) so it always reflects
    what is actually on screen.
  - A failed update (bad value, malformed old string, strict structural
    change) keeps the previous list and re-raises.
  - Not thread-safe: publish updates from the Tk thread.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from pricetick.core.differ import STRUCTURAL_FALLBACK, UNCHANGED_NONE, diff
from pricetick.core.errors import PriceTickError
from pricetick.core.events import EventBus, PriceTokensChanged, PriceUpdateFailed, PriceUpdateRequested
from pricetick.core.identity import IdentityAllocator, default_allocator
from pricetick.core.tokenizer import tokenize
from pricetick.core.tokens import DiffResult, Direction, Token, tokens_to_text
from pricetick.utils.price import Number, format_usd, parse_usd

logger = logging.getLogger(__name__)


class PriceTicker:
    """Tokenize an initial price, then diff every new value against the current tokens."""

    def __init__(
        self,
        initial_value: Number,
        *,
        allocator: Optional[IdentityAllocator] = None,
        bus: Optional[EventBus] = None,
        unchanged_policy: str = UNCHANGED_NONE,
        structural_policy: str = STRUCTURAL_FALLBACK,
    ) -> None:
        self._alloc = allocator or default_allocator
        self._unchanged_policy = unchanged_policy
        self._structural_policy = structural_policy
        self._tokens: Tuple[Token, ...] = tuple(tokenize(format_usd(initial_value), allocator=self._alloc))
        self._last_direction = Direction.UNCHANGED

        self.bus = bus
        self._unsub = None
        if bus is not None:
            self._unsub = bus.subscribe(PriceUpdateRequested, self._on_update_requested)

    # ---------- state ----------
    @property
    def tokens(self) -> List[Token]:
        """Snapshot of the current token list."""
        return list(self._tokens)

    @property
    def text(self) -> str:
        return tokens_to_text(self._tokens)

    @property
    def value(self) -> Decimal:
        """Numeric value currently displayed (parsed back from the tokens)."""
        return parse_usd(self.text)

    @property
    def last_direction(self) -> Direction:
        return self._last_direction

    # ---------- public API ----------
    def update(self, new_value: Number) -> DiffResult:
        """Apply a new value and return the resulting diff.

        Raises FormatError / ParseError / StructuralChangeError with the
        previous token list left in place.
        """
        old_tokens = self._tokens
        try:
            new_text = format_usd(new_value)
            old_text = format_usd(parse_usd(tokens_to_text(old_tokens)))
            result = diff(
                old_tokens,
                old_text,
                new_text,
                allocator=self._alloc,
                unchanged_policy=self._unchanged_policy,
                structural_policy=self._structural_policy,
            )
        except PriceTickError as e:
            logger.warning("Rejected price update %r: %s", new_value, e)
            raise

        self._tokens = tuple(result.tokens)
        self._last_direction = result.direction
        logger.debug(
            "%s -> %s (%s, boundary=%s, highlighted=%d)",
            old_text, new_text, result.direction.value, result.boundary, len(result.highlighted),
        )
        if self.bus is not None:
            self.bus.publish(PriceTokensChanged(
                tokens=list(result.tokens),
                direction=result.direction,
                boundary=result.boundary,
            ))
        return result

    def close(self) -> None:
        """Stop listening to the bus."""
        if self._unsub is not None:
            self._unsub()
            self._unsub = None

    # ---------- internals ----------
    def _on_update_requested(self, evt: PriceUpdateRequested) -> None:
        try:
            self.update(evt.value)
        except PriceTickError as e:
            if self.bus is not None:
                self.bus.publish(PriceUpdateFailed(value=evt.value, error=str(e)))
