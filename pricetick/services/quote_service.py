# pricetick/services/quote_service.py
# -*- coding: utf-8 -*-
"""
QuoteService: value sources feeding the ticker.

Publishes:
  - PriceUpdateRequested(value, source="random")  on nudge()
  - PriceUpdateRequested(value, source="feed")    on refresh()

Notes:
  - nudge() is the demo source: a uniform random step around the current price.
  - refresh() does network I/O off the UI thread (threading), at most one
    request in flight.
  - Use set_dispatcher(root.after) from UI to marshal publishes to the main
    thread so the ticker sees one update at a time.
"""

from __future__ import annotations

import logging
import random
import threading
from decimal import Decimal
from typing import Callable, Optional

from pricetick.core.di import container
from pricetick.core.errors import FormatError
from pricetick.core.events import Event, EventBus, PriceUpdateRequested
from pricetick.utils.net import extract_amount, get_json
from pricetick.utils.price import Number, quantize_cents, to_decimal

logger = logging.getLogger(__name__)


def random_walk_step(price: Number, increment: Number, rng: Optional[random.Random] = None) -> Decimal:
    """Return a uniform draw in [price - increment, price + increment], clamped at 0, in cents."""
    p = to_decimal(price)
    inc = abs(to_decimal(increment))
    r = (rng or random).uniform(-1.0, 1.0)
    step = inc * to_decimal(r)
    return quantize_cents(max(Decimal(0), p + step))


class QuoteService:
    """Produces new prices (random walk or HTTP feed) and publishes them on the bus."""

    def __init__(self, bus: EventBus, *, rng: Optional[random.Random] = None):
        self.bus = bus
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._running = False
        self._dispatcher: Optional[Callable[[int, Callable], str]] = None  # e.g., root.after

        # lazy deps (via DI)
        self._settings = None  # SettingsManager
        self._ticker = None    # PriceTicker

    # ---------- public API ----------
    def set_dispatcher(self, after_callable: Callable[[int, Callable], str]) -> None:
        """UI injects root.after to ensure publishes happen on the UI thread."""
        self._dispatcher = after_callable

    def nudge(self) -> Decimal:
        """Publish a random-walk price around the ticker's current value."""
        self._resolve_deps()
        value = random_walk_step(self._ticker.value, self._settings.increment(), self._rng)
        self._publish(PriceUpdateRequested(value=value, source="random"))
        return value

    def refresh(self) -> bool:
        """Trigger a background feed fetch; False if one is already running."""
        with self._lock:
            if self._running:
                return False
            self._running = True
        t = threading.Thread(target=self._worker, name="QuoteServiceWorker", daemon=True)
        t.start()
        return True

    def fetch_quote(self) -> Optional[Decimal]:
        """Fetch and decode one quote from the configured feed (blocking)."""
        self._resolve_deps()
        url = self._settings.feed_url()
        payload = get_json(url)
        if payload is None:
            return None
        raw = extract_amount(payload, self._settings.feed_amount_path())
        if raw is None:
            logger.warning("Feed %s has no amount at %r", url, self._settings.feed_amount_path())
            return None
        try:
            value = to_decimal(raw)
        except FormatError as e:
            logger.warning("Feed %s returned a non-numeric amount: %s", url, e)
            return None
        if value < 0:
            logger.warning("Feed %s returned a negative amount: %s", url, value)
            return None
        return value

    # ---------- internals ----------
    def _resolve_deps(self) -> None:
        if self._settings is None:
            self._settings = container.resolve("settings")
        if self._ticker is None:
            self._ticker = container.resolve("ticker")

    def _worker(self) -> None:
        try:
            value = self.fetch_quote()
            if value is not None:
                self._publish(PriceUpdateRequested(value=value, source="feed"))
        finally:
            with self._lock:
                self._running = False

    def _publish(self, evt: Event) -> None:
        """Publish on UI thread if dispatcher is set; else publish directly."""
        if self._dispatcher is not None:
            self._dispatcher(0, lambda: self.bus.publish(evt))
            return
        self.bus.publish(evt)
