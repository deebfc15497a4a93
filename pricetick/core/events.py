# pricetick/core/events.py
# -*- coding: utf-8 -*-
"""
Lightweight event system for PriceTick.

- A minimal pub/sub EventBus with type-based subscriptions.
- Handlers are called synchronously on publish() (Tkinter main thread), so
  price updates are applied one at a time in publish order.
- Returns an unsubscribe() callable from subscribe() for easy cleanup.
- Optional 'subscribe_all' to observe every event (useful for logging).

Usage:
    from pricetick.core.events import EventBus, PriceUpdateRequested

    bus = EventBus()

    def on_update(evt: PriceUpdateRequested) -> None:
        logger.info("new price %s from %s", evt.value, evt.source)

    unsubscribe = bus.subscribe(PriceUpdateRequested, on_update)
    bus.publish(PriceUpdateRequested(value=160, source="ui"))
    unsubscribe()  # stop observing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Generic, List, Optional, Protocol, Type, TypeVar, Union

from pricetick.core.tokens import Direction, Token

logger = logging.getLogger(__name__)


# ---------- Base marker ----------

class Event:
    """Marker base class for all events."""
    ...


# ---------- Events ----------

@dataclass(frozen=True)
class PriceUpdateRequested(Event):
    """A value source produced a new price to show."""
    value: Union[int, float, Decimal, str]
    source: str = "ui"  # "ui" | "random" | "feed" | ...


@dataclass(frozen=True)
class PriceTokensChanged(Event):
    """
    The ticker installed a new token list.
    'boundary' is the first changed character index (None if nothing changed).
    """
    tokens: List[Token]
    direction: Direction
    boundary: Optional[int]


@dataclass(frozen=True)
class PriceUpdateFailed(Event):
    """An update was rejected; the previous token list is still current."""
    value: object
    error: str


@dataclass(frozen=True)
class ThemeToggled(Event):
    """Theme changed to a given theme name."""
    theme_name: str


# ---------- Typing helpers ----------

E = TypeVar("E", bound=Event)


class EventHandler(Protocol, Generic[E]):
    """Callable protocol for event handlers."""
    def __call__(self, evt: E) -> None: ...


# ---------- EventBus ----------

class EventBus:
    """
    Type-based pub/sub event bus.

    - subscribe(EventType, handler) -> unsubscribe()
    - subscribe_all(handler) -> unsubscribe()
    - publish(EventInstance)

    Notes:
        * Handlers are invoked synchronously in the caller's thread.
          In Tkinter apps, call publish() from the main thread.
        * Handlers are isolated: an exception in one handler is logged and
          won't stop the others.
    """

    def __init__(self) -> None:
        self._subs: Dict[Type[Event], List[Callable[[Event], None]]] = {}
        self._any_subs: List[Callable[[Event], None]] = []

    # ---- subscription ----
    def subscribe(self, etype: Type[E], handler: EventHandler[E]) -> Callable[[], None]:
        """
        Subscribe to a specific event type.

        Returns:
            A zero-arg function that, when called, unsubscribes this handler.
        """
        self._subs.setdefault(etype, []).append(handler)  # type: ignore[arg-type]

        def _unsubscribe() -> None:
            lst = self._subs.get(etype, [])
            if handler in lst:
                lst.remove(handler)  # type: ignore[arg-type]

        return _unsubscribe

    def subscribe_all(self, handler: Callable[[Event], None]) -> Callable[[], None]:
        """Subscribe to ALL events. Returns an unsubscribe function."""
        self._any_subs.append(handler)

        def _unsubscribe() -> None:
            if handler in self._any_subs:
                self._any_subs.remove(handler)

        return _unsubscribe

    # ---- publish ----
    def publish(self, evt: Event) -> None:
        """Publish an event instance to matching subscribers, then to 'any' subscribers."""
        handlers = list(self._subs.get(type(evt), [])) + list(self._any_subs)
        for h in handlers:
            try:
                h(evt)  # type: ignore[arg-type]
            except Exception:
                logger.exception("Event handler %r failed for %s", h, type(evt).__name__)

    # ---- management ----
    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subs.clear()
        self._any_subs.clear()
