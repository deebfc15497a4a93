# pricetick/core/di.py
# -*- coding: utf-8 -*-
"""
Dependency Injection (DI) container for PriceTick.

Responsibilities
----------------
- Provide a tiny, explicit DI container with lazy singletons.
- Centralize wiring of app services (bus, settings, allocator, ticker, quotes).
- Keep consumers decoupled from construction details & concrete modules.

Usage
-----
    from pricetick.core.di import container, register_default_services

    register_default_services()  # once at startup (e.g., in main.py)

    bus      = container.resolve("bus")
    settings = container.resolve("settings")
    ticker   = container.resolve("ticker")
    quotes   = container.resolve("quotes")
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional


# ---------- Minimal DI Container ----------

class Container:
    """A minimal DI container with lazy, singleton-like instances."""
    def __init__(self) -> None:
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._instances: Dict[str, Any] = {}

    def register(self, name: str, factory: Callable[[], Any], *, override: bool = False) -> None:
        """
        Register a factory under a unique name.

        Parameters
        ----------
        name : str
            Service name.
        factory : Callable[[], Any]
            Zero-argument callable returning a new instance.
        override : bool
            If True, replace existing registration and drop any cached instance.
        """
        if not callable(factory):
            raise TypeError(f"Factory for '{name}' must be callable.")
        if name in self._factories and not override:
            raise KeyError(f"Service already registered: {name}")
        self._factories[name] = factory
        self._instances.pop(name, None)

    def resolve(self, name: str) -> Any:
        """Return the (possibly newly constructed) instance for a registered service."""
        if name in self._instances:
            return self._instances[name]
        if name not in self._factories:
            raise KeyError(f"Service not registered: {name}")
        instance = self._factories[name]()
        self._instances[name] = instance
        return instance

    def reset(self) -> None:
        """Drop both factories and instances."""
        self._factories.clear()
        self._instances.clear()


# Global container instance
container = Container()


def register_default_services(*, override: bool = False, settings_path: Optional[str] = None) -> None:
    """
    Register core app services into the global container.

    Registered Names
    ----------------
    - "bus"       -> EventBus()
    - "settings"  -> SettingsManager(settings_path)
    - "allocator" -> UuidAllocator()
    - "ticker"    -> PriceTicker(settings.initial_price(), bus=bus, policies from settings)
    - "quotes"    -> QuoteService(bus)
    """
    # Local imports to avoid import-cycles at module import time
    from pricetick.config.settings import SettingsManager
    from pricetick.core.events import EventBus
    from pricetick.core.identity import UuidAllocator
    from pricetick.services.quote_service import QuoteService
    from pricetick.services.ticker_service import PriceTicker

    def _ticker() -> PriceTicker:
        settings = container.resolve("settings")
        return PriceTicker(
            settings.initial_price(),
            allocator=container.resolve("allocator"),
            bus=container.resolve("bus"),
            unchanged_policy=settings.unchanged_policy(),
            structural_policy=settings.structural_policy(),
        )

    container.register("bus", lambda: EventBus(), override=override)
    container.register("settings", lambda: SettingsManager(settings_path), override=override)
    container.register("allocator", lambda: UuidAllocator(), override=override)
    container.register("ticker", _ticker, override=override)
    container.register("quotes", lambda: QuoteService(container.resolve("bus")), override=override)
