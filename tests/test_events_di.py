"""EventBus and DI container."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pricetick.core.di import Container, container, register_default_services
from pricetick.core.events import EventBus, PriceUpdateRequested, ThemeToggled
from pricetick.services.quote_service import QuoteService
from pricetick.services.ticker_service import PriceTicker


class TestEventBus:

    def test_type_based_dispatch(self, bus) -> None:
        got = []
        bus.subscribe(ThemeToggled, got.append)
        bus.publish(ThemeToggled(theme_name="light"))
        bus.publish(PriceUpdateRequested(value=1))
        assert got == [ThemeToggled(theme_name="light")]

    def test_unsubscribe(self, bus) -> None:
        got = []
        unsub = bus.subscribe(ThemeToggled, got.append)
        unsub()
        unsub()  # second call is a no-op
        bus.publish(ThemeToggled(theme_name="light"))
        assert got == []

    def test_subscribe_all_sees_everything(self, bus) -> None:
        got = []
        bus.subscribe_all(got.append)
        bus.publish(ThemeToggled(theme_name="dark"))
        bus.publish(PriceUpdateRequested(value=2))
        assert len(got) == 2

    def test_failing_handler_is_isolated(self, bus, caplog) -> None:
        got = []

        def boom(_evt) -> None:
            raise RuntimeError("boom")

        bus.subscribe(ThemeToggled, boom)
        bus.subscribe(ThemeToggled, got.append)
        bus.publish(ThemeToggled(theme_name="dark"))

        assert len(got) == 1
        assert "Event handler" in caplog.text

    def test_clear(self, bus) -> None:
        got = []
        bus.subscribe(ThemeToggled, got.append)
        bus.clear()
        bus.publish(ThemeToggled(theme_name="dark"))
        assert got == []


class TestContainer:

    def test_lazy_singleton(self) -> None:
        c = Container()
        calls = []
        c.register("x", lambda: calls.append(1) or object())
        assert calls == []
        assert c.resolve("x") is c.resolve("x")
        assert calls == [1]

    def test_duplicate_and_override(self) -> None:
        c = Container()
        c.register("x", lambda: 1)
        with pytest.raises(KeyError):
            c.register("x", lambda: 2)
        assert c.resolve("x") == 1
        c.register("x", lambda: 2, override=True)
        assert c.resolve("x") == 2

    def test_missing_and_bad_factory(self) -> None:
        c = Container()
        with pytest.raises(KeyError):
            c.resolve("nope")
        with pytest.raises(TypeError):
            c.register("x", 3)


def test_register_default_services(settings_path) -> None:
    register_default_services(settings_path=settings_path)

    ticker = container.resolve("ticker")
    assert isinstance(ticker, PriceTicker)
    assert ticker.value == Decimal("159.95")
    assert isinstance(container.resolve("quotes"), QuoteService)

    container.resolve("bus").publish(PriceUpdateRequested(value="160.00"))
    assert ticker.text == "$160.00"
