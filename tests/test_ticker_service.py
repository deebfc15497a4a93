"""PriceTicker: stateful update path, failure retention, bus integration."""

from __future__ import annotations

import logging
import random
from decimal import Decimal

import pytest

from pricetick.core.differ import STRUCTURAL_STRICT, UNCHANGED_HIGHLIGHT_LAST
from pricetick.core.errors import FormatError, StructuralChangeError
from pricetick.core.events import PriceTokensChanged, PriceUpdateFailed, PriceUpdateRequested
from pricetick.core.tokens import Direction, TokenKind
from pricetick.services.ticker_service import PriceTicker


def test_initial_state(alloc) -> None:
    ticker = PriceTicker(159.95, allocator=alloc)
    assert ticker.text == "$159.95"
    assert ticker.value == Decimal("159.95")
    assert ticker.last_direction is Direction.UNCHANGED
    assert not any(t.is_highlighted for t in ticker.tokens)


def test_update_replaces_tokens(alloc) -> None:
    ticker = PriceTicker(159.95, allocator=alloc)
    before = ticker.tokens

    result = ticker.update(159.96)

    assert ticker.text == "$159.96"
    assert ticker.tokens == result.tokens
    assert ticker.last_direction is Direction.INCREASED
    assert [t.identity for t in ticker.tokens[:-1]] == [t.identity for t in before[:-1]]
    assert before[-1].value == 5  # the old list was not mutated


def test_sequential_updates_only_touch_changed_glyphs(alloc) -> None:
    ticker = PriceTicker("10.00", allocator=alloc)
    first = ticker.update("10.50").tokens
    second = ticker.update("10.55")

    assert [t.text for t in second.highlighted] == ["5"]
    assert [t.identity for t in second.tokens[:-1]] == [t.identity for t in first[:-1]]
    assert second.direction is Direction.INCREASED


def test_displayed_value_is_the_rounded_one(alloc) -> None:
    ticker = PriceTicker("159.951", allocator=alloc)
    assert ticker.value == Decimal("159.95")
    result = ticker.update("159.95")
    assert result.highlighted == []
    assert result.direction is Direction.UNCHANGED


def test_highlight_last_policy_is_forwarded(alloc) -> None:
    ticker = PriceTicker("159.95", allocator=alloc, unchanged_policy=UNCHANGED_HIGHLIGHT_LAST)
    result = ticker.update("159.95")
    assert [t.text for t in result.highlighted] == ["5"]


@pytest.mark.parametrize("bad", [-1, "abc", float("nan")])
def test_failed_update_keeps_previous_tokens(alloc, caplog, bad) -> None:
    ticker = PriceTicker(159.95, allocator=alloc)
    before = ticker.tokens

    with pytest.raises(FormatError):
        ticker.update(bad)

    assert ticker.tokens == before
    assert "Rejected price update" in caplog.text


def test_strict_structural_change_keeps_previous_tokens(alloc) -> None:
    ticker = PriceTicker(999.99, allocator=alloc, structural_policy=STRUCTURAL_STRICT)
    before = ticker.tokens
    with pytest.raises(StructuralChangeError):
        ticker.update(1000)
    assert ticker.tokens == before


def test_identities_stay_unique_over_a_random_walk(alloc) -> None:
    rng = random.Random(7)
    ticker = PriceTicker("995.00", allocator=alloc)
    for _ in range(200):
        value = max(Decimal(0), ticker.value + Decimal(rng.randint(-300, 300)) / 100)
        ticker.update(value)
        tokens = ticker.tokens
        assert len({t.identity for t in tokens}) == len(tokens)
        assert tokens[0].kind is TokenKind.CURRENCY_SYMBOL
        assert ticker.value == value


def test_publishes_tokens_changed(alloc, bus, recorder) -> None:
    ticker = PriceTicker(159.95, allocator=alloc, bus=bus)
    ticker.update(160)

    changed = [e for e in recorder if isinstance(e, PriceTokensChanged)]
    assert len(changed) == 1
    assert changed[0].tokens == ticker.tokens
    assert changed[0].direction is Direction.INCREASED
    assert changed[0].boundary == 2


def test_applies_requested_updates_from_bus(alloc, bus, recorder) -> None:
    ticker = PriceTicker(159.95, allocator=alloc, bus=bus)
    bus.publish(PriceUpdateRequested(value=Decimal("159.00"), source="ui"))
    assert ticker.text == "$159.00"
    assert ticker.last_direction is Direction.DECREASED


def test_rejected_bus_update_publishes_failure(alloc, bus, recorder) -> None:
    ticker = PriceTicker(159.95, allocator=alloc, bus=bus)
    bus.publish(PriceUpdateRequested(value=-3, source="ui"))

    failed = [e for e in recorder if isinstance(e, PriceUpdateFailed)]
    assert len(failed) == 1
    assert failed[0].value == -3
    assert ticker.text == "$159.95"


def test_close_unsubscribes(alloc, bus) -> None:
    ticker = PriceTicker(1, allocator=alloc, bus=bus)
    ticker.close()
    bus.publish(PriceUpdateRequested(value=2))
    assert ticker.text == "$1.00"


def test_huge_value_updates_through_the_bus(alloc, bus, recorder) -> None:
    ticker = PriceTicker(159.95, allocator=alloc, bus=bus)
    bus.publish(PriceUpdateRequested(value=10**30, source="feed"))

    assert not [e for e in recorder if isinstance(e, PriceUpdateFailed)]
    assert ticker.text == "$1," + ",".join(["000"] * 10) + ".00"
    assert ticker.value == Decimal(10**30)
    assert ticker.last_direction is Direction.INCREASED


def test_huge_value_update_and_back(alloc) -> None:
    ticker = PriceTicker("1e30", allocator=alloc)
    result = ticker.update(Decimal("1000000000000000000000000000000.01"))
    assert [t.text for t in result.highlighted] == ["1"]
    assert result.direction is Direction.INCREASED
