"""Shared pytest fixtures for PriceTick tests."""

from __future__ import annotations

import pytest

from pricetick.config.settings import SettingsManager
from pricetick.core.di import container
from pricetick.core.events import EventBus
from pricetick.core.identity import CounterAllocator


@pytest.fixture(autouse=True)
def _clean_container():
    """Each test starts and ends with an empty global DI container."""
    container.reset()
    yield
    container.reset()


@pytest.fixture
def alloc() -> CounterAllocator:
    """Deterministic identities: t1, t2, ..."""
    return CounterAllocator()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def settings_path(tmp_path) -> str:
    return str(tmp_path / "pricetick_settings.json")


@pytest.fixture
def settings(settings_path) -> SettingsManager:
    return SettingsManager(settings_path)


@pytest.fixture
def recorder(bus):
    """Collect every event published on the bus."""
    seen = []
    bus.subscribe_all(seen.append)
    return seen
