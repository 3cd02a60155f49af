"""Test fixtures for LightingKit."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from homeassistant.core import HomeAssistant

from custom_components.lightingkit.const import CATEGORY_OTHER

from .fakes import FakeAccessory, FakeHome, FakeHomeManager, FakeRoom, make_bulb


@pytest.fixture
def mock_hass() -> Generator[HomeAssistant, None, None]:
    """Create a mock Home Assistant instance.

    States are served from the ``hass.test_states`` dict.
    """
    hass = MagicMock(spec=HomeAssistant)
    hass.data = {}
    hass.test_states = {}
    hass.states = MagicMock()
    hass.states.get = MagicMock(side_effect=hass.test_states.get)
    hass.services = MagicMock()
    hass.services.async_call = AsyncMock(return_value=None)
    hass.config = MagicMock()
    hass.config.location_name = "Home"
    hass.config_entries = MagicMock()
    hass.config_entries.async_reload = AsyncMock(return_value=True)

    yield hass


@pytest.fixture
def kitchen() -> FakeRoom:
    return FakeRoom("room-kitchen", "Kitchen")


@pytest.fixture
def bedroom() -> FakeRoom:
    return FakeRoom("room-bedroom", "Bedroom")


@pytest.fixture
def homes(kitchen: FakeRoom, bedroom: FakeRoom) -> list[FakeHome]:
    """Two homes; only the second contains the kitchen."""
    cabin = FakeHome(
        "home-cabin",
        "Cabin",
        rooms=[bedroom],
        accessories=[make_bulb("cabin-bulb", room=bedroom)],
    )
    house = FakeHome(
        "home-house",
        "House",
        rooms=[kitchen, FakeRoom("room-hall", "Hall")],
        accessories=[
            make_bulb("kitchen-bulb", room=kitchen),
            FakeAccessory("kitchen-sensor", "Sensor", category=CATEGORY_OTHER, room=kitchen),
            make_bulb("hall-bulb", room=FakeRoom("room-hall", "Hall")),
            make_bulb("loose-bulb"),
        ],
    )
    return [cabin, house]


@pytest.fixture
def home_manager(homes: list[FakeHome]) -> FakeHomeManager:
    return FakeHomeManager(homes)
