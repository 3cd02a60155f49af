"""Tests for the Home Assistant host binding."""

from __future__ import annotations

from collections.abc import Generator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from homeassistant.core import HomeAssistant, State
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import (
    area_registry as ar,
    device_registry as dr,
    entity_registry as er,
    instance_id,
)

from custom_components.lightingkit.const import (
    CATEGORY_LIGHTBULB,
    CATEGORY_OTHER,
    MODE_EXCLUDE,
)
from custom_components.lightingkit.hass_host import (
    HassHomeManager,
    async_get_home_manager,
)
from custom_components.lightingkit.helpers.entity_filter import EntityFilter
from custom_components.lightingkit.kit import LightingKit
from custom_components.lightingkit.model import HSBColor, Room

AREAS = {
    "kitchen": SimpleNamespace(id="kitchen", name="Kitchen"),
    "office": SimpleNamespace(id="office", name="Office"),
}

DEVICES = {
    "dev-lamp": SimpleNamespace(
        id="dev-lamp", name="Lamp", name_by_user=None, area_id="kitchen", disabled_by=None
    ),
    "dev-strip": SimpleNamespace(
        id="dev-strip", name="Strip", name_by_user="Under Cabinet", area_id="kitchen", disabled_by=None
    ),
    "dev-sensor": SimpleNamespace(
        id="dev-sensor", name="Sensor", name_by_user=None, area_id="kitchen", disabled_by=None
    ),
    "dev-old": SimpleNamespace(
        id="dev-old", name="Old", name_by_user=None, area_id="office", disabled_by="user"
    ),
}

ENTITIES = {
    "dev-lamp": [SimpleNamespace(entity_id="light.lamp", domain="light", disabled_by=None, area_id=None)],
    "dev-strip": [
        SimpleNamespace(entity_id="light.strip", domain="light", disabled_by=None, area_id=None),
        SimpleNamespace(entity_id="light.strip_extra", domain="light", disabled_by="user", area_id=None),
    ],
    "dev-sensor": [
        SimpleNamespace(entity_id="sensor.temperature", domain="sensor", disabled_by=None, area_id=None)
    ],
    "dev-old": [SimpleNamespace(entity_id="light.old", domain="light", disabled_by=None, area_id=None)],
}


@pytest.fixture
def registries() -> Generator[None, None, None]:
    """Patch the area, device and entity registries."""
    area_reg = MagicMock()
    area_reg.async_list_areas.return_value = list(AREAS.values())
    area_reg.async_get_area.side_effect = AREAS.get

    device_reg = MagicMock()
    device_reg.devices = DEVICES

    with (
        patch.object(ar, "async_get", return_value=area_reg),
        patch.object(dr, "async_get", return_value=device_reg),
        patch.object(er, "async_get", return_value=MagicMock()),
        patch.object(
            er,
            "async_entries_for_device",
            side_effect=lambda registry, device_id: ENTITIES.get(device_id, []),
        ),
    ):
        yield


@pytest.fixture
def states(mock_hass: HomeAssistant) -> dict[str, State]:
    mock_hass.test_states.update(
        {
            "light.lamp": State(
                "light.lamp",
                "on",
                {"supported_color_modes": ["hs"], "brightness": 255, "hs_color": (120.0, 80.0)},
            ),
            "light.strip": State(
                "light.strip", "off", {"supported_color_modes": ["onoff"]}
            ),
        }
    )
    return mock_hass.test_states


@pytest.fixture
def manager(mock_hass: HomeAssistant, registries, states) -> HassHomeManager:
    return HassHomeManager(mock_hass, "instance-1", EntityFilter())


def test_single_home(manager: HassHomeManager) -> None:
    (home,) = manager.homes

    assert home.unique_id == "instance-1"
    assert home.name == "Home"
    assert [room.name for room in home.rooms] == ["Kitchen", "Office"]


def test_accessories(manager: HassHomeManager) -> None:
    accessories = {accessory.unique_id: accessory for accessory in manager.homes[0].accessories}

    assert set(accessories) == {"dev-lamp", "dev-strip", "dev-sensor"}
    assert accessories["dev-lamp"].category == CATEGORY_LIGHTBULB
    assert accessories["dev-sensor"].category == CATEGORY_OTHER
    assert accessories["dev-strip"].name == "Under Cabinet"
    assert accessories["dev-lamp"].room.name == "Kitchen"
    assert [service.entity_id for service in accessories["dev-strip"].services] == [
        "light.strip"
    ]


def test_entity_area_wins_over_device_area(manager: HassHomeManager) -> None:
    moved_lamp = SimpleNamespace(
        entity_id="light.lamp", domain="light", disabled_by=None, area_id="office"
    )
    entities = {**ENTITIES, "dev-lamp": [moved_lamp]}
    kit = LightingKit(manager)

    with patch.object(
        er,
        "async_entries_for_device",
        side_effect=lambda registry, device_id: entities.get(device_id, []),
    ):
        office = [light.id for light in kit.lights_in_room(Room("office", "Office"))]
        kitchen = [light.id for light in kit.lights_in_room(Room("kitchen", "Kitchen"))]

    assert office == ["dev-lamp"]
    assert kitchen == ["dev-strip"]


def test_device_area_used_when_entity_has_none(manager: HassHomeManager) -> None:
    accessories = {accessory.unique_id: accessory for accessory in manager.homes[0].accessories}

    assert accessories["dev-strip"].room.unique_id == "kitchen"
    assert accessories["dev-sensor"].room.unique_id == "kitchen"


def test_characteristics_follow_color_modes(manager: HassHomeManager) -> None:
    kit = LightingKit(manager)
    lights = {light.id: light for light in kit.lights_in_room(Room("kitchen", "Kitchen"))}

    lamp = lights["dev-lamp"]
    assert lamp.power.value is True
    assert lamp.brightness.value == 100
    assert lamp.color.value == HSBColor(120 / 360)

    strip = lights["dev-strip"]
    assert strip.power.value is False
    assert strip.brightness is None
    assert strip.color is None


def test_values_are_read_live(
    manager: HassHomeManager, states: dict[str, State]
) -> None:
    (lamp, _strip) = LightingKit(manager).lights_in_room(Room("kitchen", "Kitchen"))
    assert lamp.power.value is True

    states["light.lamp"] = State("light.lamp", "unavailable", {"supported_color_modes": ["hs"]})

    assert lamp.power.value is None
    assert lamp.brightness.value is None


def test_excluded_entity_hides_light(
    mock_hass: HomeAssistant, registries, states
) -> None:
    manager = HassHomeManager(
        mock_hass, "instance-1", EntityFilter(MODE_EXCLUDE, exclude_entities=["light.lamp"])
    )
    lights = LightingKit(manager).lights_in_room(Room("kitchen", "Kitchen"))

    assert [light.id for light in lights] == ["dev-strip"]


async def test_writes_call_light_services(
    mock_hass: HomeAssistant, manager: HassHomeManager
) -> None:
    (lamp, _strip) = LightingKit(manager).lights_in_room(Room("kitchen", "Kitchen"))

    await lamp.brightness.async_set(30)
    await lamp.color.async_set(HSBColor(0.5))
    await lamp.power.async_set(False)

    calls = [call.args for call in mock_hass.services.async_call.await_args_list]
    assert calls == [
        ("light", "turn_on", {"entity_id": "light.lamp", "brightness_pct": 30}),
        ("light", "turn_on", {"entity_id": "light.lamp", "hs_color": (180.0, 80.0)}),
        ("light", "turn_off", {"entity_id": "light.lamp"}),
    ]


async def test_write_error_propagates(
    mock_hass: HomeAssistant, manager: HassHomeManager
) -> None:
    mock_hass.services.async_call = AsyncMock(side_effect=HomeAssistantError("no reply"))
    (lamp, _strip) = LightingKit(manager).lights_in_room(Room("kitchen", "Kitchen"))

    with pytest.raises(HomeAssistantError, match="no reply"):
        await lamp.power.async_set(True)


async def test_async_get_home_manager(mock_hass: HomeAssistant) -> None:
    with patch.object(instance_id, "async_get", AsyncMock(return_value="abc123")):
        manager = await async_get_home_manager(mock_hass)

    assert manager.home_id == "abc123"
    assert manager.entity_filter == EntityFilter()
