"""Home Assistant implementation of the host protocols.

The running instance is the home, areas are rooms, devices are accessories and
every light entity of a device is a lightbulb service. Nothing is cached: each
property reads the registries or the state machine again.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
import logging
from typing import Any

from homeassistant.components.light import DOMAIN as LIGHT_DOMAIN
from homeassistant.core import HomeAssistant, State
from homeassistant.helpers import (
    area_registry as ar,
    device_registry as dr,
    entity_registry as er,
    instance_id,
)

from .const import (
    CATEGORY_LIGHTBULB,
    CATEGORY_OTHER,
    CHARACTERISTIC_TYPE_BRIGHTNESS,
    CHARACTERISTIC_TYPE_COLOR,
    CHARACTERISTIC_TYPE_POWER_STATE,
    SERVICE_TYPE_LIGHTBULB,
)
from .helpers.command_executor import CommandExecutor
from .helpers.entity_filter import EntityFilter
from .helpers.state_helpers import (
    get_brightness_percent,
    get_hue_degrees,
    get_power_state,
    supports_brightness,
    supports_color,
)

_LOGGER = logging.getLogger(__name__)

_READERS: dict[str, Callable[[State], Any]] = {
    CHARACTERISTIC_TYPE_BRIGHTNESS: get_brightness_percent,
    CHARACTERISTIC_TYPE_POWER_STATE: get_power_state,
    CHARACTERISTIC_TYPE_COLOR: get_hue_degrees,
}


class HassCharacteristic:
    """One characteristic of a light entity."""

    def __init__(
        self,
        hass: HomeAssistant,
        executor: CommandExecutor,
        entity_id: str,
        characteristic_type: str,
    ) -> None:
        """Initialize the characteristic."""
        self.hass = hass
        self.executor = executor
        self.entity_id = entity_id
        self.characteristic_type = characteristic_type

    @property
    def value(self) -> Any:
        """Read the raw value from the current entity state."""
        state = self.hass.states.get(self.entity_id)
        if state is None:
            return None
        return _READERS[self.characteristic_type](state)

    async def async_write_value(self, value: Any) -> None:
        """Write the raw value through a light service call."""
        writers: dict[str, Callable[[str, Any], Awaitable[None]]] = {
            CHARACTERISTIC_TYPE_BRIGHTNESS: self.executor.async_set_brightness,
            CHARACTERISTIC_TYPE_POWER_STATE: self.executor.async_set_power,
            CHARACTERISTIC_TYPE_COLOR: self.executor.async_set_hue,
        }
        await writers[self.characteristic_type](self.entity_id, value)

    def __repr__(self) -> str:
        return f"<HassCharacteristic {self.entity_id} {self.characteristic_type}>"


class HassLightService:
    """A light entity seen as a lightbulb service."""

    service_type = SERVICE_TYPE_LIGHTBULB

    def __init__(
        self, hass: HomeAssistant, executor: CommandExecutor, entity_id: str
    ) -> None:
        """Initialize the service."""
        self.hass = hass
        self.executor = executor
        self.entity_id = entity_id

    @property
    def characteristics(self) -> list[HassCharacteristic]:
        """Characteristics the light currently supports.

        Power is always present; brightness and color follow the supported
        color modes.
        """
        types = [CHARACTERISTIC_TYPE_POWER_STATE]
        state = self.hass.states.get(self.entity_id)
        if state is not None:
            if supports_brightness(state):
                types.append(CHARACTERISTIC_TYPE_BRIGHTNESS)
            if supports_color(state):
                types.append(CHARACTERISTIC_TYPE_COLOR)
        return [
            HassCharacteristic(self.hass, self.executor, self.entity_id, characteristic_type)
            for characteristic_type in types
        ]


class HassRoom:
    """An area seen as a room."""

    def __init__(self, area: ar.AreaEntry) -> None:
        """Initialize the room."""
        self.unique_id: str = area.id
        self.name: str = area.name


class HassAccessory:
    """A device seen as an accessory."""

    def __init__(
        self,
        hass: HomeAssistant,
        executor: CommandExecutor,
        device: dr.DeviceEntry,
        entity_filter: EntityFilter,
    ) -> None:
        """Initialize the accessory."""
        self.hass = hass
        self.executor = executor
        self.device = device
        self.entity_filter = entity_filter
        self.unique_id: str = device.id
        self.name: str = device.name_by_user or device.name or device.id

    def _light_entries(self) -> list[er.RegistryEntry]:
        """Enabled light entities of the device that pass the entity filter."""
        ent_reg = er.async_get(self.hass)
        entries = []
        for entry in er.async_entries_for_device(ent_reg, self.device.id):
            if entry.domain != LIGHT_DOMAIN or entry.disabled_by is not None:
                continue
            if not self.entity_filter.should_include_entity(entry.entity_id):
                _LOGGER.debug("Entity %s excluded by filter", entry.entity_id)
                continue
            entries.append(entry)
        return entries

    @property
    def services(self) -> list[HassLightService]:
        """Light entities of the device that pass the entity filter."""
        return [
            HassLightService(self.hass, self.executor, entry.entity_id)
            for entry in self._light_entries()
        ]

    @property
    def category(self) -> str:
        """Lightbulb when the device exposes at least one light."""
        return CATEGORY_LIGHTBULB if self._light_entries() else CATEGORY_OTHER

    @property
    def room(self) -> HassRoom | None:
        """The area of the device's lights.

        An area assigned to a light entity wins over the device's own area.
        """
        area_id = next(
            (entry.area_id for entry in self._light_entries() if entry.area_id is not None),
            self.device.area_id,
        )
        if area_id is None:
            return None
        area = ar.async_get(self.hass).async_get_area(area_id)
        if area is None:
            return None
        return HassRoom(area)


class HassHome:
    """The Home Assistant instance seen as a home."""

    def __init__(
        self,
        hass: HomeAssistant,
        unique_id: str,
        entity_filter: EntityFilter,
    ) -> None:
        """Initialize the home."""
        self.hass = hass
        self.unique_id = unique_id
        self.name: str = hass.config.location_name
        self.entity_filter = entity_filter
        self.executor = CommandExecutor(hass)

    @property
    def rooms(self) -> list[HassRoom]:
        """All areas."""
        return [HassRoom(area) for area in ar.async_get(self.hass).async_list_areas()]

    @property
    def accessories(self) -> list[HassAccessory]:
        """All enabled devices."""
        return [
            HassAccessory(self.hass, self.executor, device, self.entity_filter)
            for device in dr.async_get(self.hass).devices.values()
            if device.disabled_by is None
        ]


class HassHomeManager:
    """Supplies the single home of a Home Assistant instance."""

    def __init__(
        self, hass: HomeAssistant, home_id: str, entity_filter: EntityFilter
    ) -> None:
        """Initialize the home manager."""
        self.hass = hass
        self.home_id = home_id
        self.entity_filter = entity_filter

    @property
    def homes(self) -> list[HassHome]:
        """The instance's home."""
        return [HassHome(self.hass, self.home_id, self.entity_filter)]


async def async_get_home_manager(
    hass: HomeAssistant, entity_filter: EntityFilter | None = None
) -> HassHomeManager:
    """Create a home manager identified by the instance id."""
    home_id = await instance_id.async_get(hass)
    return HassHomeManager(hass, home_id, entity_filter or EntityFilter())
