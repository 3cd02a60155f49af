"""Filtering and mapping of host collections into domain objects."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from ..const import (
    CHARACTERISTIC_TYPE_BRIGHTNESS,
    CHARACTERISTIC_TYPE_COLOR,
    CHARACTERISTIC_TYPE_POWER_STATE,
    SERVICE_TYPE_LIGHTBULB,
)
from ..host import HostAccessory, HostCharacteristic, HostHome, HostService
from ..model import Brightness, Color, Home, Light, Power, Room
from .strategies import HomesByRoomStrategy, LightbulbsByRoomStrategy, is_lighting

_T_co = TypeVar("_T_co", covariant=True)


class DomainFactory(Protocol[_T_co]):
    """Anything that builds a domain object from one host object."""

    def from_host(self, host_object: Any) -> _T_co:
        """Build the domain object."""


def to_domain_objects(objects: Iterable[Any], factory: DomainFactory[_T_co]) -> list[_T_co]:
    """Convert host objects to domain objects, keeping their order."""
    return [factory.from_host(host_object) for host_object in objects]


def _first_characteristic(
    characteristics: Iterable[HostCharacteristic], characteristic_type: str
) -> HostCharacteristic | None:
    return next(
        (
            characteristic
            for characteristic in characteristics
            if characteristic.characteristic_type == characteristic_type
        ),
        None,
    )


def brightness_characteristic(
    characteristics: Iterable[HostCharacteristic],
) -> HostCharacteristic | None:
    """Return the first brightness characteristic, if any."""
    return _first_characteristic(characteristics, CHARACTERISTIC_TYPE_BRIGHTNESS)


def power_characteristic(
    characteristics: Iterable[HostCharacteristic],
) -> HostCharacteristic | None:
    """Return the first power state characteristic, if any."""
    return _first_characteristic(characteristics, CHARACTERISTIC_TYPE_POWER_STATE)


def color_characteristic(
    characteristics: Iterable[HostCharacteristic],
) -> HostCharacteristic | None:
    """Return the first color characteristic, if any."""
    return _first_characteristic(characteristics, CHARACTERISTIC_TYPE_COLOR)


def light_service(services: Iterable[HostService]) -> HostService | None:
    """Return the first lightbulb service, if any."""
    return next(
        (service for service in services if service.service_type == SERVICE_TYPE_LIGHTBULB),
        None,
    )


def to_lights(accessories: Iterable[HostAccessory]) -> list[Light]:
    """Convert accessories to lights with their characteristics attached."""
    lights: list[Light] = []
    for accessory in accessories:
        light = Light.from_host(accessory)
        service = light_service(accessory.services)
        if service is not None:
            characteristics = list(service.characteristics)
            light.brightness = Brightness.from_host(brightness_characteristic(characteristics))
            light.power = Power.from_host(power_characteristic(characteristics))
            light.color = Color.from_host(color_characteristic(characteristics))
        lights.append(light)
    return lights


def _matching_home(homes: Iterable[HostHome], home: Home) -> HostHome | None:
    return next((host_home for host_home in homes if home.matches(host_home)), None)


def home_for_room(
    homes: Iterable[HostHome],
    room: Room,
    strategy: HomesByRoomStrategy | None = None,
) -> HostHome | None:
    """Return the first home containing the room.

    Ties are broken by input order.
    """
    strategy = strategy or HomesByRoomStrategy()
    return next((home for home in homes if strategy.include(home, room)), None)


def rooms_for_home(homes: Iterable[HostHome], home: Home) -> list[Room]:
    """Return the rooms of a home, or an empty list if it is unknown."""
    host_home = _matching_home(homes, home)
    if host_home is None:
        return []
    return to_domain_objects(host_home.rooms, Room)


def lights_for_home(homes: Iterable[HostHome], home: Home) -> list[Light]:
    """Return every light of a home, or an empty list if it is unknown."""
    host_home = _matching_home(homes, home)
    if host_home is None:
        return []
    return to_lights(
        accessory for accessory in host_home.accessories if is_lighting(accessory)
    )


def lightbulb_accessories(
    accessories: Iterable[HostAccessory],
    room: Room,
    strategy: LightbulbsByRoomStrategy | None = None,
) -> list[HostAccessory]:
    """Return the lighting accessories assigned to the room."""
    strategy = strategy or LightbulbsByRoomStrategy()
    return [accessory for accessory in accessories if strategy.include(accessory, room)]


def lights_for_room(
    homes: Iterable[HostHome],
    room: Room,
    homes_strategy: HomesByRoomStrategy | None = None,
    lightbulbs_strategy: LightbulbsByRoomStrategy | None = None,
) -> list[Light]:
    """Return the lights of a room, looked up through the home containing it."""
    host_home = home_for_room(homes, room, homes_strategy)
    if host_home is None:
        return []
    return to_lights(lightbulb_accessories(host_home.accessories, room, lightbulbs_strategy))
