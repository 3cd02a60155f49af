"""Helper modules for LightingKit."""

from .collection_helpers import (
    brightness_characteristic,
    color_characteristic,
    home_for_room,
    light_service,
    lightbulb_accessories,
    lights_for_home,
    lights_for_room,
    power_characteristic,
    rooms_for_home,
    to_domain_objects,
    to_lights,
)
from .strategies import HomesByRoomStrategy, LightbulbsByRoomStrategy, is_lighting

__all__ = [
    "HomesByRoomStrategy",
    "LightbulbsByRoomStrategy",
    "brightness_characteristic",
    "color_characteristic",
    "home_for_room",
    "is_lighting",
    "light_service",
    "lightbulb_accessories",
    "lights_for_home",
    "lights_for_room",
    "power_characteristic",
    "rooms_for_home",
    "to_domain_objects",
    "to_lights",
]
