"""Filtering strategies deciding which host objects belong to a room."""

from __future__ import annotations

from ..const import LIGHTING_CATEGORIES
from ..host import HostAccessory, HostHome
from ..model import Room


def is_lighting(accessory: HostAccessory) -> bool:
    """Check if an accessory is in a lighting category."""
    return accessory.category in LIGHTING_CATEGORIES


class HomesByRoomStrategy:
    """Includes a home when it contains the room."""

    def include(self, home: HostHome, room: Room) -> bool:
        """Return True if any room of the home is the given room."""
        return any(room.matches(host_room) for host_room in home.rooms)


class LightbulbsByRoomStrategy:
    """Includes an accessory when it is a light assigned to the room."""

    def include(self, accessory: HostAccessory, room: Room) -> bool:
        """Return True if the accessory is a light in the given room."""
        return is_lighting(accessory) and room.matches(accessory.room)
