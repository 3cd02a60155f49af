"""Entry point for applications using LightingKit."""

from __future__ import annotations

from .helpers import (
    home_for_room,
    lights_for_home,
    lights_for_room,
    rooms_for_home,
    to_domain_objects,
)
from .host import HostHomeManager
from .model import Home, Light, Room


class LightingKit:
    """Homes, rooms and lights of a host, queried live on every call."""

    def __init__(self, home_manager: HostHomeManager) -> None:
        """Initialize LightingKit."""
        self.home_manager = home_manager

    @property
    def homes(self) -> list[Home]:
        """All homes."""
        return to_domain_objects(self.home_manager.homes, Home)

    def home(self, room: Room) -> Home | None:
        """Return the home containing the room."""
        host_home = home_for_room(self.home_manager.homes, room)
        if host_home is None:
            return None
        return Home.from_host(host_home)

    def rooms(self, home: Home) -> list[Room]:
        """Return the rooms of a home."""
        return rooms_for_home(self.home_manager.homes, home)

    def lights(self, home: Home) -> list[Light]:
        """Return the lights of a home."""
        return lights_for_home(self.home_manager.homes, home)

    def lights_in_room(self, room: Room) -> list[Light]:
        """Return the lights of a room."""
        return lights_for_room(self.home_manager.homes, room)
