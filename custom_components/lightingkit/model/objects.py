"""Home, Room and Light domain objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..host import HostAccessory, HostHome, HostRoom
from .characteristic import Brightness, Power
from .color import Color


@dataclass
class Home:
    """A home, identified by its host identifier."""

    id: str
    name: str

    @classmethod
    def from_host(cls, home: HostHome) -> Home:
        """Create from a host home."""
        return cls(id=home.unique_id, name=home.name)

    def matches(self, home: HostHome) -> bool:
        """Check if this home represents the given host home."""
        return self.id == home.unique_id


@dataclass
class Room:
    """A room of a home."""

    id: str
    name: str

    @classmethod
    def from_host(cls, room: HostRoom) -> Room:
        """Create from a host room."""
        return cls(id=room.unique_id, name=room.name)

    def matches(self, room: HostRoom | None) -> bool:
        """Check if this room represents the given host room."""
        return room is not None and self.id == room.unique_id


@dataclass
class Light:
    """A lighting accessory and the characteristics it exposes.

    Each characteristic is None when the accessory does not provide it.
    """

    id: str
    name: str
    brightness: Brightness | None = field(default=None, compare=False)
    power: Power | None = field(default=None, compare=False)
    color: Color | None = field(default=None, compare=False)

    @classmethod
    def from_host(cls, accessory: HostAccessory) -> Light:
        """Create from a host accessory, without characteristics."""
        return cls(id=accessory.unique_id, name=accessory.name)
