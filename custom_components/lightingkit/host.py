"""Capability protocols for the host framework's object graph.

LightingKit never touches concrete host types. Homes, rooms, accessories,
services and characteristics are accessed through these structural protocols,
so any host (Home Assistant, or a test double) can supply them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class HostCharacteristic(Protocol):
    """A single readable/writable attribute of a device."""

    characteristic_type: str

    @property
    def value(self) -> Any:
        """Last known raw value, with no freshness guarantee."""

    async def async_write_value(self, value: Any) -> None:
        """Write a raw value to the device.

        Raises the host's own error when the write fails.
        """


class HostService(Protocol):
    """A group of characteristics exposed by an accessory."""

    service_type: str

    @property
    def characteristics(self) -> Sequence[HostCharacteristic]:
        """Characteristics of this service."""


class HostRoom(Protocol):
    """A sub-container of a home."""

    unique_id: str
    name: str


class HostAccessory(Protocol):
    """A physical device."""

    unique_id: str
    name: str

    @property
    def category(self) -> str:
        """Category tag of the accessory."""

    @property
    def room(self) -> HostRoom | None:
        """Room the accessory is assigned to."""

    @property
    def services(self) -> Sequence[HostService]:
        """Services exposed by the accessory."""


class HostHome(Protocol):
    """A top-level container of rooms and accessories."""

    unique_id: str
    name: str

    @property
    def rooms(self) -> Sequence[HostRoom]:
        """Rooms of the home."""

    @property
    def accessories(self) -> Sequence[HostAccessory]:
        """Accessories of the home."""


class HostHomeManager(Protocol):
    """Entry point supplying every home known to the host."""

    @property
    def homes(self) -> Sequence[HostHome]:
        """All homes."""
