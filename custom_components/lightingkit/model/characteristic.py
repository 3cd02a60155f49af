"""Characteristic adapters wrapping host characteristic handles."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from ..const import CHARACTERISTIC_TYPE_BRIGHTNESS, CHARACTERISTIC_TYPE_POWER_STATE
from ..host import HostCharacteristic

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")
_C = TypeVar("_C", bound="Characteristic[Any]")


class Characteristic(Generic[_T]):
    """Typed read/write facade over one host characteristic.

    Holds no state of its own: every read goes to the handle's cached value and
    every write goes straight to the host.
    """

    characteristic_type: str

    def __init__(self, host_characteristic: HostCharacteristic) -> None:
        """Initialize the adapter. Use from_host to get type checking."""
        self.host_characteristic = host_characteristic

    @classmethod
    def from_host(
        cls: type[_C], host_characteristic: HostCharacteristic | None
    ) -> _C | None:
        """Wrap a handle, or return None when it is missing or of another type."""
        if host_characteristic is None:
            return None
        if host_characteristic.characteristic_type != cls.characteristic_type:
            return None
        return cls(host_characteristic)

    @property
    def value(self) -> _T | None:
        """The current typed value, or None if the raw value is unusable."""
        return self._from_raw(self.host_characteristic.value)

    async def async_set(self, value: _T) -> None:
        """Write a new value to the device.

        Errors raised by the host are passed through unchanged.
        """
        raw = self._to_raw(value)
        _LOGGER.debug("Writing %s=%s", self.characteristic_type, raw)
        await self.host_characteristic.async_write_value(raw)

    def _from_raw(self, raw: Any) -> _T | None:
        raise NotImplementedError

    def _to_raw(self, value: _T) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} value={self.value!r}>"


class Brightness(Characteristic[int]):
    """Brightness of a light, 0-100."""

    characteristic_type = CHARACTERISTIC_TYPE_BRIGHTNESS

    def _from_raw(self, raw: Any) -> int | None:
        # bool is an int subclass but never a brightness
        if isinstance(raw, bool) or not isinstance(raw, int):
            return None
        return raw

    def _to_raw(self, value: int) -> int:
        return int(value)


class Power(Characteristic[bool]):
    """On/off state of a light."""

    characteristic_type = CHARACTERISTIC_TYPE_POWER_STATE

    def _from_raw(self, raw: Any) -> bool | None:
        if not isinstance(raw, bool):
            return None
        return raw

    def _to_raw(self, value: bool) -> bool:
        return bool(value)
