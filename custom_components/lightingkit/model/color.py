"""Color characteristic and its hue conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from homeassistant.util.color import color_RGB_to_hsv

from ..const import CHARACTERISTIC_TYPE_COLOR, HUE_DEGREES
from .characteristic import Characteristic


@dataclass(frozen=True)
class HSBColor:
    """A color as normalized hue, saturation and brightness (all 0-1)."""

    hue: float
    saturation: float = 1.0
    brightness: float = 1.0

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> HSBColor:
        """Create a color from 8-bit RGB components."""
        hue, saturation, value = color_RGB_to_hsv(red, green, blue)
        return cls(hue / HUE_DEGREES, saturation / 100, value / 100)


# Float noise allowance so that e.g. 179.99999999999997 truncates to 180
_HUE_EPSILON = 1e-9


def hue_from_color(color: HSBColor) -> int:
    """Convert a color to whole hue degrees in [0, 360) by truncation.

    Saturation and brightness are dropped.
    """
    return int(color.hue * HUE_DEGREES + _HUE_EPSILON) % HUE_DEGREES


def color_from_hue(hue: int) -> HSBColor:
    """Convert hue degrees to a fully saturated, full brightness color."""
    return HSBColor(hue / HUE_DEGREES, 1.0, 1.0)


class Color(Characteristic[HSBColor]):
    """Color of a light, backed by a hue characteristic.

    Only the hue survives a round trip through the device.
    """

    characteristic_type = CHARACTERISTIC_TYPE_COLOR

    def _from_raw(self, raw: Any) -> HSBColor | None:
        if isinstance(raw, bool) or not isinstance(raw, int):
            return None
        return color_from_hue(raw)

    def _to_raw(self, value: HSBColor) -> int:
        return hue_from_color(value)
