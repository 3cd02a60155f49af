"""State extraction utilities for light entities."""

from __future__ import annotations

from homeassistant.components.light import (
    ATTR_BRIGHTNESS,
    ATTR_HS_COLOR,
    ATTR_SUPPORTED_COLOR_MODES,
    brightness_supported,
    color_supported,
)
from homeassistant.const import STATE_OFF, STATE_ON
from homeassistant.core import State

from ..const import BRIGHTNESS_PERCENT_MAX, HUE_DEGREES


def get_brightness_percent(state: State) -> int | None:
    """Get brightness as 0-100 percentage.

    Home Assistant uses 0-255 for brightness. Lights that are off report no
    brightness, which maps to None.
    """
    brightness = state.attributes.get(ATTR_BRIGHTNESS)
    if isinstance(brightness, bool) or not isinstance(brightness, (int, float)):
        return None
    return round(brightness / 255 * BRIGHTNESS_PERCENT_MAX)


def get_power_state(state: State) -> bool | None:
    """Get on/off as a bool, or None while unavailable or unknown."""
    if state.state == STATE_ON:
        return True
    if state.state == STATE_OFF:
        return False
    return None


def get_hue_degrees(state: State) -> int | None:
    """Get the hue of the current color in whole degrees."""
    hs_color = state.attributes.get(ATTR_HS_COLOR)
    if not hs_color:
        return None
    return int(hs_color[0]) % HUE_DEGREES


def get_saturation(state: State) -> float | None:
    """Get the saturation of the current color, 0-100."""
    hs_color = state.attributes.get(ATTR_HS_COLOR)
    if not hs_color:
        return None
    return float(hs_color[1])


def supports_brightness(state: State) -> bool:
    """Check if the light can be dimmed."""
    return brightness_supported(state.attributes.get(ATTR_SUPPORTED_COLOR_MODES))


def supports_color(state: State) -> bool:
    """Check if the light supports hue/saturation colors."""
    return color_supported(state.attributes.get(ATTR_SUPPORTED_COLOR_MODES))
