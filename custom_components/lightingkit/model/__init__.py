"""Domain model for LightingKit."""

from .characteristic import Brightness, Characteristic, Power
from .color import Color, HSBColor, color_from_hue, hue_from_color
from .objects import Home, Light, Room

__all__ = [
    "Brightness",
    "Characteristic",
    "Color",
    "HSBColor",
    "Home",
    "Light",
    "Power",
    "Room",
    "color_from_hue",
    "hue_from_color",
]
