"""Constants for the LightingKit integration."""

DOMAIN = "lightingkit"

CONF_INCLUDE_EXCLUDE_MODE = "include_exclude_mode"

MODE_INCLUDE = "include"
MODE_EXCLUDE = "exclude"

DEFAULT_NAME = "LightingKit"

# Characteristic type tags
CHARACTERISTIC_TYPE_BRIGHTNESS = "brightness"
CHARACTERISTIC_TYPE_POWER_STATE = "power_state"
CHARACTERISTIC_TYPE_COLOR = "color"

# Service type tags
SERVICE_TYPE_LIGHTBULB = "lightbulb"

# Accessory categories
CATEGORY_LIGHTBULB = "lightbulb"
CATEGORY_OTHER = "other"

LIGHTING_CATEGORIES = {CATEGORY_LIGHTBULB}

# Hue is written as whole degrees, brightness as a percentage
HUE_DEGREES = 360
BRIGHTNESS_PERCENT_MAX = 100
