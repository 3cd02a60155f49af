"""Command execution utilities for light entities."""

import logging

from homeassistant.components.light import (
    ATTR_BRIGHTNESS_PCT,
    ATTR_HS_COLOR,
    DOMAIN as LIGHT_DOMAIN,
)
from homeassistant.const import ATTR_ENTITY_ID, SERVICE_TURN_OFF, SERVICE_TURN_ON
from homeassistant.core import HomeAssistant

from .state_helpers import get_saturation

_LOGGER = logging.getLogger(__name__)

FULL_SATURATION = 100.0


class CommandExecutor:
    """Executes characteristic writes on Home Assistant light entities.

    Calls are blocking so that service errors reach the caller.
    """

    def __init__(self, hass: HomeAssistant) -> None:
        """Initialize the command executor."""
        self.hass = hass

    async def async_set_power(self, entity_id: str, on: bool) -> None:
        """Turn a light on or off."""
        service = SERVICE_TURN_ON if on else SERVICE_TURN_OFF
        _LOGGER.debug("Calling %s.%s for %s", LIGHT_DOMAIN, service, entity_id)
        await self.hass.services.async_call(
            LIGHT_DOMAIN, service, {ATTR_ENTITY_ID: entity_id}, blocking=True
        )

    async def async_set_brightness(self, entity_id: str, percent: int) -> None:
        """Set brightness as a 0-100 percentage."""
        _LOGGER.debug("Setting brightness of %s to %s%%", entity_id, percent)
        await self.hass.services.async_call(
            LIGHT_DOMAIN,
            SERVICE_TURN_ON,
            {ATTR_ENTITY_ID: entity_id, ATTR_BRIGHTNESS_PCT: percent},
            blocking=True,
        )

    async def async_set_hue(self, entity_id: str, hue: int) -> None:
        """Set the hue in degrees.

        The light keeps its current saturation, or becomes fully saturated
        when it has none.
        """
        saturation = FULL_SATURATION
        state = self.hass.states.get(entity_id)
        if state is not None:
            current = get_saturation(state)
            if current is not None:
                saturation = current

        _LOGGER.debug("Setting hue of %s to %s", entity_id, hue)
        await self.hass.services.async_call(
            LIGHT_DOMAIN,
            SERVICE_TURN_ON,
            {ATTR_ENTITY_ID: entity_id, ATTR_HS_COLOR: (float(hue), saturation)},
            blocking=True,
        )
