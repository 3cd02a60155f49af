"""LightingKit integration.

Maps Home Assistant areas, devices and light entities onto a small domain
model of homes, rooms and lights with typed brightness, power and color.
"""

from __future__ import annotations

import logging

from homeassistant import config_entries, core

from .const import DOMAIN
from .hass_host import async_get_home_manager
from .helpers.entity_filter import EntityFilter
from .kit import LightingKit

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: core.HomeAssistant, entry: config_entries.ConfigEntry) -> bool:
    """Set up LightingKit from a config entry."""
    hass.data.setdefault(DOMAIN, {})

    entity_filter = EntityFilter.from_options(entry.options)
    home_manager = await async_get_home_manager(hass, entity_filter)
    hass.data[DOMAIN][entry.entry_id] = LightingKit(home_manager)
    entry.async_on_unload(entry.add_update_listener(_async_update_listener))

    _LOGGER.info(
        "LightingKit set up for %s (%s mode)",
        hass.config.location_name,
        entity_filter.include_exclude_mode,
    )
    return True


async def _async_update_listener(hass: core.HomeAssistant, entry: config_entries.ConfigEntry) -> None:
    """Reload when the entity filter options change."""
    await hass.config_entries.async_reload(entry.entry_id)


async def async_setup(hass: core.HomeAssistant, config: dict) -> bool:
    """Set up the LightingKit component."""
    return True


async def async_unload_entry(hass: core.HomeAssistant, entry: config_entries.ConfigEntry) -> bool:
    """Unload a config entry."""
    hass.data[DOMAIN].pop(entry.entry_id)
    _LOGGER.info("LightingKit unloaded")
    return True


@core.callback
def async_get_lighting_kit(hass: core.HomeAssistant) -> LightingKit | None:
    """Return the first loaded LightingKit, if any."""
    kits = hass.data.get(DOMAIN, {})
    return next(iter(kits.values()), None)
