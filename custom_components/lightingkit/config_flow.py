"""Config flow."""
from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant.components.light import DOMAIN as LIGHT_DOMAIN
from homeassistant.config_entries import (
    ConfigEntry,
    ConfigFlow,
    ConfigFlowResult,
    OptionsFlow,
)
from homeassistant.const import ATTR_FRIENDLY_NAME, CONF_NAME
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers import config_validation as cv, entity_registry as er
from homeassistant.helpers.entityfilter import (
    CONF_EXCLUDE_ENTITIES,
    CONF_INCLUDE_ENTITIES,
)

from .const import (
    CONF_INCLUDE_EXCLUDE_MODE,
    DEFAULT_NAME,
    DOMAIN,
    MODE_EXCLUDE,
    MODE_INCLUDE,
)

INCLUDE_EXCLUDE_MODES = [MODE_EXCLUDE, MODE_INCLUDE]

LIGHTINGKIT_CREATE_SCHEMA = vol.Schema({vol.Required(CONF_NAME, default=DEFAULT_NAME): str})


class LightingKitConfigFlow(ConfigFlow, domain=DOMAIN):
    """Config flow."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        """User initiated a flow via the user interface."""
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()

        if user_input is not None:
            options = {
                CONF_NAME: user_input[CONF_NAME],
                CONF_INCLUDE_EXCLUDE_MODE: MODE_EXCLUDE,
                CONF_INCLUDE_ENTITIES: [],
                CONF_EXCLUDE_ENTITIES: [],
            }
            return self.async_create_entry(title=user_input[CONF_NAME], data={}, options=options)
        return self.async_show_form(
            step_id="user", data_schema=LIGHTINGKIT_CREATE_SCHEMA
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> LightingKitOptionsFlowHandler:
        """Get the options flow for this handler."""
        return LightingKitOptionsFlowHandler()


class LightingKitOptionsFlowHandler(OptionsFlow):
    """Handle LightingKit options."""

    lk_options: dict[str, Any]

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Choose whether to include or exclude lights."""
        self.lk_options = dict(self.config_entry.options)

        if user_input is not None:
            self.lk_options.update(user_input)
            if user_input[CONF_INCLUDE_EXCLUDE_MODE] == MODE_INCLUDE:
                return await self.async_step_include()
            return await self.async_step_exclude()

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Required(
                        CONF_INCLUDE_EXCLUDE_MODE,
                        default=self.lk_options.get(CONF_INCLUDE_EXCLUDE_MODE, MODE_EXCLUDE),
                    ): vol.In(INCLUDE_EXCLUDE_MODES),
                }
            ),
        )

    async def async_step_include(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Choose lights to include."""
        return self._async_entity_step(
            "include", CONF_INCLUDE_ENTITIES, user_input, include_hidden=True
        )

    async def async_step_exclude(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Choose lights to exclude."""
        return self._async_entity_step("exclude", CONF_EXCLUDE_ENTITIES, user_input)

    @callback
    def _async_entity_step(
        self,
        step_id: str,
        conf_key: str,
        user_input: dict[str, Any] | None,
        include_hidden: bool = False,
    ) -> ConfigFlowResult:
        """Show or complete an entity selection step."""
        if user_input is not None:
            self.lk_options.update(user_input)
            return self.async_create_entry(title="", data=self.lk_options)

        all_lights = _async_get_matching_entities(self.hass, include_hidden)
        # Strip out entities that no longer exist to prevent error in the UI
        default_value = [
            entity_id
            for entity_id in self.lk_options.get(conf_key, [])
            if entity_id in all_lights
        ]

        return self.async_show_form(
            step_id=step_id,
            data_schema=vol.Schema(
                {
                    vol.Optional(conf_key, default=default_value): cv.multi_select(
                        all_lights
                    )
                }
            ),
        )


def _async_get_matching_entities(
    hass: HomeAssistant,
    include_hidden: bool = False,
) -> dict[str, str]:
    """Fetch all light entities."""
    ent_reg = er.async_get(hass)
    return {
        state.entity_id: (
            f"{state.attributes.get(ATTR_FRIENDLY_NAME, state.entity_id)} ({state.entity_id})"
        )
        for state in sorted(
            hass.states.async_all(LIGHT_DOMAIN),
            key=lambda item: item.entity_id,
        )
        if not _exclude_by_entity_registry(ent_reg, state.entity_id, include_hidden)
    }


def _exclude_by_entity_registry(
    ent_reg: er.EntityRegistry,
    entity_id: str,
    include_hidden: bool,
) -> bool:
    """Filter out hidden entities and ones with an entity category."""
    return bool(
        (entry := ent_reg.async_get(entity_id))
        and (
            (not include_hidden and entry.hidden_by is not None)
            or entry.entity_category is not None
        )
    )
