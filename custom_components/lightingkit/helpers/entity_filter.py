"""Entity include/exclude filtering for LightingKit."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from homeassistant.helpers.entityfilter import (
    CONF_EXCLUDE_ENTITIES,
    CONF_INCLUDE_ENTITIES,
)

from ..const import CONF_INCLUDE_EXCLUDE_MODE, MODE_EXCLUDE, MODE_INCLUDE


@dataclass
class EntityFilter:
    """Decides which light entities are exposed as lightbulb services."""

    include_exclude_mode: str = MODE_EXCLUDE
    include_entities: list[str] = field(default_factory=list)
    exclude_entities: list[str] = field(default_factory=list)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> EntityFilter:
        """Create from config entry options."""
        return cls(
            include_exclude_mode=options.get(CONF_INCLUDE_EXCLUDE_MODE, MODE_EXCLUDE),
            include_entities=list(options.get(CONF_INCLUDE_ENTITIES, [])),
            exclude_entities=list(options.get(CONF_EXCLUDE_ENTITIES, [])),
        )

    def should_include_entity(self, entity_id: str) -> bool:
        """Check if entity should be included based on include/exclude mode."""
        if self.include_exclude_mode == MODE_INCLUDE:
            return entity_id in self.include_entities
        if self.include_exclude_mode == MODE_EXCLUDE:
            return entity_id not in self.exclude_entities
        return True
