"""Static game content: the class catalog."""

from rpg_combat.sim.content.registry import (
    TIER_WEIGHTS,
    ClassCatalog,
    default_catalog,
)

__all__ = [
    "TIER_WEIGHTS",
    "ClassCatalog",
    "default_catalog",
]
