"""Dungeon module -- encounters and victory rewards."""

from rpg_combat.sim.dungeon.encounter import EncounterManager
from rpg_combat.sim.dungeon.rewards import (
    Reward,
    apply_reward,
    compute_reward,
    compute_xp,
    resolve_victory,
)

__all__ = [
    "EncounterManager",
    "Reward",
    "apply_reward",
    "compute_reward",
    "compute_xp",
    "resolve_victory",
]
