"""Core simulation primitives for the battle simulator."""

from rpg_combat.sim.core.classes import (
    CharacterClass,
    Inflicts,
    Rarity,
    StatusEffectKind,
)
from rpg_combat.sim.core.distance import Distance, DistanceKind
from rpg_combat.sim.core.entities import Character, Equipment
from rpg_combat.sim.core.errors import CatalogError, CharacterDied
from rpg_combat.sim.core.events import AttackKind, AttackOutcome, Event
from rpg_combat.sim.core.game_state import GameState
from rpg_combat.sim.core.rng import GameRNG
from rpg_combat.sim.core.stats import Stat

__all__ = [
    # rng
    "GameRNG",
    # stats and classes
    "Stat",
    "CharacterClass",
    "Inflicts",
    "Rarity",
    "StatusEffectKind",
    # distance
    "Distance",
    "DistanceKind",
    # entities
    "Character",
    "Equipment",
    # events
    "AttackKind",
    "AttackOutcome",
    "Event",
    # errors
    "CatalogError",
    "CharacterDied",
    # game_state
    "GameState",
]
