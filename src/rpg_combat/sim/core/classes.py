"""Character class definitions -- the archetypes every combatant is built from."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from rpg_combat.sim.core.stats import Stat


class StatusEffectKind(str, Enum):
    """Damage-over-time conditions a class can inflict."""

    BURNING = "burning"
    POISONED = "poisoned"


class Rarity(str, Enum):
    """Enemy rarity tier.  Controls how often a class is drawn at a distance."""

    COMMON = "common"
    RARE = "rare"
    LEGENDARY = "legendary"


class Inflicts(BaseModel):
    """Status effect applied by a class's ``Effect`` attacks."""

    model_config = {"frozen": True}

    kind: StatusEffectKind
    magnitude: int = Field(ge=0)
    """Damage dealt on infliction and on every later tick."""


class CharacterClass(BaseModel):
    """Immutable archetype: every instance shares the same stat curves.

    Classes are loaded once from the catalog table and never mutated.
    """

    model_config = {"frozen": True}

    name: str
    hp: Stat
    strength: Stat
    speed: Stat
    inflicts: Inflicts | None = None

    def __str__(self) -> str:
        return self.name
