"""Combatant models for the battle simulator.

All data classes use Pydantic v2 BaseModel for validation and
serialization, so a hero can be dumped into (and restored from) the
game snapshot owned by the persistence layer.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from rpg_combat.sim.core.classes import CharacterClass, StatusEffectKind

# XP curve: the cumulative total needed to leave a level is
# floor(XP_BASE * level ** XP_EXPONENT).  Part of the save format.
XP_BASE = 30
XP_EXPONENT = 1.5

EQUIPMENT_STRENGTH_PER_LEVEL = 10


# ---------------------------------------------------------------------------
# Equipment
# ---------------------------------------------------------------------------

class Equipment(BaseModel):
    """A sword (adds attack) or a shield (adds defense)."""

    model_config = {"frozen": True}

    kind: Literal["sword", "shield"]
    level: int = Field(default=1, ge=1)

    @property
    def strength(self) -> int:
        return self.level * EQUIPMENT_STRENGTH_PER_LEVEL

    def __str__(self) -> str:
        return f"{self.kind}[{self.level}]"


# ---------------------------------------------------------------------------
# Character
# ---------------------------------------------------------------------------

class Character(BaseModel):
    """A combatant instantiated from a :class:`CharacterClass` at a level.

    Stats other than HP are derived from the class and level on every
    read, so a level-up only needs to recompute ``max_hp``.
    """

    character_class: CharacterClass
    level: int = Field(default=1, ge=0)
    xp: int = Field(default=0, ge=0)
    """Cumulative experience.  Only the player earns any."""

    max_hp: int
    current_hp: int
    status_effect: StatusEffectKind | None = None
    status_damage: int = 0
    """Damage per tick recorded when ``status_effect`` was inflicted."""

    sword: Equipment | None = None
    shield: Equipment | None = None
    is_player: bool = False

    @model_validator(mode="after")
    def _check_hp_bounds(self) -> Character:
        if not 0 <= self.current_hp <= self.max_hp:
            raise ValueError(
                f"current_hp must be within [0, {self.max_hp}], got {self.current_hp}"
            )
        return self

    # -- construction --------------------------------------------------------

    @classmethod
    def new(
        cls,
        character_class: CharacterClass,
        level: int = 1,
        is_player: bool = False,
    ) -> Character:
        """Build a full-health character of *character_class* at *level*."""
        hp = character_class.hp.at(level)
        return cls(
            character_class=character_class,
            level=level,
            max_hp=hp,
            current_hp=hp,
            is_player=is_player,
        )

    @classmethod
    def hero(cls, character_class: CharacterClass, level: int = 1) -> Character:
        """Build the player character; only enemies may be level 0."""
        if level < 1:
            raise ValueError(f"hero level must be >= 1, got {level}")
        return cls.new(character_class, level, is_player=True)

    # -- derived stats -------------------------------------------------------

    @property
    def name(self) -> str:
        return self.character_class.name

    @property
    def speed(self) -> int:
        return self.character_class.speed.at(self.level)

    @property
    def attack(self) -> int:
        sword = self.sword.strength if self.sword is not None else 0
        return self.character_class.strength.at(self.level) + sword

    @property
    def defense(self) -> int:
        return self.shield.strength if self.shield is not None else 0

    @property
    def xp_for_next(self) -> int:
        """Total XP at which this character reaches the next level."""
        return math.floor(XP_BASE * self.level ** XP_EXPONENT)

    @property
    def is_dead(self) -> bool:
        return self.current_hp <= 0

    # -- damage / heal -------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Apply *amount* damage, clamped at 0 HP.

        Returns the HP actually lost.  Dying clears any status effect.
        """
        if amount <= 0:
            return 0
        hp_lost = min(self.current_hp, amount)
        self.current_hp -= hp_lost
        if self.is_dead:
            self.status_effect = None
            self.status_damage = 0
        return hp_lost

    def heal(self, amount: int) -> int:
        """Heal *amount* HP, capped at ``max_hp``.  Returns HP recovered."""
        if amount <= 0:
            return 0
        recovered = min(self.max_hp - self.current_hp, amount)
        self.current_hp += recovered
        return recovered

    def heal_full(self) -> tuple[int, bool]:
        """Restore all HP and cure any status effect.

        Returns ``(recovered, cured)``.
        """
        recovered = self.heal(self.max_hp)
        cured = self.status_effect is not None
        self.status_effect = None
        self.status_damage = 0
        return recovered, cured

    # -- progression ---------------------------------------------------------

    def add_experience(self, xp: int) -> int:
        """Add *xp* and apply every level-up it pays for.

        ``current_hp`` is carried over, not refilled.  Returns the number
        of levels gained.
        """
        if xp < 0:
            raise ValueError(f"xp must be >= 0, got {xp}")
        self.xp += xp
        levels = 0
        while self.xp >= self.xp_for_next:
            self.level += 1
            self.max_hp = self.character_class.hp.at(self.level)
            levels += 1
        self.current_hp = min(self.current_hp, self.max_hp)
        return levels

    def __str__(self) -> str:
        return f"{self.name}[{self.level}]"
