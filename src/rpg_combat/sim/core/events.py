"""Combat events -- the ordered record a battle hands to its renderer.

Every event is a frozen Pydantic model tagged by a ``type`` literal, and
``Event`` is the closed union of all of them, so a renderer can dispatch
exhaustively with ``match event.type`` and a log of events round-trips
through JSON via :data:`EVENT_ADAPTER`.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from rpg_combat.sim.core.classes import StatusEffectKind


# ---------------------------------------------------------------------------
# Attack outcomes
# ---------------------------------------------------------------------------

class AttackKind(str, Enum):
    REGULAR = "regular"
    CRITICAL = "critical"
    EFFECT = "effect"
    MISS = "miss"


class AttackOutcome(BaseModel):
    """Classification of one attacking turn.

    ``effect`` is set only for :attr:`AttackKind.EFFECT`, and ``damage``
    is always 0 for :attr:`AttackKind.MISS`.
    """

    model_config = {"frozen": True}

    kind: AttackKind
    damage: int = Field(default=0, ge=0)
    effect: StatusEffectKind | None = None

    @classmethod
    def regular(cls, damage: int) -> AttackOutcome:
        return cls(kind=AttackKind.REGULAR, damage=damage)

    @classmethod
    def critical(cls, damage: int) -> AttackOutcome:
        return cls(kind=AttackKind.CRITICAL, damage=damage)

    @classmethod
    def with_effect(cls, effect: StatusEffectKind, damage: int) -> AttackOutcome:
        return cls(kind=AttackKind.EFFECT, damage=damage, effect=effect)

    @classmethod
    def miss(cls) -> AttackOutcome:
        return cls(kind=AttackKind.MISS)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class _EventBase(BaseModel):
    model_config = {"frozen": True}


class EnemyAppears(_EventBase):
    type: Literal["enemy_appears"] = "enemy_appears"
    enemy: str
    level: int


class PlayerAttack(_EventBase):
    type: Literal["player_attack"] = "player_attack"
    enemy: str
    kind: AttackKind
    damage: int
    effect: StatusEffectKind | None = None


class EnemyAttack(_EventBase):
    type: Literal["enemy_attack"] = "enemy_attack"
    enemy: str
    kind: AttackKind
    damage: int
    effect: StatusEffectKind | None = None


class StatusEffectDamage(_EventBase):
    type: Literal["status_effect_damage"] = "status_effect_damage"
    target: str
    effect: StatusEffectKind
    damage: int


class BattleWon(_EventBase):
    type: Literal["battle_won"] = "battle_won"
    xp: int
    levels_up: int
    gold: int


class BattleLost(_EventBase):
    type: Literal["battle_lost"] = "battle_lost"


class ChestFound(_EventBase):
    type: Literal["chest_found"] = "chest_found"
    items: list[str] = Field(default_factory=list)
    gold: int = 0


class TombstoneFound(_EventBase):
    type: Literal["tombstone_found"] = "tombstone_found"
    items: list[str] = Field(default_factory=list)
    gold: int = 0


class Bribe(_EventBase):
    type: Literal["bribe"] = "bribe"
    cost: int
    """Gold paid.  0 means the bribe was refused or unaffordable."""


class RunAway(_EventBase):
    type: Literal["run_away"] = "run_away"
    success: bool


class Heal(_EventBase):
    type: Literal["heal"] = "heal"
    item: str | None = None
    """Item used, or ``None`` when resting at home."""
    recovered: int = 0
    healed: bool = False
    """True if a status effect was cured."""


class LevelUp(_EventBase):
    type: Literal["level_up"] = "level_up"
    level: int


class ItemBought(_EventBase):
    type: Literal["item_bought"] = "item_bought"
    item: str
    cost: int


class ItemUsed(_EventBase):
    type: Literal["item_used"] = "item_used"
    item: str


Event = Annotated[
    Union[
        EnemyAppears,
        PlayerAttack,
        EnemyAttack,
        StatusEffectDamage,
        BattleWon,
        BattleLost,
        ChestFound,
        TombstoneFound,
        Bribe,
        RunAway,
        Heal,
        LevelUp,
        ItemBought,
        ItemUsed,
    ],
    Field(discriminator="type"),
]

EVENT_ADAPTER: TypeAdapter[list[Event]] = TypeAdapter(list[Event])
