"""Game snapshot handed between the orchestrator and the combat core.

Houses the persistent state of a run: the hero, the gold wallet and the
hero's location expressed as steps from home.  Persistence and path
mapping happen outside this package; this model only needs to be
serializable with ``model_dump_json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from rpg_combat.sim.core.distance import Distance
from rpg_combat.sim.core.entities import Character

if TYPE_CHECKING:
    from rpg_combat.sim.content.registry import ClassCatalog


class GameState(BaseModel):
    """Top-level state for a single hero's run."""

    player: Character
    gold: int = Field(default=0, ge=0)
    steps_from_home: int = Field(default=0, ge=0)

    @classmethod
    def new(cls, catalog: ClassCatalog) -> GameState:
        return cls(player=Character.hero(catalog.hero))

    # -- queries -------------------------------------------------------------

    @property
    def distance(self) -> Distance:
        return Distance.from_steps(self.steps_from_home)

    @property
    def is_home(self) -> bool:
        return self.steps_from_home == 0

    # -- wallet --------------------------------------------------------------

    def spend(self, amount: int) -> None:
        """Remove *amount* gold; the caller checks affordability first."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        if amount > self.gold:
            raise ValueError(f"cannot spend {amount} gold, only {self.gold} available")
        self.gold -= amount

    def earn(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self.gold += amount

    # -- lifecycle -----------------------------------------------------------

    def reset(self, catalog: ClassCatalog) -> None:
        """Start over after the hero died: fresh hero, no gold, at home."""
        self.player = Character.hero(catalog.hero)
        self.gold = 0
        self.steps_from_home = 0
