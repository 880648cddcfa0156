"""Balancing parameters for the combat simulator.

Every probability and payout coefficient the battle resolver, the dice
and the reward step use lives on :class:`BalanceConfig`, so balance
experiments only need a JSON file, never a code change.

Lookup order for :func:`load_config`:

1. an explicit *path* argument,
2. the ``RPG_COMBAT_CONFIG`` environment variable,
3. the built-in defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, field_validator, model_validator

from rpg_combat.sim.core.distance import DistanceKind

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RPG_COMBAT_CONFIG"

Probability = Annotated[float, Field(ge=0.0, le=1.0)]


def _default_spawn_chance() -> dict[DistanceKind, float]:
    return {
        DistanceKind.NEAR: 1 / 3,
        DistanceKind.MID: 1 / 2,
        DistanceKind.FAR: 2 / 3,
    }


class BalanceConfig(BaseModel):
    """Tunable combat and reward coefficients."""

    model_config = {"frozen": True, "extra": "forbid"}

    # -- attack classification -----------------------------------------------
    miss_base: float = Field(default=0.05, ge=0.0, le=1.0)
    miss_per_speed: float = Field(default=0.01, ge=0.0)
    """Extra miss chance per point the defender is faster than the attacker."""
    miss_max: float = Field(default=0.5, ge=0.0, lt=1.0)
    critical_chance: float = Field(default=0.05, ge=0.0, le=1.0)
    critical_multiplier: int = Field(default=2, ge=1)
    effect_chance: float = Field(default=0.2, ge=0.0, le=1.0)
    damage_spread: float = Field(default=0.2, ge=0.0, lt=1.0)
    """Regular damage varies uniformly by +/- this fraction."""

    # -- escape attempts -----------------------------------------------------
    flee_base: float = Field(default=0.5, ge=0.0, le=1.0)
    flee_per_speed: float = Field(default=0.02, ge=0.0)
    flee_min: float = Field(default=0.05, ge=0.0, le=1.0)
    flee_max: float = Field(default=0.95, ge=0.0, le=1.0)
    bribe_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    bribe_cost_per_level: int = Field(default=50, ge=0)

    # -- rewards and spawning ------------------------------------------------
    gold_per_level: int = Field(default=50, ge=0)
    enemy_level_jitter: int = Field(default=1, ge=0)
    spawn_chance: dict[DistanceKind, Probability] = Field(default_factory=_default_spawn_chance)
    """Per distance kind; kinds missing from a config file keep their default."""

    max_rounds: int = Field(default=10_000, ge=1)
    """Safety net only: a battle that reaches it is an internal fault."""

    @field_validator("spawn_chance", mode="after")
    @classmethod
    def _fill_spawn_chance(cls, value: dict[DistanceKind, float]) -> dict[DistanceKind, float]:
        return {**_default_spawn_chance(), **value}

    @model_validator(mode="after")
    def _check_ranges(self) -> BalanceConfig:
        if self.flee_min > self.flee_max:
            raise ValueError(
                f"flee_min ({self.flee_min}) must not exceed flee_max ({self.flee_max})"
            )
        if self.miss_base > self.miss_max:
            raise ValueError(
                f"miss_base ({self.miss_base}) must not exceed miss_max ({self.miss_max})"
            )
        return self

    @classmethod
    def from_file(cls, path: str | Path) -> BalanceConfig:
        """Parse a JSON file; unknown keys are rejected."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


def load_config(path: str | Path | None = None) -> BalanceConfig:
    """Resolve the active :class:`BalanceConfig` (see module docstring)."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return BalanceConfig()
    logger.info("Loading balance config from %s", path)
    return BalanceConfig.from_file(path)
