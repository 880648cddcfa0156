"""Shared fixtures: the shipped catalog and scriptable combat dice."""

from __future__ import annotations

from typing import Callable

import pytest

from rpg_combat.sim.config import BalanceConfig
from rpg_combat.sim.content.registry import ClassCatalog, default_catalog
from rpg_combat.sim.core.classes import CharacterClass, Inflicts, StatusEffectKind
from rpg_combat.sim.core.rng import GameRNG
from rpg_combat.sim.core.stats import Stat
from rpg_combat.sim.mechanics.dice import CombatDice


class ScriptedDice(CombatDice):
    """Dice with fixed outcomes: never misses, never crits, no spread.

    Flip the attributes to script a different battle.  ``misses`` may be
    a list of booleans consumed one attack at a time.
    """

    def __init__(self, config: BalanceConfig | None = None, **outcomes) -> None:
        super().__init__(GameRNG(0), config)
        self.misses: list[bool] | bool = outcomes.pop("misses", False)
        self.critical: bool = outcomes.pop("critical", False)
        self.effect: bool = outcomes.pop("effect", False)
        self.flee: bool = outcomes.pop("flee", False)
        self.bribes: bool = outcomes.pop("bribes", False)
        self.spawn: bool = outcomes.pop("spawn", True)
        self.level_offset: int = outcomes.pop("level_offset", 0)
        self.enemy: CharacterClass | None = outcomes.pop("enemy", None)
        if outcomes:
            raise TypeError(f"unknown outcomes: {sorted(outcomes)}")

    def is_miss(self, attacker_speed: int, defender_speed: int) -> bool:
        if isinstance(self.misses, list):
            return self.misses.pop(0) if self.misses else False
        return self.misses

    def is_critical(self) -> bool:
        return self.critical

    def inflicts(self) -> bool:
        return self.effect

    def damage(self, base: int) -> int:
        return max(1, base)

    def run_away(self, player_speed: int, enemy_speed: int) -> bool:
        return self.flee

    def bribe(self) -> bool:
        return self.bribes

    def spawns(self, distance) -> bool:
        return self.spawn and not distance.is_home

    def enemy_level(self, base: int) -> int:
        return max(1, base + self.level_offset)

    def choose_enemy(self, catalog, distance) -> CharacterClass:
        if self.enemy is not None:
            return self.enemy
        return super().choose_enemy(catalog, distance)


@pytest.fixture(scope="session")
def catalog() -> ClassCatalog:
    """The shipped catalog, loaded once."""
    return default_catalog()


@pytest.fixture
def make_dice() -> Callable[..., ScriptedDice]:
    """Factory for :class:`ScriptedDice`, e.g. ``make_dice(critical=True)``."""
    return ScriptedDice


@pytest.fixture
def hero_class() -> CharacterClass:
    """A hero with 30 HP at level 1."""
    return CharacterClass(
        name="hero",
        hp=Stat.of(23, 7),
        strength=Stat.of(12, 3),
        speed=Stat.of(11, 2),
    )


@pytest.fixture
def snake_class() -> CharacterClass:
    """A slow, poisonous enemy for status effect scenarios."""
    return CharacterClass(
        name="snake",
        hp=Stat.of(13, 3),
        strength=Stat.of(7, 2),
        speed=Stat.of(6, 2),
        inflicts=Inflicts(kind=StatusEffectKind.POISONED, magnitude=5),
    )
