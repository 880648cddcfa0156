"""Combat dice -- every random decision a battle makes.

Each roll is a small method so tests can subclass :class:`CombatDice`
and script outcomes (always hit, never crit, ...) while the rest of the
battle runs unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rpg_combat.sim.config import BalanceConfig
from rpg_combat.sim.core.rng import GameRNG

if TYPE_CHECKING:
    from rpg_combat.sim.content.registry import ClassCatalog
    from rpg_combat.sim.core.classes import CharacterClass
    from rpg_combat.sim.core.distance import Distance


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class CombatDice:
    """Rolls backed by an explicit :class:`GameRNG`.

    Parameters
    ----------
    rng:
        Source of randomness.  Use a seeded RNG for reproducible battles.
    config:
        Balancing coefficients.  Defaults to ``BalanceConfig()``.
    """

    def __init__(self, rng: GameRNG, config: BalanceConfig | None = None) -> None:
        self.rng = rng
        self.config = config or BalanceConfig()

    # -- attack classification -----------------------------------------------

    def miss_chance(self, attacker_speed: int, defender_speed: int) -> float:
        """Faster defenders dodge more often, up to ``miss_max``."""
        cfg = self.config
        chance = cfg.miss_base + cfg.miss_per_speed * (defender_speed - attacker_speed)
        return _clamp(chance, 0.0, cfg.miss_max)

    def is_miss(self, attacker_speed: int, defender_speed: int) -> bool:
        return self.rng.chance(self.miss_chance(attacker_speed, defender_speed))

    def is_critical(self) -> bool:
        return self.rng.chance(self.config.critical_chance)

    def inflicts(self) -> bool:
        return self.rng.chance(self.config.effect_chance)

    def damage(self, base: int) -> int:
        """Spread *base* uniformly by ``damage_spread``; never below 1."""
        spread = self.config.damage_spread
        if spread == 0:
            return max(1, base)
        factor = self.rng.uniform(1 - spread, 1 + spread)
        return max(1, round(base * factor))

    # -- escape attempts -----------------------------------------------------

    def run_away_chance(self, player_speed: int, enemy_speed: int) -> float:
        """Increases with the player's speed advantage."""
        cfg = self.config
        chance = cfg.flee_base + cfg.flee_per_speed * (player_speed - enemy_speed)
        return _clamp(chance, cfg.flee_min, cfg.flee_max)

    def run_away(self, player_speed: int, enemy_speed: int) -> bool:
        return self.rng.chance(self.run_away_chance(player_speed, enemy_speed))

    def bribe(self) -> bool:
        return self.rng.chance(self.config.bribe_chance)

    # -- encounter generation ------------------------------------------------

    def spawns(self, distance: Distance) -> bool:
        """Whether an enemy shows up; never at home."""
        if distance.is_home:
            return False
        return self.rng.chance(self.config.spawn_chance[distance.kind])

    def enemy_level(self, base: int) -> int:
        jitter = self.config.enemy_level_jitter
        return max(1, base + self.rng.random_int(-jitter, jitter))

    def choose_enemy(self, catalog: ClassCatalog, distance: Distance) -> CharacterClass:
        return catalog.random_enemy(distance, self.rng)
