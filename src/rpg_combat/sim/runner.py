"""Batch simulation runner -- many seeded battles for balance analysis.

Each run is independent: a fresh hero at the requested level meets one
enemy spawned for the requested distance, and the battle is resolved to
completion.  Runs are keyed by ``base_seed + i`` so a batch is fully
reproducible, sequentially or in parallel.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import TYPE_CHECKING

from rpg_combat.sim.config import BalanceConfig
from rpg_combat.sim.content.registry import default_catalog
from rpg_combat.sim.core.entities import Character
from rpg_combat.sim.core.events import BattleWon
from rpg_combat.sim.core.game_state import GameState
from rpg_combat.sim.core.rng import GameRNG
from rpg_combat.sim.dungeon.encounter import EncounterManager
from rpg_combat.sim.mechanics.dice import CombatDice
from rpg_combat.sim.telemetry import BattleTelemetry

if TYPE_CHECKING:
    from rpg_combat.sim.content.registry import ClassCatalog
    from rpg_combat.sim.core.distance import Distance

logger = logging.getLogger(__name__)


def _run_single_battle(
    catalog: ClassCatalog,
    config: BalanceConfig,
    seed: int,
    distance: Distance,
    player_level: int = 1,
    run: bool = False,
    bribe: bool = False,
    gold: int = 0,
) -> BattleTelemetry:
    """Run one battle with the given seed and return its telemetry."""
    master_rng = GameRNG(seed)
    dice = CombatDice(master_rng.fork("combat"), config)

    game = GameState(
        player=Character.hero(catalog.hero, player_level),
        gold=gold,
        steps_from_home=distance.steps,
    )
    manager = EncounterManager(catalog, dice, config)
    enemy = manager.spawn_enemy(game, distance)

    player = game.player
    hp_start = player.current_hp
    result = manager.resolver.resolve(
        player, enemy, run=run, bribe=bribe, gold=game.gold,
    )
    events = manager.settle(game, enemy, result)

    xp = reward_gold = levels = 0
    for event in events:
        if isinstance(event, BattleWon):
            xp, reward_gold, levels = event.xp, event.gold, event.levels_up

    return BattleTelemetry(
        seed=seed,
        enemy_class=enemy.name,
        rarity=catalog.tier_of(enemy.name).value,
        enemy_level=enemy.level,
        player_level=player_level,
        result=result.state.value,
        rounds=result.rounds,
        player_hp_start=hp_start,
        player_hp_end=player.current_hp,
        damage_dealt=result.damage_dealt,
        damage_taken=result.damage_taken,
        status_damage_taken=result.status_damage_taken,
        xp=xp,
        gold=reward_gold,
        levels_gained=levels,
        bribe_cost=result.bribe_cost,
    )


def _worker_run_single(args: tuple) -> BattleTelemetry:
    """Top-level worker function for multiprocessing (must be picklable)."""
    config_json, seed, distance, options = args
    config = BalanceConfig.model_validate_json(config_json)
    return _run_single_battle(default_catalog(), config, seed, distance, **options)


class BatchRunner:
    """Runs many independent battles, optionally in parallel."""

    def __init__(
        self,
        catalog: ClassCatalog,
        config: BalanceConfig | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config or BalanceConfig()

    def run_batch(
        self,
        n_runs: int,
        distance: Distance,
        player_level: int = 1,
        base_seed: int = 42,
        run: bool = False,
        bribe: bool = False,
        gold: int = 0,
        parallel: bool = False,
    ) -> list[BattleTelemetry]:
        """Run *n_runs* battles at *distance*, seeded ``base_seed + i``.

        Parallel workers reload the default catalog, so a custom catalog
        is only honoured in sequential mode.
        """
        if n_runs < 0:
            raise ValueError(f"n_runs must be >= 0, got {n_runs}")
        seeds = [base_seed + i for i in range(n_runs)]
        options = {
            "player_level": player_level,
            "run": run,
            "bribe": bribe,
            "gold": gold,
        }
        logger.info(
            "Running %d battles at %s distance (hero level %d)",
            n_runs, distance.kind.value, player_level,
        )

        if parallel and n_runs > 1:
            if self.catalog is not default_catalog():
                logger.warning(
                    "Parallel workers load the shipped catalog; %r is ignored",
                    self.catalog,
                )
            return self._run_parallel(seeds, distance, options)
        return self._run_sequential(seeds, distance, options)

    def _run_sequential(
        self,
        seeds: list[int],
        distance: Distance,
        options: dict,
    ) -> list[BattleTelemetry]:
        return [
            _run_single_battle(self.catalog, self.config, seed, distance, **options)
            for seed in seeds
        ]

    def _run_parallel(
        self,
        seeds: list[int],
        distance: Distance,
        options: dict,
    ) -> list[BattleTelemetry]:
        """Run battles in parallel using multiprocessing.

        Rather than pickling the catalog, each worker reloads the shipped
        one; the config travels as JSON.
        """
        config_json = self.config.model_dump_json()
        work_items = [(config_json, seed, distance, options) for seed in seeds]

        n_workers = min(len(seeds), multiprocessing.cpu_count() or 1)

        with multiprocessing.Pool(processes=n_workers) as pool:
            results = pool.map(_worker_run_single, work_items)

        return results
