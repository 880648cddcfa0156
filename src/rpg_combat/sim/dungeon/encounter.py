"""Encounter manager -- spawns enemies and settles battles against the game state.

:class:`EncounterManager` is the seam between the stateless combat core and
the orchestrator that owns a :class:`GameState`: it picks the enemy, runs the
:class:`BattleResolver`, moves gold, pays out rewards and turns a dead hero
into :class:`CharacterDied`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rpg_combat.sim.battle import BattleResolver, BattleResult, BattleState
from rpg_combat.sim.config import BalanceConfig
from rpg_combat.sim.core.entities import Character
from rpg_combat.sim.core.errors import CharacterDied
from rpg_combat.sim.core.events import Event, Heal
from rpg_combat.sim.dungeon.rewards import resolve_victory

if TYPE_CHECKING:
    from rpg_combat.sim.content.registry import ClassCatalog
    from rpg_combat.sim.core.distance import Distance
    from rpg_combat.sim.core.game_state import GameState
    from rpg_combat.sim.mechanics.dice import CombatDice

logger = logging.getLogger(__name__)


class EncounterManager:
    """Runs encounters for one game.

    Parameters
    ----------
    catalog:
        Class table enemies are drawn from.
    dice:
        Random rolls for spawning and for the battle itself.
    config:
        Balance coefficients.  Defaults to the dice's config.
    """

    def __init__(
        self,
        catalog: ClassCatalog,
        dice: CombatDice,
        config: BalanceConfig | None = None,
    ) -> None:
        self.catalog = catalog
        self.dice = dice
        self.config = config or dice.config
        self.resolver = BattleResolver(dice)

    # -- spawning ------------------------------------------------------------

    @staticmethod
    def enemy_base_level(player_level: int, steps: int) -> int:
        """Enemy level before jitter: distance first, hero level second."""
        return max(1, player_level // 2 + steps - 1)

    def spawn_enemy(self, game: GameState, distance: Distance | None = None) -> Character:
        """Create an enemy for the hero's position.

        *distance* overrides the position derived from ``game.steps_from_home``.
        """
        if distance is None:
            distance = game.distance
        enemy_class = self.dice.choose_enemy(self.catalog, distance)
        level = self.dice.enemy_level(
            self.enemy_base_level(game.player.level, distance.steps)
        )
        logger.debug("Spawned %s[%d] at %s", enemy_class.name, level, distance)
        return Character.new(enemy_class, level)

    def maybe_spawn_enemy(self, game: GameState) -> Character | None:
        if not self.dice.spawns(game.distance):
            return None
        return self.spawn_enemy(game)

    # -- battle --------------------------------------------------------------

    def battle(
        self,
        game: GameState,
        enemy: Character,
        run: bool = False,
        bribe: bool = False,
    ) -> list[Event]:
        """Fight *enemy* and settle the outcome into *game*.

        Raises
        ------
        CharacterDied
            The hero was killed.  The exception carries the battle events;
            the caller must reset the game.
        """
        result = self.resolver.resolve(
            game.player, enemy, run=run, bribe=bribe, gold=game.gold,
        )
        events = self.settle(game, enemy, result)
        if result.state is BattleState.PLAYER_DIED:
            raise CharacterDied(game.player, events)
        return events

    def settle(self, game: GameState, enemy: Character, result: BattleResult) -> list[Event]:
        """Apply a resolved battle to *game*: pay the bribe or the victory reward.

        Returns the battle events followed by any reward events.  A lost
        battle changes nothing here.
        """
        events = list(result.events)
        if result.state is BattleState.PLAYER_BRIBED:
            game.spend(result.bribe_cost)
        elif result.state is BattleState.PLAYER_WON:
            events.extend(resolve_victory(game, enemy, self.config))

        logger.debug("%s vs %s: %s in %d rounds",
                     game.player, enemy, result.state.value, result.rounds)
        return events

    # -- home ----------------------------------------------------------------

    def rest(self, game: GameState) -> list[Event]:
        """Fully heal the hero; only possible at home."""
        if not game.is_home:
            return []
        recovered, cured = game.player.heal_full()
        if recovered == 0 and not cured:
            return []
        return [Heal(item=None, recovered=recovered, healed=cured)]
