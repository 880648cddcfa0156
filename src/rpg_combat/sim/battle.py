"""Battle resolver -- runs one hero-versus-enemy fight to a terminal state.

The resolver is a small state machine::

    ONGOING -> PLAYER_FLED | PLAYER_BRIBED | PLAYER_WON | PLAYER_DIED

Escape attempts (run away, then bribe) are made once, before the first
round.  Each round the faster character attacks first (ties go to the
player), then status effects carried into the round tick.  Every step
is recorded as an :mod:`event <rpg_combat.sim.core.events>` in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from rpg_combat.sim.core.events import (
    BattleLost,
    Bribe,
    EnemyAppears,
    EnemyAttack,
    Event,
    PlayerAttack,
    RunAway,
    StatusEffectDamage,
)
from rpg_combat.sim.mechanics.damage import apply_attack, classify_attack
from rpg_combat.sim.mechanics.status_effects import tick

if TYPE_CHECKING:
    from rpg_combat.sim.core.entities import Character
    from rpg_combat.sim.mechanics.dice import CombatDice

logger = logging.getLogger(__name__)


class BattleState(str, Enum):
    ONGOING = "ongoing"
    PLAYER_WON = "player_won"
    PLAYER_DIED = "player_died"
    PLAYER_FLED = "player_fled"
    PLAYER_BRIBED = "player_bribed"

    @property
    def is_terminal(self) -> bool:
        return self is not BattleState.ONGOING


@dataclass
class BattleResult:
    """What a resolved battle hands back to the orchestrator.

    Attributes
    ----------
    state:
        The terminal state reached.
    events:
        Every event emitted, in order.
    rounds:
        Number of attack rounds fought (0 after a successful escape).
    bribe_cost:
        Gold the orchestrator must deduct after ``PLAYER_BRIBED``.
    damage_dealt / damage_taken / status_damage_taken:
        HP totals, for telemetry.
    """

    state: BattleState
    events: list[Event] = field(default_factory=list)
    rounds: int = 0
    bribe_cost: int = 0
    damage_dealt: int = 0
    damage_taken: int = 0
    status_damage_taken: int = 0


class BattleResolver:
    """Resolves battles with the rolls of a :class:`CombatDice`."""

    def __init__(self, dice: CombatDice) -> None:
        self.dice = dice
        self.config = dice.config

    def resolve(
        self,
        player: Character,
        enemy: Character,
        run: bool = False,
        bribe: bool = False,
        gold: int = 0,
    ) -> BattleResult:
        """Fight until a terminal state is reached.

        Parameters
        ----------
        player, enemy:
            Live combatants; both are mutated in place.
        run:
            Try to run away before fighting.
        bribe:
            Try to bribe the enemy before fighting.
        gold:
            Gold the player can offer.  The resolver never touches the
            wallet itself; it reports ``bribe_cost`` instead.
        """
        if player.is_dead or enemy.is_dead:
            raise ValueError("both combatants must be alive to start a battle")

        result = BattleResult(state=BattleState.ONGOING)
        result.events.append(EnemyAppears(enemy=enemy.name, level=enemy.level))
        logger.debug("%s meets %s", player, enemy)

        if run and self._try_run_away(player, enemy, result):
            return result
        if bribe and self._try_bribe(enemy, gold, result):
            return result

        while not result.state.is_terminal:
            if result.rounds >= self.config.max_rounds:
                raise RuntimeError(
                    f"battle between {player} and {enemy} did not end "
                    f"within {self.config.max_rounds} rounds"
                )
            self._play_round(player, enemy, result)

        if result.state is BattleState.PLAYER_DIED:
            result.events.append(BattleLost())
            logger.info("%s was killed by %s", player, enemy)
        return result

    # ------------------------------------------------------------------
    # Escape attempts
    # ------------------------------------------------------------------

    def _try_run_away(
        self, player: Character, enemy: Character, result: BattleResult,
    ) -> bool:
        success = self.dice.run_away(player.speed, enemy.speed)
        result.events.append(RunAway(success=success))
        if success:
            result.state = BattleState.PLAYER_FLED
        return success

    def _try_bribe(self, enemy: Character, gold: int, result: BattleResult) -> bool:
        cost = self.bribe_cost(enemy)
        if gold >= cost and self.dice.bribe():
            result.events.append(Bribe(cost=cost))
            result.bribe_cost = cost
            result.state = BattleState.PLAYER_BRIBED
            return True
        result.events.append(Bribe(cost=0))
        return False

    def bribe_cost(self, enemy: Character) -> int:
        return self.config.bribe_cost_per_level * enemy.level

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def _play_round(
        self, player: Character, enemy: Character, result: BattleResult,
    ) -> None:
        result.rounds += 1
        # Only effects already active at the start of the round tick in it.
        carried = [c for c in (player, enemy) if c.status_effect is not None]

        if player.speed >= enemy.speed:
            order = ((player, enemy), (enemy, player))
        else:
            order = ((enemy, player), (player, enemy))

        for attacker, defender in order:
            if attacker.is_dead or defender.is_dead:
                break
            self._attack(attacker, defender, result)

        if not (player.is_dead or enemy.is_dead):
            for holder in carried:
                if holder.status_effect is None:
                    continue
                effect = holder.status_effect
                hp_lost = tick(holder)
                result.events.append(
                    StatusEffectDamage(target=holder.name, effect=effect, damage=hp_lost)
                )
                if holder.is_player:
                    result.status_damage_taken += hp_lost
                if holder.is_dead:
                    break

        if enemy.is_dead:
            result.state = BattleState.PLAYER_WON
        elif player.is_dead:
            result.state = BattleState.PLAYER_DIED

    def _attack(
        self, attacker: Character, defender: Character, result: BattleResult,
    ) -> None:
        outcome = classify_attack(attacker, defender, self.dice)
        hp_lost = apply_attack(defender, outcome)
        logger.debug(
            "round %d: %s -> %s %s (-%d hp)",
            result.rounds, attacker, defender, outcome.kind.value, hp_lost,
        )
        if attacker.is_player:
            result.damage_dealt += hp_lost
            result.events.append(PlayerAttack(
                enemy=defender.name, kind=outcome.kind,
                damage=hp_lost, effect=outcome.effect,
            ))
        else:
            result.damage_taken += hp_lost
            result.events.append(EnemyAttack(
                enemy=attacker.name, kind=outcome.kind,
                damage=hp_lost, effect=outcome.effect,
            ))
