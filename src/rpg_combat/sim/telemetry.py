"""Telemetry data model for per-battle statistics.

:class:`BattleTelemetry` records one simulated battle: who fought, how it
ended, and how much HP, XP and gold moved.  It is a plain ``dataclass``
(not a Pydantic model) to keep collection cheap during batch runs and
picklable across worker processes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BattleTelemetry:
    """Stats from a single battle.

    Attributes
    ----------
    seed:
        The master RNG seed of this run.
    enemy_class:
        Name of the enemy's class.
    rarity:
        The enemy's tier (``"common"``, ``"rare"`` or ``"legendary"``).
    enemy_level / player_level:
        Levels at the start of the battle.
    result:
        Terminal :class:`~rpg_combat.sim.battle.BattleState` value, e.g.
        ``"player_won"``.
    rounds:
        Attack rounds fought (0 after a successful escape).
    player_hp_start / player_hp_end:
        Hero HP before and after the battle.
    damage_dealt / damage_taken:
        HP removed by attacks, by and from the hero.
    status_damage_taken:
        HP the hero lost to status effect ticks.
    xp / gold / levels_gained:
        Victory payout (0 unless the hero won).
    bribe_cost:
        Gold paid to end the battle with a bribe.
    """

    seed: int
    enemy_class: str
    rarity: str
    enemy_level: int
    player_level: int
    result: str
    rounds: int
    player_hp_start: int
    player_hp_end: int
    damage_dealt: int
    damage_taken: int
    status_damage_taken: int = 0
    xp: int = 0
    gold: int = 0
    levels_gained: int = 0
    bribe_cost: int = 0

    @property
    def hp_lost(self) -> int:
        return self.player_hp_start - self.player_hp_end

    @property
    def won(self) -> bool:
        return self.result == "player_won"
