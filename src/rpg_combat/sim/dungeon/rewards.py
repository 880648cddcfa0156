"""Victory rewards -- experience, gold and level-ups.

Rewards are deterministic:

- XP: the enemy's max HP, multiplied by ``1 + diff`` when the enemy out-levels
  the hero and floor-divided by ``1 + diff`` otherwise.
- Gold: ``gold_per_level`` per enemy level.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from rpg_combat.sim.config import BalanceConfig
from rpg_combat.sim.core.events import BattleWon, Event, LevelUp

if TYPE_CHECKING:
    from rpg_combat.sim.core.entities import Character
    from rpg_combat.sim.core.game_state import GameState

logger = logging.getLogger(__name__)


class Reward(BaseModel):
    model_config = {"frozen": True}

    xp: int = Field(ge=0)
    gold: int = Field(ge=0)


def compute_xp(player: Character, enemy: Character) -> int:
    """XP for beating *enemy*, scaled by the level gap."""
    if enemy.level > player.level:
        return enemy.max_hp * (1 + enemy.level - player.level)
    return enemy.max_hp // (1 + player.level - enemy.level)


def compute_reward(
    player: Character,
    enemy: Character,
    config: BalanceConfig | None = None,
) -> Reward:
    config = config or BalanceConfig()
    return Reward(
        xp=compute_xp(player, enemy),
        gold=config.gold_per_level * enemy.level,
    )


def apply_reward(player: Character, reward: Reward) -> int:
    """Grant the XP part of *reward*.  Returns the levels gained."""
    return player.add_experience(reward.xp)


def resolve_victory(
    game: GameState,
    enemy: Character,
    config: BalanceConfig | None = None,
) -> list[Event]:
    """Pay out a won battle into *game*.

    Emits one ``BattleWon`` followed by one ``LevelUp`` per level gained.
    """
    player = game.player
    start_level = player.level
    reward = compute_reward(player, enemy, config)
    levels = apply_reward(player, reward)
    game.earn(reward.gold)

    events: list[Event] = [BattleWon(xp=reward.xp, levels_up=levels, gold=reward.gold)]
    for level in range(start_level + 1, start_level + levels + 1):
        events.append(LevelUp(level=level))
        logger.info("%s reached level %d", player.name, level)
    return events
