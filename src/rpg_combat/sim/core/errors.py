"""Exceptions raised by the combat core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from rpg_combat.sim.core.entities import Character
    from rpg_combat.sim.core.events import Event


class CharacterDied(Exception):
    """The player died in battle.

    Fatal to the current run: the orchestrator must discard the
    persisted progress and reset.  ``events`` holds everything the
    battle emitted, ending with ``BattleLost``, so it can still be
    rendered.
    """

    def __init__(self, player: Character, events: Sequence[Event] = ()) -> None:
        super().__init__(f"{player} died")
        self.player = player
        self.events = list(events)


class CatalogError(RuntimeError):
    """The class catalog broke one of its invariants.

    Programming or data error, never a retryable condition.
    """
