"""Status effect lifecycle -- inflict, tick, clear, query.

A character holds at most one damage-over-time effect.  Its magnitude
is recorded when it is inflicted (``Character.status_damage``) and is
dealt again on every tick until a heal or death clears it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rpg_combat.sim.core.classes import StatusEffectKind
    from rpg_combat.sim.core.entities import Character


def inflict(target: Character, kind: StatusEffectKind, magnitude: int) -> None:
    """Apply *kind* to *target*, replacing any effect it already had.

    Effects never stack: the new magnitude overwrites the old one.
    Dead characters are left untouched.
    """
    if magnitude < 0:
        raise ValueError(f"magnitude must be >= 0, got {magnitude}")
    if target.is_dead:
        return
    target.status_effect = kind
    target.status_damage = magnitude


def tick(holder: Character) -> int:
    """Deal one tick of the active effect to *holder*.

    Returns the HP lost, or 0 if *holder* has no active effect.
    """
    if holder.status_effect is None:
        return 0
    return holder.take_damage(holder.status_damage)


def clear(holder: Character) -> bool:
    """Remove any active effect.  Returns True if one was removed."""
    had_effect = holder.status_effect is not None
    holder.status_effect = None
    holder.status_damage = 0
    return had_effect


def has_status(holder: Character, kind: StatusEffectKind | None = None) -> bool:
    """Check for an active effect, optionally of a specific *kind*."""
    if holder.status_effect is None:
        return False
    return kind is None or holder.status_effect == kind
