"""Attack classification and application.

One attacking turn produces exactly one :class:`AttackOutcome`, decided
in this order:

    miss -> critical -> status effect (if the class inflicts one) -> regular

Damage before the dice spread is ``max(1, attack - defense)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rpg_combat.sim.core.events import AttackKind, AttackOutcome

from .status_effects import inflict

if TYPE_CHECKING:
    from rpg_combat.sim.core.entities import Character
    from rpg_combat.sim.mechanics.dice import CombatDice


def base_damage(attacker: Character, defender: Character) -> int:
    """Attack minus defense, floored at 1 so every hit matters."""
    return max(1, attacker.attack - defender.defense)


def classify_attack(
    attacker: Character,
    defender: Character,
    dice: CombatDice,
) -> AttackOutcome:
    """Roll the outcome of *attacker* hitting *defender*."""
    if dice.is_miss(attacker.speed, defender.speed):
        return AttackOutcome.miss()

    if dice.is_critical():
        damage = dice.damage(base_damage(attacker, defender))
        return AttackOutcome.critical(damage * dice.config.critical_multiplier)

    inflicts = attacker.character_class.inflicts
    if inflicts is not None and dice.inflicts():
        return AttackOutcome.with_effect(inflicts.kind, inflicts.magnitude)

    return AttackOutcome.regular(dice.damage(base_damage(attacker, defender)))


def apply_attack(defender: Character, outcome: AttackOutcome) -> int:
    """Apply *outcome* to *defender*.

    Returns the HP actually lost.  An effect outcome also inflicts its
    status on a defender that survives the hit.
    """
    hp_lost = defender.take_damage(outcome.damage)
    if outcome.kind == AttackKind.EFFECT and outcome.effect is not None:
        inflict(defender, outcome.effect, outcome.damage)
    return hp_lost
