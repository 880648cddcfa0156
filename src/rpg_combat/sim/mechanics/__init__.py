"""Core combat mechanics for the battle simulator.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from rpg_combat.sim.mechanics import (
        CombatDice,
        base_damage, classify_attack, apply_attack,
        inflict, tick, clear, has_status,
    )
"""

# -- dice --------------------------------------------------------------------
from .dice import CombatDice

# -- damage ------------------------------------------------------------------
from .damage import apply_attack, base_damage, classify_attack

# -- status effects ----------------------------------------------------------
from .status_effects import clear, has_status, inflict, tick

__all__ = [
    # dice
    "CombatDice",
    # damage
    "base_damage",
    "classify_attack",
    "apply_attack",
    # status effects
    "inflict",
    "tick",
    "clear",
    "has_status",
]
