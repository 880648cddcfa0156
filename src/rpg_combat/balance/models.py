"""Pydantic v2 models for balance reports.

These models define the structured output of balance analysis:
global battle statistics, per-enemy-class metrics and the observed
tier frequencies.  All are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel


class GlobalMetrics(BaseModel):
    """Aggregate battle statistics."""

    total_battles: int
    wins: int
    deaths: int
    fled: int
    bribed: int
    win_rate: float
    death_rate: float
    avg_rounds: float
    """Averaged over battles that were actually fought."""
    avg_hp_lost: float
    avg_xp: float
    avg_gold: float


class ClassMetrics(BaseModel):
    """Per-enemy-class balance metrics."""

    enemy_class: str
    rarity: str
    encounters: int
    wins: int
    win_rate: float
    win_rate_delta: float
    """win_rate - global win rate."""
    avg_enemy_level: float
    avg_rounds: float
    avg_hp_lost: float
    avg_status_damage: float


class BalanceReport(BaseModel):
    """Top-level balance report."""

    distance: str
    """Distance band the batch was simulated at."""
    player_level: int
    num_runs: int
    generated_at: str
    """ISO 8601 timestamp."""
    global_metrics: GlobalMetrics
    class_metrics: list[ClassMetrics]
    tier_frequencies: dict[str, float]
    """Observed share of encounters per rarity tier."""
