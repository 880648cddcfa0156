"""Pure metric computation functions for balance analysis.

All functions take a list of BattleTelemetry and return structured metrics.
No side effects, no I/O.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import TYPE_CHECKING

from rpg_combat.balance.models import ClassMetrics, GlobalMetrics
from rpg_combat.sim.core.classes import Rarity

if TYPE_CHECKING:
    from rpg_combat.sim.telemetry import BattleTelemetry

_FOUGHT = frozenset({"player_won", "player_died"})


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_global_metrics(battles: list[BattleTelemetry]) -> GlobalMetrics:
    """Compute aggregate battle statistics."""
    total = len(battles)
    if total == 0:
        return GlobalMetrics(
            total_battles=0, wins=0, deaths=0, fled=0, bribed=0,
            win_rate=0.0, death_rate=0.0, avg_rounds=0.0,
            avg_hp_lost=0.0, avg_xp=0.0, avg_gold=0.0,
        )

    results = Counter(b.result for b in battles)
    wins = results["player_won"]
    deaths = results["player_died"]
    fought = [b for b in battles if b.result in _FOUGHT]

    return GlobalMetrics(
        total_battles=total,
        wins=wins,
        deaths=deaths,
        fled=results["player_fled"],
        bribed=results["player_bribed"],
        win_rate=wins / total,
        death_rate=deaths / total,
        avg_rounds=_mean([b.rounds for b in fought]),
        avg_hp_lost=_mean([b.hp_lost for b in battles]),
        avg_xp=_mean([b.xp for b in battles]),
        avg_gold=_mean([b.gold for b in battles]),
    )


def compute_class_metrics(
    battles: list[BattleTelemetry],
    global_wr: float,
) -> list[ClassMetrics]:
    """Compute per-enemy-class metrics, sorted by class name."""
    by_class: dict[str, list[BattleTelemetry]] = defaultdict(list)
    for b in battles:
        by_class[b.enemy_class].append(b)

    results: list[ClassMetrics] = []
    for name in sorted(by_class):
        group = by_class[name]
        wins = sum(1 for b in group if b.won)
        win_rate = wins / len(group)
        fought = [b for b in group if b.result in _FOUGHT]

        results.append(ClassMetrics(
            enemy_class=name,
            rarity=group[0].rarity,
            encounters=len(group),
            wins=wins,
            win_rate=win_rate,
            win_rate_delta=win_rate - global_wr,
            avg_enemy_level=_mean([b.enemy_level for b in group]),
            avg_rounds=_mean([b.rounds for b in fought]),
            avg_hp_lost=_mean([b.hp_lost for b in group]),
            avg_status_damage=_mean([b.status_damage_taken for b in group]),
        ))

    return results


def compute_tier_frequencies(battles: list[BattleTelemetry]) -> dict[str, float]:
    """Observed share of encounters per rarity tier.

    Every tier is present in the result, with 0.0 when never drawn.
    """
    counts = Counter(b.rarity for b in battles)
    total = len(battles)
    return {
        rarity.value: (counts[rarity.value] / total if total else 0.0)
        for rarity in Rarity
    }
