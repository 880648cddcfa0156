"""Balance analysis: batch metrics and reports."""

from rpg_combat.balance.baselines import generate_report, load_report, save_report
from rpg_combat.balance.metrics import (
    compute_class_metrics,
    compute_global_metrics,
    compute_tier_frequencies,
)
from rpg_combat.balance.models import BalanceReport, ClassMetrics, GlobalMetrics
from rpg_combat.balance.report import generate_text_report

__all__ = [
    "BalanceReport",
    "ClassMetrics",
    "GlobalMetrics",
    "compute_class_metrics",
    "compute_global_metrics",
    "compute_tier_frequencies",
    "generate_report",
    "generate_text_report",
    "load_report",
    "save_report",
]
