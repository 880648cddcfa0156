"""Report generation: run sims, compute metrics, save/load JSON.

Orchestrates BatchRunner -> metric computation -> BalanceReport model.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from rpg_combat.balance.metrics import (
    compute_class_metrics,
    compute_global_metrics,
    compute_tier_frequencies,
)
from rpg_combat.balance.models import BalanceReport
from rpg_combat.sim.runner import BatchRunner

if TYPE_CHECKING:
    from rpg_combat.sim.config import BalanceConfig
    from rpg_combat.sim.content.registry import ClassCatalog
    from rpg_combat.sim.core.distance import Distance

logger = logging.getLogger(__name__)


def generate_report(
    catalog: ClassCatalog,
    distance: Distance,
    num_runs: int = 10_000,
    player_level: int = 1,
    base_seed: int = 42,
    config: BalanceConfig | None = None,
    run: bool = False,
    bribe: bool = False,
    gold: int = 0,
    parallel: bool = False,
) -> BalanceReport:
    """Run a batch of battles and summarize it as a :class:`BalanceReport`.

    Parameters
    ----------
    catalog:
        Class table enemies are drawn from.
    distance:
        Where every battle of the batch takes place.
    num_runs:
        Number of battles to simulate.
    player_level:
        Level of the fresh hero in every run.
    base_seed:
        Starting seed for reproducible runs.
    run, bribe, gold:
        Escape strategy passed to every battle.
    """
    runner = BatchRunner(catalog, config)
    battles = runner.run_batch(
        num_runs, distance,
        player_level=player_level, base_seed=base_seed,
        run=run, bribe=bribe, gold=gold, parallel=parallel,
    )

    global_metrics = compute_global_metrics(battles)
    logger.info(
        "Simulated %d battles: win rate %.3f", num_runs, global_metrics.win_rate,
    )

    return BalanceReport(
        distance=distance.kind.value,
        player_level=player_level,
        num_runs=num_runs,
        generated_at=datetime.now(timezone.utc).isoformat(),
        global_metrics=global_metrics,
        class_metrics=compute_class_metrics(battles, global_metrics.win_rate),
        tier_frequencies=compute_tier_frequencies(battles),
    )


def save_report(report: BalanceReport, path: Path) -> None:
    """Save report to JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report.model_dump(), indent=2))


def load_report(path: Path) -> BalanceReport:
    """Load report from JSON file."""
    data = json.loads(path.read_text())
    return BalanceReport.model_validate(data)
