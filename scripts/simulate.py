"""Simulate a batch of battles and print a balance report.

Usage:
    uv run python scripts/simulate.py [--runs 10000] [--distance far] [--level 3]
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from rpg_combat.balance.baselines import generate_report, save_report
from rpg_combat.balance.report import generate_text_report
from rpg_combat.sim.config import load_config
from rpg_combat.sim.content.registry import default_catalog
from rpg_combat.sim.core.distance import Distance, DistanceKind

_DEFAULT_STEPS = {
    DistanceKind.NEAR: 3,
    DistanceKind.MID: 10,
    DistanceKind.FAR: 20,
}


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate battles for balance analysis")
    parser.add_argument("--runs", type=int, default=10_000, help="Number of battles")
    parser.add_argument(
        "--distance", choices=[k.value for k in DistanceKind], default="near",
        help="Distance band from home",
    )
    parser.add_argument(
        "--steps", type=int, default=None,
        help="Steps from home (overrides --distance)",
    )
    parser.add_argument("--level", type=int, default=1, help="Hero level")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--run", action="store_true", help="Try to run away first")
    parser.add_argument("--bribe", action="store_true", help="Try to bribe the enemy")
    parser.add_argument("--gold", type=int, default=0, help="Gold available for bribes")
    parser.add_argument("--config", type=str, default=None, help="Balance config JSON")
    parser.add_argument("--output", type=str, default=None, help="Write report JSON here")
    parser.add_argument("--parallel", action="store_true", help="Use multiprocessing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.steps is not None:
        distance = Distance.from_steps(args.steps)
    else:
        kind = DistanceKind(args.distance)
        distance = Distance(kind=kind, steps=_DEFAULT_STEPS[kind])

    config = load_config(args.config)
    catalog = default_catalog()

    print(f"Running {args.runs:,} battles at {distance.kind.value} distance "
          f"({distance.steps} steps, hero level {args.level})...")
    t0 = time.perf_counter()
    report = generate_report(
        catalog, distance,
        num_runs=args.runs, player_level=args.level, base_seed=args.seed,
        config=config, run=args.run, bribe=args.bribe, gold=args.gold,
        parallel=args.parallel,
    )
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    if args.output is not None:
        json_path = Path(args.output)
        save_report(report, json_path)
        print(f"Saved report to {json_path}")

    print()
    print(generate_text_report(report))


if __name__ == "__main__":
    main()
