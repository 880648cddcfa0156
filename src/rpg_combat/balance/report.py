"""Human-readable text report for a :class:`BalanceReport`."""

from __future__ import annotations

from rpg_combat.balance.models import BalanceReport


def generate_text_report(report: BalanceReport) -> str:
    """Generate a human-readable summary of the report."""
    g = report.global_metrics
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(
        f"Balance Report: {report.distance} distance, hero level {report.player_level}"
    )
    lines.append(f"Runs: {report.num_runs:,} | Generated: {report.generated_at}")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Global Stats")
    lines.append(f"  Win rate:        {g.win_rate:.1%} ({g.wins}/{g.total_battles})")
    lines.append(f"  Death rate:      {g.death_rate:.1%} ({g.deaths}/{g.total_battles})")
    lines.append(f"  Fled / bribed:   {g.fled} / {g.bribed}")
    lines.append(f"  Avg rounds:      {g.avg_rounds:.1f}")
    lines.append(f"  Avg HP lost:     {g.avg_hp_lost:.1f}")
    lines.append(f"  Avg XP:          {g.avg_xp:.1f}")
    lines.append(f"  Avg gold:        {g.avg_gold:.0f}")

    lines.append("")
    lines.append("## Tier Frequencies")
    for tier, share in report.tier_frequencies.items():
        lines.append(f"  {tier:10s}  {share:.1%}")

    # Deadliest first
    by_wr = sorted(report.class_metrics, key=lambda c: c.win_rate)
    lines.append("")
    lines.append("## Enemy Classes (lowest win rate first)")
    for c in by_wr:
        lines.append(
            f"  {c.enemy_class:10s}  {c.rarity:10s}"
            f"  wr={c.win_rate:.2f} ({c.win_rate_delta:+.3f})"
            f"  n={c.encounters}"
            f"  lvl={c.avg_enemy_level:.1f}"
            f"  rounds={c.avg_rounds:.1f}"
            f"  hp_lost={c.avg_hp_lost:.1f}"
        )

    lines.append("")
    return "\n".join(lines)
