"""Report generation for simulation output.

Two output formats:
- Batch report: human-readable summary of a BatchResult.
- Run trace: turn-by-turn log of a single SimulationResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_duel.balance.metrics import compute_damage_distribution
from card_duel.balance.models import BatchResult, SideBatchStats

if TYPE_CHECKING:
    from card_duel.sim.telemetry import SideSummary, SimulationResult, TurnSnapshot


def _side_lines(label: str, stats: SideBatchStats) -> list[str]:
    dist = compute_damage_distribution(stats.all_damages)
    t = stats.theoretical
    return [
        f"## {label} (damage taken)",
        f"  Min / Avg / Max:   {stats.damage_min} / {stats.damage_avg:.2f} / {stats.damage_max}",
        f"  Median:            {dist.median:.1f}  (p10={dist.p10:.1f}, p90={dist.p90:.1f})",
        f"  Std dev:           {dist.std:.2f}",
        f"  Theoretical:       {t.min} / {t.avg:.1f} / {t.max}",
    ]


def generate_text_report(batch: BatchResult) -> str:
    """Generate a human-readable summary of a batch."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append("Card Duel Batch Report")
    seed = "random" if batch.base_seed is None else str(batch.base_seed)
    lines.append(f"Runs: {batch.num_runs:,} | Turns: {batch.num_turns} | Base seed: {seed}")
    lines.append("=" * 60)

    lines.append("")
    lines.extend(_side_lines("Protagonist", batch.protagonist))
    lines.append("")
    lines.extend(_side_lines("Antagonist", batch.antagonist))

    p_turns = batch.protagonist.per_turn
    a_turns = batch.antagonist.per_turn
    if p_turns.damage:
        lines.append("")
        lines.append("## Per-turn averages (protagonist | antagonist)")
        lines.append(
            f"  {'turn':>4}  {'damage':>15}  {'resources':>15}"
            f"  {'cards':>13}  {'reactions':>13}"
        )
        for i in range(len(p_turns.damage)):
            lines.append(
                f"  {i:>4}"
                f"  {p_turns.damage[i]:>7.2f}|{a_turns.damage[i]:<7.2f}"
                f"  {p_turns.resources[i]:>7.2f}|{a_turns.resources[i]:<7.2f}"
                f"  {p_turns.cards_remaining[i]:>6.2f}|{a_turns.cards_remaining[i]:<6.2f}"
                f"  {p_turns.reactions[i]:>6.2f}|{a_turns.reactions[i]:<6.2f}"
            )

    return "\n".join(lines)


def _describe_turn(snap: TurnSnapshot) -> str:
    head = f"  [{snap.turn_number:>3}] {snap.attacker:<12}"
    if snap.attack_card is None:
        return f"{head} {snap.action_taken.value}"

    parts = [f"attacks with {snap.attack_card}"]
    parts.append(f"roll {snap.hit_roll} {'HIT' if snap.hit_success else 'miss'}")
    if snap.reaction_occurred:
        parts.append(f"blocked with {snap.defense_card}")
    if snap.damage_dealt:
        parts.append(f"dealt {snap.damage_dealt}")
    if snap.damage_reflected:
        parts.append(f"took {snap.damage_reflected} back")
    if snap.counter_occurred:
        parts.append(f"countered for {snap.counter_damage}")
    return f"{head} " + ", ".join(parts)


def _summary_line(label: str, side: SideSummary) -> str:
    low = "-" if side.min_damage is None else side.min_damage
    high = "-" if side.max_damage is None else side.max_damage
    return (
        f"  {label:<12} took {side.total_damage} "
        f"(hits min={low} avg={side.avg_damage:.2f} max={high}; "
        f"theoretical {side.theoretical_min}/{side.theoretical_avg:.1f}/{side.theoretical_max}) "
        f"cards={side.cards_played} reactions={side.reactions_used} counters={side.counters_used}"
    )


def generate_run_trace(result: SimulationResult) -> str:
    """Turn-by-turn trace of a single match followed by the totals."""
    lines = [f"Match (seed={result.seed}, turns={result.total_turns})"]
    lines.extend(_describe_turn(s) for s in result.turns)
    lines.append("")
    lines.append(_summary_line("Protagonist", result.protagonist))
    lines.append(_summary_line("Antagonist", result.antagonist))
    return "\n".join(lines)
