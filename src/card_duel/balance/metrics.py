"""Pure aggregation functions over simulation results.

All functions take telemetry or damage lists and return structured
models.  No side effects, no I/O.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from card_duel.balance.models import (
    BatchResult,
    DamageDistribution,
    PerTurnAverages,
    SideBatchStats,
    TheoreticalDamage,
)

if TYPE_CHECKING:
    from card_duel.sim.telemetry import SideSummary, SimulationResult

_SIDES = ("protagonist", "antagonist")


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def compute_per_turn_averages(
    results: list[SimulationResult],
    side: str,
    num_turns: int,
) -> PerTurnAverages:
    """Average each per-turn series for *side* across every run.

    Turn *t* averages over the runs that reached it; turns no run reached
    are omitted.
    """
    averages = PerTurnAverages()
    for turn_idx in range(num_turns):
        snaps = [r.turns[turn_idx] for r in results if turn_idx < len(r.turns)]
        if not snaps:
            continue
        averages.resources.append(_mean([getattr(s, f"{side}_resources") for s in snaps]))
        averages.damage.append(_mean([getattr(s, f"{side}_damage") for s in snaps]))
        averages.cards_remaining.append(
            _mean([getattr(s, f"{side}_cards_remaining") for s in snaps])
        )
        averages.reactions.append(_mean([getattr(s, f"{side}_reactions") for s in snaps]))
    return averages


def compute_side_stats(
    results: list[SimulationResult],
    side: str,
    num_turns: int,
) -> SideBatchStats:
    """Damage aggregates for one side (``"protagonist"`` or ``"antagonist"``)."""
    summaries: list[SideSummary] = [getattr(r, side) for r in results]
    damages = [s.total_damage for s in summaries]

    stats = SideBatchStats(
        damage_min=min(damages) if damages else 0,
        damage_avg=_mean(damages),
        damage_max=max(damages) if damages else 0,
        all_damages=damages,
        per_turn=compute_per_turn_averages(results, side, num_turns),
    )
    # Bounds derive from the static deck configuration, identical every run.
    if summaries:
        first = summaries[0]
        stats.theoretical = TheoreticalDamage(
            min=first.theoretical_min,
            avg=first.theoretical_avg,
            max=first.theoretical_max,
        )
    return stats


def aggregate_batch_results(
    results: list[SimulationResult],
    num_turns: int,
    base_seed: int | None = None,
) -> BatchResult:
    """Fold individual match results into a :class:`BatchResult`."""
    return BatchResult(
        num_runs=len(results),
        num_turns=num_turns,
        base_seed=base_seed,
        **{side: compute_side_stats(results, side, num_turns) for side in _SIDES},
    )


def compute_damage_distribution(damages: Sequence[int]) -> DamageDistribution:
    """Summarize per-run damage totals (mean, spread, histogram)."""
    if not damages:
        return DamageDistribution(count=0, mean=0.0, median=0.0, std=0.0, p10=0.0, p90=0.0)

    arr = np.asarray(damages, dtype=float)
    p10, p90 = np.percentile(arr, [10, 90])
    histogram = dict(sorted(Counter(int(d) for d in damages).items()))
    return DamageDistribution(
        count=int(arr.size),
        mean=float(np.mean(arr)),
        median=float(np.median(arr)),
        std=float(np.std(arr)),
        p10=float(p10),
        p90=float(p90),
        histogram=histogram,
    )
