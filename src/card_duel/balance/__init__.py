"""Batch analysis: aggregation, result models, and reports."""

from card_duel.balance.metrics import (
    aggregate_batch_results,
    compute_damage_distribution,
    compute_per_turn_averages,
    compute_side_stats,
)
from card_duel.balance.models import (
    BatchResult,
    DamageDistribution,
    PerTurnAverages,
    SideBatchStats,
    TheoreticalDamage,
)
from card_duel.balance.report import generate_run_trace, generate_text_report
from card_duel.balance.results import load_batch_result, save_batch_result

__all__ = [
    "BatchResult",
    "DamageDistribution",
    "PerTurnAverages",
    "SideBatchStats",
    "TheoreticalDamage",
    "aggregate_batch_results",
    "compute_damage_distribution",
    "compute_per_turn_averages",
    "compute_side_stats",
    "generate_run_trace",
    "generate_text_report",
    "load_batch_result",
    "save_batch_result",
]
