"""Pydantic v2 models for batch simulation output.

These models define the structured result of running many matches:
per-side damage aggregates, per-turn cross-run averages, theoretical
bounds, and damage distributions.  All are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TheoreticalDamage(BaseModel):
    """Damage the opponent's full deck could deal if nothing were defended."""

    min: int = 0
    avg: float = 0.0
    max: int = 0


class PerTurnAverages(BaseModel):
    """Cross-run averages indexed by turn number."""

    resources: list[float] = Field(default_factory=list)
    damage: list[float] = Field(default_factory=list)
    """Cumulative damage taken by the end of each turn."""
    cards_remaining: list[float] = Field(default_factory=list)
    reactions: list[float] = Field(default_factory=list)


class SideBatchStats(BaseModel):
    """Aggregate damage taken by one side across a batch."""

    damage_min: int = 0
    damage_avg: float = 0.0
    damage_max: int = 0
    all_damages: list[int] = Field(default_factory=list)
    """Per-run total damage, in run order."""
    theoretical: TheoreticalDamage = Field(default_factory=TheoreticalDamage)
    per_turn: PerTurnAverages = Field(default_factory=PerTurnAverages)


class BatchResult(BaseModel):
    """Top-level result of a batch of matches."""

    num_runs: int
    num_turns: int
    base_seed: int | None = None
    """Run *i* used seed ``base_seed + i``."""
    protagonist: SideBatchStats = Field(default_factory=SideBatchStats)
    antagonist: SideBatchStats = Field(default_factory=SideBatchStats)


class DamageDistribution(BaseModel):
    """Shape of the per-run damage totals for one side."""

    count: int
    mean: float
    median: float
    std: float
    p10: float
    p90: float
    histogram: dict[int, int] = Field(default_factory=dict)
    """Total damage -> number of runs that ended with it."""
