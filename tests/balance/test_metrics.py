"""Tests for batch aggregation functions."""

from __future__ import annotations

import pytest

from card_duel.balance.metrics import (
    aggregate_batch_results,
    compute_damage_distribution,
    compute_per_turn_averages,
)
from card_duel.sim.telemetry import SideSummary, SimulationResult, TurnAction, TurnSnapshot


def _make_snapshot(turn: int, p_dmg: int = 0, a_dmg: int = 0, p_res: int = 10, a_res: int = 10,
                   p_cards: int = 3, a_cards: int = 3, p_react: int = 0, a_react: int = 0) -> TurnSnapshot:
    return TurnSnapshot(
        turn_number=turn,
        protagonist_damage=p_dmg,
        antagonist_damage=a_dmg,
        protagonist_resources=p_res,
        antagonist_resources=a_res,
        protagonist_cards_remaining=p_cards,
        antagonist_cards_remaining=a_cards,
        protagonist_reactions=p_react,
        antagonist_reactions=a_react,
        action_taken=TurnAction.ATTACK,
        attacker="Protagonist" if turn % 2 == 0 else "Antagonist",
    )


def _make_result(
    p_total: int,
    a_total: int,
    turns: list[TurnSnapshot] | None = None,
    seed: int = 0,
) -> SimulationResult:
    turns = turns if turns is not None else [_make_snapshot(0, p_total, a_total)]
    return SimulationResult(
        seed=seed,
        total_turns=len(turns),
        turns=turns,
        protagonist=SideSummary(
            total_damage=p_total, theoretical_min=4, theoretical_avg=10.0, theoretical_max=16,
        ),
        antagonist=SideSummary(
            total_damage=a_total, theoretical_min=6, theoretical_avg=13.0, theoretical_max=20,
        ),
    )


# ---- Aggregation ----

class TestAggregateBatchResults:
    def test_min_avg_max(self):
        batch = aggregate_batch_results(
            [_make_result(3, 10), _make_result(9, 0), _make_result(6, 5)], num_turns=1,
        )
        assert batch.num_runs == 3
        assert (batch.protagonist.damage_min, batch.protagonist.damage_max) == (3, 9)
        assert batch.protagonist.damage_avg == pytest.approx(6.0)
        assert (batch.antagonist.damage_min, batch.antagonist.damage_max) == (0, 10)
        assert batch.antagonist.damage_avg == pytest.approx(5.0)

    def test_keeps_per_run_damages_in_order(self):
        batch = aggregate_batch_results([_make_result(3, 1), _make_result(8, 2)], num_turns=1)
        assert batch.protagonist.all_damages == [3, 8]
        assert batch.antagonist.all_damages == [1, 2]

    def test_single_run(self):
        batch = aggregate_batch_results([_make_result(7, 4)], num_turns=1)
        assert batch.protagonist.damage_min == batch.protagonist.damage_max == 7
        assert batch.protagonist.damage_avg == 7

    def test_theoretical_copied_from_first_run(self):
        batch = aggregate_batch_results([_make_result(1, 1)], num_turns=1)
        assert batch.protagonist.theoretical.min == 4
        assert batch.protagonist.theoretical.avg == 10.0
        assert batch.antagonist.theoretical.max == 20

    def test_empty(self):
        batch = aggregate_batch_results([], num_turns=5, base_seed=9)
        assert batch.num_runs == 0
        assert batch.base_seed == 9
        assert batch.protagonist.damage_avg == 0.0
        assert batch.protagonist.per_turn.damage == []
        assert batch.antagonist.theoretical.max == 0


# ---- Per-turn averages ----

class TestPerTurnAverages:
    def test_averages_each_turn(self):
        run_a = _make_result(4, 0, turns=[
            _make_snapshot(0, p_dmg=0, p_res=10, p_cards=3),
            _make_snapshot(1, p_dmg=4, p_res=7, p_cards=2, p_react=1),
        ])
        run_b = _make_result(2, 0, turns=[
            _make_snapshot(0, p_dmg=2, p_res=8, p_cards=3),
            _make_snapshot(1, p_dmg=2, p_res=8, p_cards=1),
        ])
        avg = compute_per_turn_averages([run_a, run_b], "protagonist", num_turns=2)
        assert avg.damage == [1.0, 3.0]
        assert avg.resources == [9.0, 7.5]
        assert avg.cards_remaining == [3.0, 1.5]
        assert avg.reactions == [0.0, 0.5]

    def test_turns_beyond_runs_are_omitted(self):
        run = _make_result(0, 0, turns=[_make_snapshot(0)])
        avg = compute_per_turn_averages([run], "antagonist", num_turns=3)
        assert len(avg.damage) == 1

    def test_short_runs_only_count_where_present(self):
        long_run = _make_result(0, 0, turns=[_make_snapshot(0, a_dmg=2), _make_snapshot(1, a_dmg=6)])
        short_run = _make_result(0, 0, turns=[_make_snapshot(0, a_dmg=4)])
        avg = compute_per_turn_averages([long_run, short_run], "antagonist", num_turns=2)
        assert avg.damage == [3.0, 6.0]


# ---- Distribution ----

class TestDamageDistribution:
    def test_basic(self):
        dist = compute_damage_distribution([1, 2, 3, 4, 4])
        assert dist.count == 5
        assert dist.mean == pytest.approx(2.8)
        assert dist.median == pytest.approx(3.0)
        assert dist.histogram == {1: 1, 2: 1, 3: 1, 4: 2}
        assert dist.p10 <= dist.median <= dist.p90

    def test_constant(self):
        dist = compute_damage_distribution([6, 6, 6])
        assert dist.std == 0.0
        assert dist.p10 == dist.p90 == 6.0

    def test_empty(self):
        dist = compute_damage_distribution([])
        assert dist.count == 0
        assert dist.mean == 0.0
        assert dist.histogram == {}
