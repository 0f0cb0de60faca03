"""Tests for saving and loading batch results."""

from __future__ import annotations

from card_duel.balance.models import BatchResult, SideBatchStats
from card_duel.balance.results import load_batch_result, save_batch_result


def test_round_trip(tmp_path):
    batch = BatchResult(
        num_runs=2,
        num_turns=4,
        base_seed=1,
        protagonist=SideBatchStats(damage_min=1, damage_avg=2.5, damage_max=4, all_damages=[1, 4]),
    )
    path = tmp_path / "nested" / "batch.json"
    save_batch_result(batch, path)
    assert path.exists()
    assert load_batch_result(path) == batch


def test_accepts_string_path(tmp_path):
    batch = BatchResult(num_runs=0, num_turns=0)
    path = str(tmp_path / "batch.json")
    save_batch_result(batch, path)
    assert load_batch_result(path) == batch
