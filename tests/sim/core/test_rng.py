"""Tests for the seeded GameRNG."""

from __future__ import annotations

from card_duel.sim.core.rng import GameRNG


class TestDeterminism:
    def test_same_seed_same_sequence(self):
        a = GameRNG(123)
        b = GameRNG(123)
        assert [a.random_int(1, 20) for _ in range(50)] == [b.random_int(1, 20) for _ in range(50)]

    def test_unseeded_records_its_seed(self):
        rng = GameRNG()
        replay = GameRNG(rng.seed)
        assert [rng.random_float() for _ in range(5)] == [replay.random_float() for _ in range(5)]

    def test_fork_is_deterministic(self):
        assert GameRNG(7).fork("combat").seed == GameRNG(7).fork("combat").seed

    def test_forks_with_different_names_differ(self):
        rng = GameRNG(7)
        assert rng.fork("combat").seed != rng.fork("deck").seed


class TestShuffle:
    def test_shuffle_is_a_permutation(self):
        items = list(range(30))
        GameRNG(1).shuffle(items)
        assert sorted(items) == list(range(30))

    def test_shuffle_reproducible(self):
        a, b = list(range(20)), list(range(20))
        GameRNG(99).shuffle(a)
        GameRNG(99).shuffle(b)
        assert a == b

    def test_shuffle_handles_short_lists(self):
        empty: list[int] = []
        single = [5]
        GameRNG(0).shuffle(empty)
        GameRNG(0).shuffle(single)
        assert empty == []
        assert single == [5]


class TestChance:
    def test_zero_never_fires(self):
        rng = GameRNG(3)
        assert not any(rng.chance(0.0) for _ in range(200))

    def test_one_always_fires(self):
        rng = GameRNG(3)
        assert all(rng.chance(1.0) for _ in range(200))
