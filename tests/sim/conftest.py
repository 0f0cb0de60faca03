"""Shared fixtures for simulation tests."""

from __future__ import annotations

import pytest

from card_duel.sim.strategies import BalancedStrategy


@pytest.fixture
def always_attack(monkeypatch):
    """Stop the balanced strategy from choosing to defend voluntarily."""
    monkeypatch.setattr(BalancedStrategy, "defend_action_chance", 0.0)
