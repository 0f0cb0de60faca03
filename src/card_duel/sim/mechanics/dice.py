"""Dice rolls used by the hit roll and the card duel."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from card_duel.sim.core.rng import GameRNG


def roll_d20(rng: GameRNG) -> int:
    """Roll a single d20 (1-20)."""
    return rng.random_int(1, 20)


def roll_d4(rng: GameRNG, count: int = 1) -> int:
    """Roll *count* d4s and return the sum (0 when *count* <= 0)."""
    return sum(rng.random_int(1, 4) for _ in range(count))
