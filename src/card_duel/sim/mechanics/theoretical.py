"""Theoretical damage bounds: what a deck could deal if every card were
played as an attack, every attack landed, and nothing was ever defended.

A card of value *v* rolls *v* d4s, so its damage ranges over
``[v + bonus, 4v + bonus]`` with mean ``2.5v + bonus``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from card_duel.sim.core.cards import Card

from .suit_effects import damage_bonus

_D4_MIN = 1
_D4_AVG = 2.5
_D4_MAX = 4


class TheoreticalBounds(NamedTuple):
    min: int
    avg: float
    max: int


def theoretical_card_damage(value: int, bonus: int = 0) -> TheoreticalBounds:
    """Damage bounds for a single attack of *value* d4s plus a flat *bonus*."""
    if value <= 0:
        return TheoreticalBounds(bonus, float(bonus), bonus)
    return TheoreticalBounds(
        value * _D4_MIN + bonus,
        value * _D4_AVG + bonus,
        value * _D4_MAX + bonus,
    )


def theoretical_deck_damage(cards: Iterable[Card]) -> TheoreticalBounds:
    """Sum of the per-card bounds over *cards*."""
    total_min = 0
    total_avg = 0.0
    total_max = 0
    for card in cards:
        lo, avg, hi = theoretical_card_damage(card.value, damage_bonus(card))
        total_min += lo
        total_avg += avg
        total_max += hi
    return TheoreticalBounds(total_min, total_avg, total_max)
