"""Core simulation primitives for the card-duel simulator."""

from card_duel.sim.core.rng import GameRNG
from card_duel.sim.core.cards import (
    ADVANTAGE_CYCLE,
    Card,
    CardNotationError,
    Deck,
    Suit,
    validate_deck_notation,
)
from card_duel.sim.core.entities import DEFEND_AC_BONUS, Combatant, DamageStats

__all__ = [
    # rng
    "GameRNG",
    # cards
    "ADVANTAGE_CYCLE",
    "Card",
    "CardNotationError",
    "Deck",
    "Suit",
    "validate_deck_notation",
    # entities
    "DEFEND_AC_BONUS",
    "Combatant",
    "DamageStats",
]
