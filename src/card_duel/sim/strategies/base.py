"""Base class for the policies that drive a combatant's decisions.

All strategies subclass ``Strategy`` and implement the three abstract
methods.  The combat simulator calls these at decision points: whether to
spend the turn defending, which card to attack with, and which card (if
any) to play when reacting to a hit.

Any card a strategy returns has already been removed from the
combatant's deck.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from card_duel.sim.core.rng import GameRNG

if TYPE_CHECKING:
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.entities import Combatant


class Strategy(ABC):
    """Base class for card-selection policies.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic randomness.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    """

    def __init__(self, rng: GameRNG | None = None) -> None:
        self._rng = rng or GameRNG(seed=0)

    @abstractmethod
    def select_attack_card(self, combatant: Combatant) -> Card | None:
        """Take a card from *combatant*'s deck to attack with.

        Returns ``None`` only when the deck is empty.
        """

    @abstractmethod
    def select_defense_card(
        self,
        combatant: Combatant,
        attack_card: Card,
    ) -> Card | None:
        """Take a card from *combatant*'s deck to answer *attack_card*.

        Returns ``None`` to decline (the reaction cost is still spent).
        """

    @abstractmethod
    def should_defend_action(self, combatant: Combatant) -> bool:
        """Whether *combatant* spends this turn defending instead of attacking."""


def take_lowest(combatant: Combatant, cards: list[Card]) -> Card:
    """Remove the lowest-value card of *cards* from the deck and return it."""
    chosen = min(cards, key=lambda c: c.value)
    combatant.deck.remove_card(chosen)
    return chosen


def take_highest(combatant: Combatant, cards: list[Card]) -> Card:
    """Remove the highest-value card of *cards* from the deck and return it."""
    chosen = max(cards, key=lambda c: c.value)
    combatant.deck.remove_card(chosen)
    return chosen
