"""Conservative strategy -- spend low cards, hold high ones back.

Behaviour:
    - Attacks with its lowest-value card.
    - Defends with the lowest card that meets or beats the attack; if none
      can, sacrifices its lowest card 30 % of the time and otherwise
      declines.
    - Defends more often as its deck runs down:
      ``P(defend) = 0.4 - 0.3 * remaining / original``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_duel.sim.strategies.base import Strategy, take_lowest

if TYPE_CHECKING:
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.entities import Combatant


class ConservativeStrategy(Strategy):

    sacrifice_chance = 0.3
    max_defend_chance = 0.4
    scarcity_weight = 0.3

    def select_attack_card(self, combatant: Combatant) -> Card | None:
        cards = combatant.deck.peek()
        if not cards:
            return None
        return take_lowest(combatant, cards)

    def select_defense_card(
        self,
        combatant: Combatant,
        attack_card: Card,
    ) -> Card | None:
        cards = combatant.deck.peek()
        if not cards:
            return None

        sufficient = [c for c in cards if c.value >= attack_card.value]
        if sufficient:
            return take_lowest(combatant, sufficient)

        if self._rng.chance(self.sacrifice_chance):
            return take_lowest(combatant, cards)
        return None

    def should_defend_action(self, combatant: Combatant) -> bool:
        deck = combatant.deck
        remaining_ratio = deck.remaining() / max(1, deck.original_size())
        return self._rng.chance(self.max_defend_chance - remaining_ratio * self.scarcity_weight)
