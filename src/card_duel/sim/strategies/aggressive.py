"""Aggressive strategy -- lead with the biggest cards.

Behaviour:
    - Attacks with its highest-value card.
    - Defends only to win: plays the lowest card strictly above the attack;
      if it has none, declines half the time and otherwise throws its
      lowest card.
    - Spends 10 % of its turns defending.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_duel.sim.strategies.base import Strategy, take_highest, take_lowest

if TYPE_CHECKING:
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.entities import Combatant


class AggressiveStrategy(Strategy):

    decline_chance = 0.5
    defend_action_chance = 0.1

    def select_attack_card(self, combatant: Combatant) -> Card | None:
        cards = combatant.deck.peek()
        if not cards:
            return None
        return take_highest(combatant, cards)

    def select_defense_card(
        self,
        combatant: Combatant,
        attack_card: Card,
    ) -> Card | None:
        cards = combatant.deck.peek()
        if not cards:
            return None

        winning = [c for c in cards if c.value > attack_card.value]
        if winning:
            return take_lowest(combatant, winning)

        if self._rng.chance(self.decline_chance):
            return None
        return take_lowest(combatant, cards)

    def should_defend_action(self, combatant: Combatant) -> bool:
        return self._rng.chance(self.defend_action_chance)
