"""Balanced (random) strategy -- the default policy.

Behaviour:
    - Attacks with a uniformly random card.
    - On a hit, plays a random card in defense 70 % of the time.
    - Spends 20 % of its turns defending.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from card_duel.sim.strategies.base import Strategy

if TYPE_CHECKING:
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.entities import Combatant


class BalancedStrategy(Strategy):
    """Plays random cards with fixed defend/react probabilities."""

    defense_chance = 0.7
    defend_action_chance = 0.2

    def select_attack_card(self, combatant: Combatant) -> Card | None:
        return self._take_random(combatant)

    def select_defense_card(
        self,
        combatant: Combatant,
        attack_card: Card,
    ) -> Card | None:
        if combatant.deck.is_empty:
            return None
        if not self._rng.chance(self.defense_chance):
            return None
        return self._take_random(combatant)

    def should_defend_action(self, combatant: Combatant) -> bool:
        return self._rng.chance(self.defend_action_chance)

    def _take_random(self, combatant: Combatant) -> Card | None:
        cards = combatant.deck.peek()
        if not cards:
            return None
        chosen = self._rng.random_choice(cards)
        combatant.deck.remove_card(chosen)
        return chosen
