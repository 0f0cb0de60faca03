"""The card-duel layer: attack card value against defense card value.

Resolution:
    1. delta = |attack - defense| (defense is 0 with no defense card)
    2. attack wins  -> defender takes delta d4 + hearts bonus
    3. defense wins -> attacker takes delta d4 (no bonus)
    4. tie          -> counters deal nothing; an undefended tie deals 1d4 +
       bonus; otherwise the suit advantage cycle decides who takes 1d4
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .dice import roll_d4
from .suit_effects import check_advantage, damage_bonus

if TYPE_CHECKING:
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.rng import GameRNG


@dataclass(frozen=True)
class DuelOutcome:
    attacker_damage: int
    defender_damage: int
    description: str


def resolve_card_duel(
    rng: GameRNG,
    attack_card: Card,
    defense_card: Card | None,
    is_counter: bool = False,
) -> DuelOutcome:
    """Resolve a duel between *attack_card* and an optional *defense_card*.

    When *is_counter* is true, suit advantage is ignored and a tie deals
    no damage to either side.
    """
    attack_value = attack_card.value
    defense_value = defense_card.value if defense_card is not None else 0
    delta = abs(attack_value - defense_value)
    bonus = damage_bonus(attack_card)

    if attack_value > defense_value:
        damage = roll_d4(rng, delta) + bonus
        return DuelOutcome(0, damage, f"Attack wins by {delta}: defender takes {damage} damage")

    if defense_value > attack_value:
        damage = roll_d4(rng, delta)
        return DuelOutcome(damage, 0, f"Defense wins by {delta}: attacker takes {damage} damage")

    if is_counter:
        return DuelOutcome(0, 0, "Counter attack tied: no damage")

    if defense_card is None:
        damage = roll_d4(rng, 1) + bonus
        return DuelOutcome(0, damage, f"No defense: defender takes {damage} damage")

    attacker_adv, defender_adv = check_advantage(attack_card, defense_card)
    if attacker_adv:
        damage = roll_d4(rng, 1) + bonus
        return DuelOutcome(
            0, damage,
            f"Attacker advantage ({attack_card.suit.display_name} > "
            f"{defense_card.suit.display_name}): defender takes {damage}",
        )
    if defender_adv:
        damage = roll_d4(rng, 1)
        return DuelOutcome(
            damage, 0,
            f"Defender advantage ({defense_card.suit.display_name} > "
            f"{attack_card.suit.display_name}): attacker takes {damage}",
        )
    return DuelOutcome(0, 0, "Tied with no advantage: fully blocked")
