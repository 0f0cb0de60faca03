"""Suit-driven modifiers and the advantage check used to break ties.

- Crosses: +2 to the attacker's hit roll.
- Hearts: +2 flat damage whenever the card deals damage as the attack.
- Diamonds: the defender pays +2 to react to or counter the attack.
- Spades: no modifier.
"""

from __future__ import annotations

from card_duel.sim.core.cards import Card, Suit

HIT_BONUS = 2
DAMAGE_BONUS = 2
RAISED_COST_SURCHARGE = 2


def hit_bonus(card: Card) -> int:
    return HIT_BONUS if card.suit is Suit.CROSSES else 0


def damage_bonus(card: Card) -> int:
    return DAMAGE_BONUS if card.suit is Suit.HEARTS else 0


def raises_reaction_cost(card: Card) -> bool:
    return card.suit is Suit.DIAMONDS


def reaction_cost(danger: int, raised: bool) -> int:
    """Resources needed to react to, or counter, an attack."""
    return danger + (RAISED_COST_SURCHARGE if raised else 0)


def check_advantage(attack_card: Card, defense_card: Card) -> tuple[bool, bool]:
    """Return ``(attacker_has_advantage, defender_has_advantage)``.

    Only consulted when attack and defense values are equal.  At most one
    side can hold advantage; for opposite suits in the cycle neither does.
    """
    return (
        attack_card.suit.beats(defense_card.suit),
        defense_card.suit.beats(attack_card.suit),
    )
