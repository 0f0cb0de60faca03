"""The hit-roll layer: a d20 check against the defender's armor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .dice import roll_d20
from .suit_effects import hit_bonus

if TYPE_CHECKING:
    from card_duel.sim.core.cards import Card
    from card_duel.sim.core.entities import Combatant
    from card_duel.sim.core.rng import GameRNG


@dataclass(frozen=True)
class HitRoll:
    total: int
    """d20 plus the attacker's hit bonus plus any suit bonus."""
    success: bool


def hit_succeeds(total: int, target_ac: int) -> bool:
    """A hit lands only when the total strictly exceeds AC; ties miss."""
    return total > target_ac


def resolve_hit_roll(
    rng: GameRNG,
    attacker: Combatant,
    defender: Combatant,
    attack_card: Card,
) -> HitRoll:
    """Roll to hit *defender* with *attack_card*.

    ``total = d20 + attacker.hit_bonus + suit bonus`` and the attack lands
    iff ``total > defender.effective_ac``.
    """
    total = roll_d20(rng) + attacker.hit_bonus + hit_bonus(attack_card)
    return HitRoll(total=total, success=hit_succeeds(total, defender.effective_ac))
