"""Entity models for the card-duel simulator.

All data classes use Pydantic v2 BaseModel for validation and
serialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from card_duel.sim.core.cards import Deck
from card_duel.sim.mechanics import suit_effects

if TYPE_CHECKING:
    from card_duel.sim.core.rng import GameRNG

DEFEND_AC_BONUS = 3
"""Temporary AC granted by the defend action until the fighter's next turn."""


# ---------------------------------------------------------------------------
# DamageStats
# ---------------------------------------------------------------------------

class DamageStats(BaseModel):
    """Running statistics over the damage a combatant has taken.

    Only positive amounts count as hits; recording ``0`` is a no-op.
    """

    total: int = 0
    min_hit: int | None = None
    max_hit: int | None = None
    hit_count: int = 0

    def record(self, damage: int) -> None:
        if damage <= 0:
            return
        self.total += damage
        self.hit_count += 1
        if self.min_hit is None or damage < self.min_hit:
            self.min_hit = damage
        if self.max_hit is None or damage > self.max_hit:
            self.max_hit = damage

    @property
    def average(self) -> float:
        """Mean damage per hit, ``0.0`` when nothing has landed."""
        if self.hit_count == 0:
            return 0.0
        return self.total / self.hit_count


# ---------------------------------------------------------------------------
# Combatant
# ---------------------------------------------------------------------------

class Combatant(BaseModel):
    """One fighter: static configuration plus per-run mutable state."""

    name: str
    deck: Deck
    ac: int = 10
    hit_bonus: int = 0
    reaction_chance: float = 0.5
    counter_chance: float = 0.3
    base_resources: int = 10
    danger: int = 3
    """Base resource cost of a reaction or counter."""
    strategy: str = "balanced"

    # -- runtime state -------------------------------------------------------
    current_resources: int = 0
    damage_taken: DamageStats = Field(default_factory=DamageStats)
    temp_ac_bonus: int = 0
    cards_played: int = 0
    reactions_used: int = 0
    counters_used: int = 0

    def model_post_init(self, context: object, /) -> None:
        if "current_resources" not in self.model_fields_set:
            self.current_resources = self.base_resources

    def reset(self, rng: GameRNG) -> None:
        """Restore and reshuffle the deck and zero all runtime state."""
        self.deck.reset()
        self.deck.shuffle(rng)
        self.current_resources = self.base_resources
        self.damage_taken = DamageStats()
        self.temp_ac_bonus = 0
        self.cards_played = 0
        self.reactions_used = 0
        self.counters_used = 0

    # -- armor ---------------------------------------------------------------

    @property
    def effective_ac(self) -> int:
        return self.ac + self.temp_ac_bonus

    def clear_temp_bonuses(self) -> None:
        self.temp_ac_bonus = 0

    def apply_defend(self) -> None:
        self.temp_ac_bonus = DEFEND_AC_BONUS

    # -- resources -----------------------------------------------------------

    def reaction_cost(self, raised: bool = False) -> int:
        """Cost of a reaction or counter; *raised* for diamond attacks."""
        return suit_effects.reaction_cost(self.danger, raised)

    def can_react(self, raised: bool = False) -> bool:
        return self.current_resources >= self.reaction_cost(raised)

    def pay_reaction_cost(self, raised: bool = False) -> None:
        self.current_resources -= self.reaction_cost(raised)
        self.reactions_used += 1

    # -- damage --------------------------------------------------------------

    def take_damage(self, amount: int) -> None:
        self.damage_taken.record(amount)
