"""Combat rules for the card-duel simulator.

Every function here is stateless; randomness comes from the ``GameRNG``
passed in by the caller.

Usage::

    from card_duel.sim.mechanics import (
        roll_d20, roll_d4,
        resolve_hit_roll, resolve_card_duel,
        theoretical_card_damage, theoretical_deck_damage,
    )
"""

# -- dice --------------------------------------------------------------------
from .dice import roll_d4, roll_d20

# -- suit effects ------------------------------------------------------------
from .suit_effects import (
    check_advantage,
    damage_bonus,
    hit_bonus,
    raises_reaction_cost,
    reaction_cost,
)

# -- hit roll ----------------------------------------------------------------
from .hit_roll import HitRoll, hit_succeeds, resolve_hit_roll

# -- card duel ---------------------------------------------------------------
from .card_duel import DuelOutcome, resolve_card_duel

# -- theoretical bounds ------------------------------------------------------
from .theoretical import (
    TheoreticalBounds,
    theoretical_card_damage,
    theoretical_deck_damage,
)

__all__ = [
    # dice
    "roll_d20",
    "roll_d4",
    # suit effects
    "hit_bonus",
    "damage_bonus",
    "raises_reaction_cost",
    "reaction_cost",
    "check_advantage",
    # hit roll
    "HitRoll",
    "hit_succeeds",
    "resolve_hit_roll",
    # card duel
    "DuelOutcome",
    "resolve_card_duel",
    # theoretical bounds
    "TheoreticalBounds",
    "theoretical_card_damage",
    "theoretical_deck_damage",
]
