"""Telemetry data models for per-turn and per-match statistics.

These lightweight dataclasses capture everything the batch aggregator and
the reports need without keeping the combatants around:

- **TurnSnapshot**: immutable state of both fighters after one turn, plus
  what happened during that turn.
- **SimulationResult**: the ordered snapshots of one match and its damage
  totals and theoretical bounds.

Both classes are plain ``dataclass`` instances (not Pydantic models) to
keep telemetry collection as cheap as possible during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TurnAction(str, Enum):
    ATTACK = "attack"
    DEFEND = "defend"
    NO_CARDS = "no_cards"
    """An attack was chosen but no card could be played; treated as defend."""


@dataclass(frozen=True)
class TurnSnapshot:
    """State after a single turn has fully resolved.

    Attributes
    ----------
    turn_number:
        Zero-based turn index.
    protagonist_damage / antagonist_damage:
        Cumulative damage taken by each side so far.
    protagonist_resources / antagonist_resources:
        Resources left after any reaction or counter costs this turn.
    protagonist_cards_remaining / antagonist_cards_remaining:
        Cards left in each deck.
    protagonist_reactions / antagonist_reactions:
        Cumulative reactions (including counters) paid for.
    action_taken:
        What the active fighter did.
    attacker:
        Name of the active fighter.
    hit_roll / hit_success:
        Hit-roll total and outcome, ``None`` when no attack was made.
    attack_card / defense_card:
        Cards in notation form, ``None`` when not played.
    damage_dealt:
        Damage the defender took from the duel.
    damage_reflected:
        Damage the attacker took from the duel (defense won).
    counter_damage:
        Damage the attacker took from the defender's counter.
    reaction_occurred / counter_occurred:
        Whether a defense card was played / a counter was attempted.
    """

    turn_number: int
    protagonist_damage: int
    antagonist_damage: int
    protagonist_resources: int
    antagonist_resources: int
    protagonist_cards_remaining: int
    antagonist_cards_remaining: int
    protagonist_reactions: int
    antagonist_reactions: int
    action_taken: TurnAction
    attacker: str
    hit_roll: int | None = None
    hit_success: bool | None = None
    attack_card: str | None = None
    defense_card: str | None = None
    damage_dealt: int = 0
    damage_reflected: int = 0
    counter_damage: int = 0
    reaction_occurred: bool = False
    counter_occurred: bool = False


@dataclass
class SideSummary:
    """Damage taken by one fighter over a match."""

    total_damage: int = 0
    min_damage: int | None = None
    max_damage: int | None = None
    avg_damage: float = 0.0
    cards_played: int = 0
    reactions_used: int = 0
    counters_used: int = 0
    theoretical_min: int = 0
    """Least damage the opponent's full deck could have dealt unopposed."""
    theoretical_avg: float = 0.0
    theoretical_max: int = 0


@dataclass
class SimulationResult:
    """Outcome of a single match."""

    seed: int
    total_turns: int
    turns: list[TurnSnapshot] = field(default_factory=list)
    protagonist: SideSummary = field(default_factory=SideSummary)
    antagonist: SideSummary = field(default_factory=SideSummary)

    @property
    def protagonist_total_damage(self) -> int:
        return self.protagonist.total_damage

    @property
    def antagonist_total_damage(self) -> int:
        return self.antagonist.total_damage
