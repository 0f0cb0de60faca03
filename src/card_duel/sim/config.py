"""Simulation configuration models.

These are the input layer of the engine: field ranges and deck notation
are checked here, when the config is built, so the simulator itself can
trust what it is given.  Configs load from JSON with
``SimulationConfig.model_validate_json``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from card_duel.sim.core.cards import Deck, validate_deck_notation
from card_duel.sim.core.entities import Combatant

PROTAGONIST = "Protagonist"
ANTAGONIST = "Antagonist"


class CombatantConfig(BaseModel):
    """Static configuration for one fighter."""

    deck: str = ""
    """Whitespace-separated card notation, e.g. ``'2d 2d 3h 3c 5s 10h'``."""
    ac: int = 10
    hit_bonus: int = 0
    reaction_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    counter_chance: float = Field(default=0.3, ge=0.0, le=1.0)
    resources: int = Field(default=10, ge=0)
    danger: int = Field(default=3, ge=0)
    strategy: str = "balanced"
    """One of ``balanced``, ``conservative``, ``aggressive``."""

    @field_validator("deck")
    @classmethod
    def _check_deck_notation(cls, v: str) -> str:
        invalid = validate_deck_notation(v)
        if invalid:
            raise ValueError(f"Invalid card notation: {', '.join(invalid)}")
        return v

    def build(self, name: str) -> Combatant:
        """Create a fresh combatant with its own deck."""
        return Combatant(
            name=name,
            deck=Deck.from_string(self.deck),
            ac=self.ac,
            hit_bonus=self.hit_bonus,
            reaction_chance=self.reaction_chance,
            counter_chance=self.counter_chance,
            base_resources=self.resources,
            danger=self.danger,
            strategy=self.strategy,
        )


class SimulationConfig(BaseModel):
    """Everything needed to run one match or a batch of matches."""

    protagonist: CombatantConfig = Field(default_factory=CombatantConfig)
    antagonist: CombatantConfig = Field(default_factory=CombatantConfig)
    num_turns: int = Field(default=10, ge=0)
    protagonist_starts: bool = True
    num_runs: int = Field(default=100, ge=1)
    """Batch size; ignored by single runs."""
