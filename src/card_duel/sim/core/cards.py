"""Cards and decks for the card-duel simulator.

A card is a suit plus a positive value, written in compact notation such
as ``2d`` or ``10h``.  A deck is a mutable pile of cards that remembers
its original composition so it can be restored between runs.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from card_duel.sim.core.rng import GameRNG


_CARD_PATTERN = re.compile(r"^([1-9]\d*)([sdch])$")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class CardNotationError(ValueError):
    """Raised when card or deck notation contains malformed tokens.

    ``invalid_tokens`` lists every offending token, in the order they
    appeared, so callers can report them all at once.
    """

    def __init__(self, invalid_tokens: list[str]) -> None:
        self.invalid_tokens = list(invalid_tokens)
        joined = ", ".join(repr(t) for t in self.invalid_tokens)
        super().__init__(
            f"Invalid card notation: {joined}. "
            "Expected format: <number><suit> (e.g. '2d', '10h')"
        )


# ---------------------------------------------------------------------------
# Suit
# ---------------------------------------------------------------------------

class Suit(str, Enum):
    """The four suits and the letter each is written with."""

    SPADES = "s"
    """Plain attack."""
    DIAMONDS = "d"
    """Raises the defender's reaction and counter cost."""
    CROSSES = "c"
    """+2 to the hit roll when attacking."""
    HEARTS = "h"
    """+2 flat damage when dealing damage."""

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def beats(self, other: Suit) -> bool:
        """Whether this suit has advantage over *other* in a tied duel."""
        return ADVANTAGE_CYCLE[self] is other


# Each suit beats exactly one other: spades > crosses > diamonds > hearts > spades.
ADVANTAGE_CYCLE: dict[Suit, Suit] = {
    Suit.SPADES: Suit.CROSSES,
    Suit.CROSSES: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.HEARTS: Suit.SPADES,
}


# ---------------------------------------------------------------------------
# Card
# ---------------------------------------------------------------------------

class Card(BaseModel):
    """A single immutable card."""

    model_config = {"frozen": True}

    suit: Suit
    value: int = Field(ge=1)

    @classmethod
    def from_string(cls, token: str) -> Card:
        """Parse a card from notation like ``'2d'``, ``'10h'`` or ``'3S'``.

        Raises
        ------
        CardNotationError
            If the token is not ``<positive integer><suit letter>``.
        """
        match = _CARD_PATTERN.match(token.strip().lower())
        if match is None:
            raise CardNotationError([token])
        return cls(suit=Suit(match.group(2)), value=int(match.group(1)))

    def clone(self) -> Card:
        """Return an independent copy of this card."""
        return self.model_copy()

    def __str__(self) -> str:
        return f"{self.value}{self.suit.value}"


def is_valid_card_token(token: str) -> bool:
    return _CARD_PATTERN.match(token.strip().lower()) is not None


def validate_deck_notation(notation: str | None) -> list[str]:
    """Return every invalid token in *notation* (empty when it is valid).

    Blank notation is valid and describes an empty deck.
    """
    if not notation or not notation.strip():
        return []
    return [t for t in notation.split() if not is_valid_card_token(t)]


# ---------------------------------------------------------------------------
# Deck
# ---------------------------------------------------------------------------

class Deck(BaseModel):
    """An ordered, mutable pile of cards.

    ``original`` is a frozen snapshot of the composition the deck was built
    with.  Cards removed by :meth:`draw` or :meth:`remove_card` stay gone
    until :meth:`reset` refills the pile with fresh clones of the snapshot.
    """

    cards: list[Card] = Field(default_factory=list)
    original: tuple[Card, ...] = ()

    def model_post_init(self, context: Any, /) -> None:
        if not self.original and self.cards:
            self.original = tuple(c.clone() for c in self.cards)

    @classmethod
    def from_string(cls, notation: str | None) -> Deck:
        """Parse a deck from whitespace-separated notation (``'2d 3h 10s'``).

        Raises
        ------
        CardNotationError
            Listing every malformed token, not just the first.
        """
        invalid = validate_deck_notation(notation)
        if invalid:
            raise CardNotationError(invalid)
        if not notation or not notation.strip():
            return cls()
        return cls(cards=[Card.from_string(t) for t in notation.split()])

    # -- queries -------------------------------------------------------------

    def peek(self) -> list[Card]:
        """Return a copy of the remaining cards without removing them."""
        return list(self.cards)

    def remaining(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def original_size(self) -> int:
        return len(self.original)

    def original_cards(self) -> list[Card]:
        """Fresh clones of the cards the deck was built with."""
        return [c.clone() for c in self.original]

    # -- mutation ------------------------------------------------------------

    def shuffle(self, rng: GameRNG) -> None:
        """Shuffle the remaining cards in-place."""
        rng.shuffle(self.cards)

    def draw(self) -> Card | None:
        """Remove and return the last card, or ``None`` if the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def remove_card(self, card: Card) -> bool:
        """Remove the first card equal to *card* (same suit and value).

        The last card is swapped into the freed slot, so the relative order
        of the remaining cards is not preserved.

        Returns ``True`` if a matching card was found and removed.
        """
        for i, candidate in enumerate(self.cards):
            if candidate == card:
                last = self.cards.pop()
                if i < len(self.cards):
                    self.cards[i] = last
                return True
        return False

    def reset(self) -> None:
        """Restore the original composition (unshuffled)."""
        self.cards = self.original_cards()

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)
