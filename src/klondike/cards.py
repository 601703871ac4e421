"""
Playing cards: 52-card French deck (4 suits × 13 ranks).
Cards compare by identity: a deck never holds two equal objects, and the
tableau relies on that to tell cards apart.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol


class Color(Enum):
    BLACK = "black"
    RED = "red"


class Suit(IntEnum):
    """Clubs, Diamonds, Hearts, Spades. Order used for card indexing."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def color(self) -> Color:
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK

    def same_color_as(self, other: Suit) -> bool:
        return self.color is other.color

    @property
    def symbol(self) -> str:
        return "♣♦♥♠"[self]


class Rank(IntEnum):
    """Ace (lowest) .. King (highest)."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        return {1: "A", 11: "J", 12: "Q", 13: "K"}.get(self.value) or str(self.value)


@dataclass(frozen=True, eq=False)
class Card:
    """
    A single playing card.

    ``eq=False`` keeps the default identity-based ``__eq__``/``__hash__``, so
    sets and ``in`` checks never confuse two cards of the same rank and suit.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        assert isinstance(self.rank, Rank) and isinstance(self.suit, Suit)

    @property
    def color(self) -> Color:
        return self.suit.color

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"

    def __repr__(self) -> str:
        return str(self)


class CardSource(Protocol):
    """Anything the tableau can deal from."""

    def draw(self) -> Card: ...


def make_deck_52() -> list[Card]:
    """Build a full 52-card deck, suit-major then rank Ace..King."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    Ordered stack of cards dealt from the top.

    The deck is shuffled on construction; pass ``rng`` for a reproducible
    order or ``shuffle=False`` to keep ``make_deck_52()`` order (the last card
    of that list is drawn first).
    """

    def __init__(self, rng: random.Random | None = None, shuffle: bool = True) -> None:
        self._cards: list[Card] = make_deck_52()
        if shuffle:
            if rng is None:
                rng = random.Random()
            rng.shuffle(self._cards)

    @classmethod
    def from_cards(cls, cards: list[Card]) -> "Deck":
        """Deck drawing ``cards`` in list order (first element drawn first)."""
        deck = cls(shuffle=False)
        deck._cards = list(reversed(cards))
        return deck

    def draw(self) -> Card:
        if not self._cards:
            raise RuntimeError("Cannot draw from an empty deck")
        return self._cards.pop()

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)
