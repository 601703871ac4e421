"""Pile identifiers and the ordered card stack backing each tableau pile."""
from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from .cards import Card


class TableauPile(IntEnum):
    """The seven tableau piles, left to right. Value is the pile index."""
    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6


NUM_PILES: int = len(TableauPile)


class CardStack:
    """Cards ordered bottom (index 0) to top."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def push(self, card: Card) -> None:
        assert card is not None
        self._cards.append(card)

    def pop(self) -> Card:
        assert not self.is_empty()
        return self._cards.pop()

    def peek(self) -> Card:
        assert not self.is_empty()
        return self._cards[-1]

    def is_empty(self) -> bool:
        return not self._cards

    def clear(self) -> None:
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"CardStack({self._cards!r})"
