"""
Tableau: the seven fanned piles of a Klondike game.

Cards are stacked downwards in alternating colours, one rank lower each time;
only Kings may start an empty pile. Which cards are face-up is kept in a set
separate from the piles, so a run of cards carries its visibility when moved.
Preconditions are checked with ``assert``: violating one is a bug in the
caller, not a recoverable condition.
"""
from __future__ import annotations

from typing import Optional

from .cards import Card, CardSource, Rank
from .piles import CardStack, TableauPile


class Tableau:
    """Seven piles plus the set of face-up cards they hold."""

    def __init__(self) -> None:
        self._piles: list[CardStack] = [CardStack() for _ in TableauPile]
        self._visible: set[Card] = set()

    def initialize(self, source: CardSource) -> None:
        """
        Deal a fresh tableau from ``source``.

        Pile i receives i+1 cards in draw order; only the last one is turned
        face-up. 28 cards are drawn in total. If drawing fails for any reason
        the tableau is left empty and the error propagates.
        """
        assert source is not None
        self._clear()
        try:
            for pile in TableauPile:
                stack = self._stack(pile)
                for j in range(pile + 1):
                    card = source.draw()
                    stack.push(card)
                    if j == pile:
                        self._visible.add(card)
        except BaseException:
            self._clear()
            raise

    def _stack(self, pile: TableauPile) -> CardStack:
        assert isinstance(pile, TableauPile), f"not a tableau pile: {pile!r}"
        return self._piles[pile]

    def _clear(self) -> None:
        self._visible.clear()
        for stack in self._piles:
            stack.clear()

    def can_move_to(self, card: Card, pile: TableauPile) -> bool:
        """
        True if ``card`` may be placed on ``pile``: a King on an empty pile, or
        a card one rank below the top card and of the other colour.
        Visibility and origin of ``card`` are not checked here.
        """
        assert card is not None and pile is not None
        stack = self._stack(pile)
        if stack.is_empty():
            return card.rank is Rank.KING
        top = stack.peek()
        return card.rank == top.rank - 1 and not card.suit.same_color_as(top.suit)

    def get_stack(self, pile: TableauPile) -> tuple[Card, ...]:
        """Snapshot of ``pile``, bottom card first."""
        assert pile is not None
        return tuple(self._stack(pile))

    def is_empty(self, pile: TableauPile) -> bool:
        return self._stack(pile).is_empty()

    def reveals_top(self, card: Card, pile: TableauPile) -> bool:
        """
        True if taking ``card`` (and what lies on it) off ``pile`` would expose
        a face-down card, i.e. ``card`` is face-up and the card under it is not.
        """
        assert card is not None and pile is not None
        previous = self._previous_card(card, pile)
        if previous is None:
            return False
        return card in self._visible and previous not in self._visible

    def _previous_card(self, card: Card, pile: TableauPile) -> Optional[Card]:
        previous: Optional[Card] = None
        for c in self._stack(pile):
            if c is card:
                return previous
            previous = c
        return None

    def move_within(self, card: Card, origin: TableauPile, destination: TableauPile) -> None:
        """Move ``card`` and every card above it from ``origin`` to ``destination``."""
        assert card is not None and origin is not None and destination is not None
        assert self.contains(card, origin)
        assert self.is_visible(card)
        source = self._stack(origin)
        moved: list[Card] = []
        while True:
            c = source.pop()
            moved.append(c)
            if c is card:
                break
        target = self._stack(destination)
        for c in reversed(moved):
            target.push(c)

    def get_sequence(self, card: Card, pile: TableauPile) -> tuple[Card, ...]:
        """``card`` and all cards on top of it, bottom first; empty if absent."""
        assert card is not None and pile is not None
        cards = list(self._stack(pile))
        for i, c in enumerate(cards):
            if c is card:
                return tuple(cards[i:])
        return ()

    def show_top(self, pile: TableauPile) -> None:
        stack = self._stack(pile)
        assert not stack.is_empty()
        self._visible.add(stack.peek())

    def hide_top(self, pile: TableauPile) -> None:
        stack = self._stack(pile)
        assert not stack.is_empty()
        self._visible.discard(stack.peek())

    def contains(self, card: Card, pile: Optional[TableauPile] = None) -> bool:
        """Whether ``card`` is in ``pile``, or in any pile if ``pile`` is None."""
        assert card is not None
        if pile is None:
            return any(self.contains(card, p) for p in TableauPile)
        return any(c is card for c in self._stack(pile))

    def is_visible(self, card: Card) -> bool:
        assert self.contains(card)
        return card in self._visible

    def pop(self, pile: TableauPile) -> Card:
        """Remove and return the top card of ``pile``; it is no longer tracked as face-up."""
        stack = self._stack(pile)
        assert not stack.is_empty()
        card = stack.pop()
        self._visible.discard(card)
        return card

    def push(self, card: Card, pile: TableauPile) -> None:
        """Place ``card`` face-up on top of ``pile``."""
        assert card is not None and pile is not None
        self._stack(pile).push(card)
        self._visible.add(card)

    def __str__(self) -> str:
        lines = []
        for pile in TableauPile:
            cells = [str(c) if c in self._visible else "##" for c in self._stack(pile)]
            lines.append(f"{pile + 1}: " + " ".join(cells))
        return "\n".join(lines)
