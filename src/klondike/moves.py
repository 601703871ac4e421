"""
Tableau-to-tableau moves as seen from the game controller: which moves are
legal right now, and applying one while keeping the new pile top face-up.
"""
from __future__ import annotations

from typing import NamedTuple

from .cards import Card
from .piles import TableauPile
from .tableau import Tableau


class TableauMove(NamedTuple):
    card: Card
    origin: TableauPile
    destination: TableauPile

    def __str__(self) -> str:
        return f"{self.card} {self.origin + 1}->{self.destination + 1}"


def legal_moves(tableau: Tableau) -> list[TableauMove]:
    """
    All legal moves of a face-up card (with the run on top of it) to another
    pile, ordered by origin pile, then by depth in the pile, then destination.
    A King already at the bottom of its pile is never moved to an empty pile.
    """
    moves: list[TableauMove] = []
    for origin in TableauPile:
        stack = tableau.get_stack(origin)
        for depth, card in enumerate(stack):
            if not tableau.is_visible(card):
                continue
            for destination in TableauPile:
                if destination == origin:
                    continue
                if depth == 0 and tableau.is_empty(destination):
                    continue
                if tableau.can_move_to(card, destination):
                    moves.append(TableauMove(card, origin, destination))
    return moves


def apply_move(tableau: Tableau, move: TableauMove) -> bool:
    """
    Validate and apply ``move``. If it uncovers a face-down card, that card is
    turned face-up. Returns True when a card was revealed.
    """
    card, origin, destination = move
    if origin == destination:
        raise ValueError("Origin and destination piles must differ")
    if not tableau.contains(card, origin):
        raise ValueError(f"{card} is not in pile {origin.name}")
    if not tableau.is_visible(card):
        raise ValueError(f"{card} is face-down and cannot be moved")
    if not tableau.can_move_to(card, destination):
        raise ValueError(f"Illegal move: {card} onto pile {destination.name}")

    reveals = tableau.reveals_top(card, origin)
    tableau.move_within(card, origin, destination)
    if reveals:
        tableau.show_top(origin)
    return reveals
