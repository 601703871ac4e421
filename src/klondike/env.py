"""
Observation encoding of a tableau for agents and analysis tools.

Encoders turn tableau state into fixed-shape numpy arrays:

- ``encode_tableau``: one row per pile, one column per depth. Face-up cards
  are stored as ``card_index + 1``, face-down cards as ``HIDDEN`` and empty
  slots as 0, so an agent never sees the identity of a face-down card.
- ``encode_visible_set``: 52-dim bit vector of the face-up cards in play.
- ``legal_move_mask``: 7×7 pile-to-pile mask of available moves.
"""
from __future__ import annotations

import numpy as np

from .cards import Card, Rank
from .moves import legal_moves
from .piles import NUM_PILES, TableauPile
from .tableau import Tableau


NUM_CARDS: int = 52
NUM_RANKS: int = len(Rank)
# Deepest possible pile: 6 face-down cards under a full King..Ace run.
MAX_PILE_DEPTH: int = NUM_PILES - 1 + NUM_RANKS
HIDDEN: int = -1


def card_index(card: Card) -> int:
    """
    Stable index 0..51 matching ``make_deck_52()`` order: suit-major, then
    rank Ace..King.
    """
    return int(card.suit) * NUM_RANKS + (int(card.rank) - 1)


def encode_tableau(tableau: Tableau) -> np.ndarray:
    """(7, MAX_PILE_DEPTH) int8 array; row i is pile i, bottom card in column 0."""
    obs = np.zeros((NUM_PILES, MAX_PILE_DEPTH), dtype=np.int8)
    for pile in TableauPile:
        stack = tableau.get_stack(pile)
        if len(stack) > MAX_PILE_DEPTH:
            raise ValueError(f"Pile {pile.name} holds {len(stack)} cards; at most {MAX_PILE_DEPTH} can be encoded")
        for depth, card in enumerate(stack):
            obs[pile, depth] = card_index(card) + 1 if tableau.is_visible(card) else HIDDEN
    return obs


def encode_visible_set(tableau: Tableau) -> np.ndarray:
    """52-dim int8 vector: 1 for every face-up card in the tableau."""
    vec = np.zeros(NUM_CARDS, dtype=np.int8)
    for pile in TableauPile:
        for card in tableau.get_stack(pile):
            if tableau.is_visible(card):
                vec[card_index(card)] = 1
    return vec


def legal_move_mask(tableau: Tableau) -> np.ndarray:
    """(7, 7) bool mask: ``mask[i, j]`` is True if some card may move from pile i to pile j."""
    mask = np.zeros((NUM_PILES, NUM_PILES), dtype=bool)
    for move in legal_moves(tableau):
        mask[move.origin, move.destination] = True
    return mask
