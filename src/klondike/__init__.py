"""Klondike solitaire tableau engine."""

__version__ = "0.1.0"

from .cards import Card, CardSource, Color, Deck, Rank, Suit, make_deck_52
from .piles import CardStack, TableauPile, NUM_PILES
from .tableau import Tableau
from .moves import TableauMove, legal_moves, apply_move
