"""Tests for cards, the deck and pile primitives."""
import random

import pytest

from klondike.cards import Card, Color, Deck, Rank, Suit, make_deck_52
from klondike.piles import CardStack, TableauPile


def test_deck_52():
    deck = make_deck_52()
    assert len(deck) == 52
    assert len(set(id(c) for c in deck)) == 52
    assert len({(c.rank, c.suit) for c in deck}) == 52


def test_cards_compare_by_identity():
    a = Card(Rank.TEN, Suit.HEARTS)
    b = Card(Rank.TEN, Suit.HEARTS)
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_suit_colours():
    assert Suit.HEARTS.color is Color.RED
    assert Suit.DIAMONDS.color is Color.RED
    assert Suit.CLUBS.color is Color.BLACK
    assert Suit.SPADES.color is Color.BLACK
    assert Suit.CLUBS.same_color_as(Suit.SPADES)
    assert not Suit.HEARTS.same_color_as(Suit.SPADES)


def test_card_str():
    assert str(Card(Rank.QUEEN, Suit.HEARTS)) == "Q♥"
    assert str(Card(Rank.TEN, Suit.CLUBS)) == "10♣"
    assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"


def test_seeded_decks_are_reproducible():
    d1 = Deck(rng=random.Random(5))
    d2 = Deck(rng=random.Random(5))
    draws1 = [str(d1.draw()) for _ in range(52)]
    draws2 = [str(d2.draw()) for _ in range(52)]
    assert draws1 == draws2
    assert d1.is_empty()


def test_draw_from_empty_deck_raises():
    deck = Deck.from_cards([])
    assert deck.is_empty()
    with pytest.raises(RuntimeError):
        deck.draw()


def test_from_cards_draws_in_list_order():
    cards = make_deck_52()[:3]
    deck = Deck.from_cards(cards)
    assert [deck.draw() for _ in range(3)] == cards


def test_card_stack_push_pop_peek():
    stack = CardStack()
    assert stack.is_empty()
    a, b = Card(Rank.ACE, Suit.CLUBS), Card(Rank.TWO, Suit.CLUBS)
    stack.push(a)
    stack.push(b)
    assert len(stack) == 2
    assert stack.peek() is b
    assert list(stack) == [a, b]
    assert stack.pop() is b
    stack.clear()
    assert stack.is_empty()
    with pytest.raises(AssertionError):
        stack.pop()


def test_tableau_pile_indices():
    assert [int(p) for p in TableauPile] == list(range(7))
    assert TableauPile(6) is TableauPile.SEVENTH
    with pytest.raises(ValueError):
        TableauPile(7)
