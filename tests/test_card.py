"""Tests for card models."""

import random

import pytest
from pydantic import ValidationError

from klondike.models.card import (
    Card,
    Color,
    Rank,
    Suit,
    create_deck,
    is_opposite_color,
    rank_value,
    shuffle_deck,
)


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a card defaults to face-down."""
        card = Card(suit=Suit.SPADES, rank=Rank.ACE)
        assert card.suit == Suit.SPADES
        assert card.rank == Rank.ACE
        assert not card.face_up

    def test_color(self):
        """Test derived color."""
        assert Card(suit=Suit.HEARTS, rank=Rank.TWO).color == Color.RED
        assert Card(suit=Suit.DIAMONDS, rank=Rank.TWO).is_red
        assert Card(suit=Suit.CLUBS, rank=Rank.TWO).color == Color.BLACK
        assert not Card(suit=Suit.SPADES, rank=Rank.TWO).is_red

    def test_flipped_returns_new_card(self):
        """Test flipping leaves the original untouched."""
        card = Card(suit=Suit.CLUBS, rank=Rank.NINE)
        up = card.flipped(True)

        assert up.face_up
        assert not card.face_up
        assert up.key == card.key

    def test_flipped_same_state_is_identity(self):
        """Test flipping to the current state returns the same card."""
        card = Card(suit=Suit.CLUBS, rank=Rank.NINE, face_up=True)
        assert card.flipped(True) is card

    def test_frozen(self):
        """Test cards are immutable."""
        card = Card(suit=Suit.CLUBS, rank=Rank.NINE)
        with pytest.raises(ValidationError):
            card.face_up = True

    def test_card_equality(self):
        """Test card equality is by value."""
        card1 = Card(suit=Suit.SPADES, rank=Rank.ACE)
        card2 = Card(suit=Suit.SPADES, rank=Rank.ACE)
        card3 = Card(suit=Suit.HEARTS, rank=Rank.ACE)

        assert card1 == card2
        assert card1 != card3
        assert len({card1, card2}) == 1

    def test_card_string(self):
        """Test card string representation."""
        assert str(Card(suit=Suit.HEARTS, rank=Rank.TEN)) == "10♥"
        assert str(Card(suit=Suit.SPADES, rank=Rank.KING)) == "K♠"


class TestOrdering:
    """Tests for rank values and color opposition."""

    def test_rank_values(self):
        """Test Ace=1 through King=13."""
        assert rank_value(Rank.ACE) == 1
        assert rank_value(Rank.TEN) == 10
        assert rank_value(Rank.KING) == 13
        assert [rank_value(r) for r in Rank] == list(range(1, 14))

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (Suit.HEARTS, Suit.CLUBS, True),
            (Suit.DIAMONDS, Suit.SPADES, True),
            (Suit.SPADES, Suit.HEARTS, True),
            (Suit.HEARTS, Suit.DIAMONDS, False),
            (Suit.CLUBS, Suit.SPADES, False),
            (Suit.HEARTS, Suit.HEARTS, False),
        ],
    )
    def test_is_opposite_color(self, a, b, expected):
        """Test exactly one red card means opposite colors."""
        card_a = Card(suit=a, rank=Rank.FIVE)
        card_b = Card(suit=b, rank=Rank.SIX)
        assert is_opposite_color(card_a, card_b) is expected
        assert is_opposite_color(card_b, card_a) is expected


class TestDeck:
    """Tests for deck creation and shuffling."""

    def test_deck_size(self):
        """Test that a deck has 52 distinct cards."""
        deck = create_deck()
        assert len(deck) == 52
        assert len({c.key for c in deck}) == 52

    def test_deck_face_down(self):
        """Test that every card starts face-down."""
        assert not any(c.face_up for c in create_deck())

    def test_deck_order(self):
        """Test suit-major, rank-minor canonical order."""
        deck = create_deck()
        assert deck[0] == Card(suit=Suit.HEARTS, rank=Rank.ACE)
        assert deck[12] == Card(suit=Suit.HEARTS, rank=Rank.KING)
        assert deck[13] == Card(suit=Suit.DIAMONDS, rank=Rank.ACE)
        assert deck[-1] == Card(suit=Suit.SPADES, rank=Rank.KING)

    def test_shuffle_is_permutation(self):
        """Test that shuffling keeps the same cards."""
        deck = create_deck()
        shuffle_deck(deck, random.Random(7))
        assert sorted(c.key for c in deck) == sorted(c.key for c in create_deck())

    def test_shuffle_deterministic_with_seed(self):
        """Test that the same seed gives the same order."""
        deck1 = create_deck()
        deck2 = create_deck()
        shuffle_deck(deck1, random.Random(42))
        shuffle_deck(deck2, random.Random(42))
        assert deck1 == deck2
        assert deck1 != create_deck()
