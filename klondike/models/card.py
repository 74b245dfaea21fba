"""Card model and deck factory."""

import random
from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (value is the canonical deck and foundation order)."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card rank. Value is the numeric rank (Ace low)."""

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


class Color(IntEnum):
    """Card color."""

    RED = 0
    BLACK = 1


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

RED_SUITS = frozenset({Suit.HEARTS, Suit.DIAMONDS})

# Foundation F1..F4 suits, by index
FOUNDATION_SUITS: tuple[Suit, ...] = (
    Suit.HEARTS,
    Suit.DIAMONDS,
    Suit.CLUBS,
    Suit.SPADES,
)

DECK_SIZE = len(Suit) * len(Rank)


class Card(BaseModel, frozen=True):
    """Single playing card."""

    suit: Suit
    rank: Rank
    face_up: bool = False

    @property
    def is_red(self) -> bool:
        """Check if this card has a red suit."""
        return self.suit in RED_SUITS

    @property
    def color(self) -> Color:
        """Get the card color."""
        return Color.RED if self.is_red else Color.BLACK

    def flipped(self, face_up: bool = True) -> "Card":
        """Return a copy of this card with the given visibility."""
        if self.face_up == face_up:
            return self
        return self.model_copy(update={"face_up": face_up})

    @property
    def key(self) -> tuple[Suit, Rank]:
        """Identity of the physical card (visibility ignored)."""
        return (self.suit, self.rank)

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        state = "up" if self.face_up else "down"
        return f"Card({self}, {state})"


def rank_value(rank: Rank) -> int:
    """Get the numeric value of a rank (Ace=1 .. King=13)."""
    return int(rank)


def is_opposite_color(a: Card, b: Card) -> bool:
    """Check if exactly one of the two cards is red."""
    return a.is_red != b.is_red


def create_deck() -> list[Card]:
    """Create an unshuffled 52-card deck, all cards face-down.

    Order is suit-major (Hearts, Diamonds, Clubs, Spades) and rank-minor
    (Ace .. King).
    """
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> None:
    """Shuffle a deck in place.

    Args:
        deck: Cards to permute.
        rng: Random source. Uses the module-level generator if not provided.
    """
    if rng is None:
        random.shuffle(deck)
    else:
        rng.shuffle(deck)
