"""Formatters for game log output."""

from klondike.models.card import Card, Rank, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}

# Rank codes for log output
RANK_CODES: dict[Rank, str] = {
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


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "AH" for Ace of Hearts, "10S" for Ten of Spades).
    """
    return f"{RANK_CODES[card.rank]}{SUIT_CODES[card.suit]}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to comma-separated string, bottom to top.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card strings (e.g., "KS,QH,JC").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)
