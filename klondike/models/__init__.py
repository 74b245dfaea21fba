"""Game models."""

from .card import Card, Color, Rank, Suit, create_deck, is_opposite_color, rank_value, shuffle_deck
from .game_state import GameState, PileKind, PileRef

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "rank_value",
    "is_opposite_color",
    "GameState",
    "PileKind",
    "PileRef",
]
