"""Shared fixtures."""

import pytest

from klondike.game.engine import GameEngine
from klondike.game.validator import MoveValidator
from klondike.models.card import Card, Rank, Suit
from klondike.models.game_state import GameState


def up(suit: Suit, rank: Rank) -> Card:
    """Face-up card."""
    return Card(suit=suit, rank=rank, face_up=True)


def down(suit: Suit, rank: Rank) -> Card:
    """Face-down card."""
    return Card(suit=suit, rank=rank, face_up=False)


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.fixture
def empty_state():
    return GameState()


@pytest.fixture
def make_engine():
    """Build an engine around a hand-built state."""

    def _make(**piles) -> GameEngine:
        return GameEngine(state=GameState(**piles))

    return _make
