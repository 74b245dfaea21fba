"""Game logic."""

from .dealer import deal_to_tableau, initialize_game
from .engine import DrawResult, GameEngine
from .errors import (
    EmptySourceError,
    ErrorCode,
    IndexOutOfRangeError,
    InvalidIdentifierError,
    InvalidMoveError,
    MoveError,
    NoMovableCardsError,
)
from .validator import MoveValidator, ValidationResult

__all__ = [
    "deal_to_tableau",
    "initialize_game",
    "DrawResult",
    "GameEngine",
    "ErrorCode",
    "MoveError",
    "InvalidIdentifierError",
    "IndexOutOfRangeError",
    "EmptySourceError",
    "NoMovableCardsError",
    "InvalidMoveError",
    "MoveValidator",
    "ValidationResult",
]
