"""Move engine errors."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for rejected moves."""

    NONE = 0
    INVALID_IDENTIFIER = 1
    INDEX_OUT_OF_RANGE = 2
    EMPTY_SOURCE = 3
    NO_MOVABLE_CARDS = 4
    INVALID_MOVE = 5


class MoveError(Exception):
    """Base class for recoverable move failures.

    A MoveError never leaves the game state modified.
    """

    code = ErrorCode.NONE

    def __init__(self, message: str, identifier: str | None = None):
        super().__init__(message)
        self.message = message
        self.identifier = identifier


class InvalidIdentifierError(MoveError):
    """Pile identifier does not match any known pile family."""

    code = ErrorCode.INVALID_IDENTIFIER


class IndexOutOfRangeError(MoveError):
    """Pile number is missing, non-numeric or out of range."""

    code = ErrorCode.INDEX_OUT_OF_RANGE


class EmptySourceError(MoveError):
    """Source pile has no cards."""

    code = ErrorCode.EMPTY_SOURCE


class NoMovableCardsError(MoveError):
    """Source tableau has no face-up cards on top."""

    code = ErrorCode.NO_MOVABLE_CARDS


class InvalidMoveError(MoveError):
    """Cards cannot legally be placed on the destination."""

    code = ErrorCode.INVALID_MOVE
