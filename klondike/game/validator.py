"""Pile resolution and move validation."""

from dataclasses import dataclass

from klondike.models.card import Card, Rank, is_opposite_color, rank_value
from klondike.models.game_state import (
    NUM_FOUNDATIONS,
    NUM_TABLEAUS,
    WASTE,
    GameState,
    PileKind,
    PileRef,
    foundation,
    tableau,
)

from .errors import (
    EmptySourceError,
    ErrorCode,
    IndexOutOfRangeError,
    InvalidIdentifierError,
    InvalidMoveError,
    MoveError,
    NoMovableCardsError,
)


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""
    error_code: ErrorCode = ErrorCode.NONE
    cards: tuple[Card, ...] = ()


def _parse_index(identifier: str, limit: int) -> int:
    """Parse the 1-based pile number after the prefix.

    Returns:
        0-based index
    """
    suffix = identifier[1:]
    if not (suffix.isascii() and suffix.isdigit()):
        raise IndexOutOfRangeError(
            f"Pile number must be 1-{limit}: {identifier!r}", identifier
        )
    number = int(suffix)
    if number < 1 or number > limit:
        raise IndexOutOfRangeError(
            f"Pile number must be 1-{limit}: {identifier!r}", identifier
        )
    return number - 1


class MoveValidator:
    """Resolves pile identifiers and checks move legality."""

    def resolve_pile(self, identifier: str) -> PileRef:
        """Resolve a pile identifier ("W", "T1".."T7", "F1".."F4").

        Args:
            identifier: Pile identifier as typed by the player

        Returns:
            PileRef for the pile

        Raises:
            InvalidIdentifierError: Unknown prefix
            IndexOutOfRangeError: Missing, non-numeric or out-of-range number
        """
        if identifier == "W":
            return WASTE
        if identifier.startswith("T"):
            return tableau(_parse_index(identifier, NUM_TABLEAUS))
        if identifier.startswith("F"):
            return foundation(_parse_index(identifier, NUM_FOUNDATIONS))
        raise InvalidIdentifierError(f"Unknown pile identifier: {identifier!r}", identifier)

    def select_movable_cards(self, source: PileRef, pile: list[Card]) -> list[Card]:
        """Get the cards that would be lifted from a source pile.

        Waste and foundations offer only their top card. A tableau offers its
        whole face-up run above the topmost face-down card.

        Args:
            source: Source pile reference
            pile: Cards of the source pile (bottom to top)

        Returns:
            Cards to move, bottom to top

        Raises:
            EmptySourceError: Pile has no cards
            NoMovableCardsError: Tableau top card is face-down
        """
        if not pile:
            raise EmptySourceError(f"Source pile {source} is empty", source.identifier)

        if source.kind != PileKind.TABLEAU:
            return [pile[-1]]

        start = len(pile)
        while start > 0 and pile[start - 1].face_up:
            start -= 1

        movable = pile[start:]
        if not movable:
            raise NoMovableCardsError(
                f"No face-up cards to move from {source}", source.identifier
            )
        return movable

    def is_valid_move(
        self,
        cards: list[Card],
        destination: PileRef,
        pile: list[Card],
    ) -> bool:
        """Check if cards may be placed on a destination pile.

        The bottom card of `cards` is compared with the destination's top card.

        Args:
            cards: Candidate cards, bottom to top
            destination: Destination pile reference
            pile: Cards of the destination pile (bottom to top)

        Returns:
            True if the move is legal
        """
        if not cards:
            return False
        moving = cards[0]

        if destination.kind == PileKind.FOUNDATION:
            # Foundations are built one card at a time
            if len(cards) != 1:
                return False
            if moving.suit != destination.suit:
                return False
            if not pile:
                return moving.rank == Rank.ACE
            return rank_value(moving.rank) == rank_value(pile[-1].rank) + 1

        if destination.kind == PileKind.TABLEAU:
            if not pile:
                return moving.rank == Rank.KING
            top = pile[-1]
            return is_opposite_color(moving, top) and (
                rank_value(moving.rank) + 1 == rank_value(top.rank)
            )

        # Nothing can be moved onto the waste or the stock
        return False

    def validate(self, state: GameState, source: str, destination: str) -> ValidationResult:
        """Validate a move without modifying the state.

        Args:
            state: Current game state
            source: Source pile identifier
            destination: Destination pile identifier

        Returns:
            ValidationResult with the cards that would move when valid
        """
        try:
            cards = self.check_move(state, source, destination)
        except MoveError as e:
            return ValidationResult(
                is_valid=False,
                error_message=e.message,
                error_code=e.code,
            )
        return ValidationResult(is_valid=True, cards=tuple(cards))

    def check_move(self, state: GameState, source: str, destination: str) -> list[Card]:
        """Resolve and validate a move.

        Returns:
            Cards that would move, bottom to top

        Raises:
            MoveError: The move is not possible
        """
        src_ref = self.resolve_pile(source)
        dest_ref = self.resolve_pile(destination)
        cards = self.select_movable_cards(src_ref, state.get_pile(src_ref))

        if not self.is_valid_move(cards, dest_ref, state.get_pile(dest_ref)):
            raise InvalidMoveError(
                f"Cannot move {_describe(cards)} from {src_ref} to {dest_ref}",
                destination,
            )
        return cards


def _describe(cards: list[Card]) -> str:
    if len(cards) == 1:
        return str(cards[0])
    return f"{cards[0]}..{cards[-1]}"
