"""Game engine for Klondike."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from klondike.config import Config
from klondike.logging import GameLogger
from klondike.models.card import Card
from klondike.models.game_state import STOCK, WASTE, GameState, PileKind, PileRef

from .dealer import initialize_game
from .errors import MoveError
from .validator import MoveValidator, ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_DRAW_COUNT = 3


@dataclass
class DrawResult:
    """Outcome of a draw from the stock."""

    cards: list[Card]
    recycled: bool = False


class GameEngine:
    """Owns the game state and applies draws and moves to it.

    Every mutation goes through draw_cards or move_card. A move either
    commits completely or raises a MoveError and leaves the state untouched.
    """

    def __init__(
        self,
        state: GameState | None = None,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            state: Existing state to play on (deals a new game if not provided)
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for the move event trail
            rng: Random source for dealing (seeded from config if not provided)
        """
        self.config = config or Config()
        self.rules = self.config.rules
        self.game_logger = game_logger
        self.validator = MoveValidator()

        if rng is None and self.config.game.seed is not None:
            rng = random.Random(self.config.game.seed)
        self.rng = rng

        self.state = state if state is not None else initialize_game(self.rng)
        self.move_count = 0

    def new_game(self) -> GameState:
        """Deal a fresh game, replacing the current state."""
        self.state = initialize_game(self.rng)
        self.move_count = 0
        logger.info("New game dealt")
        return self.state

    def resolve_pile(self, identifier: str) -> PileRef:
        """Resolve a pile identifier. See MoveValidator.resolve_pile."""
        return self.validator.resolve_pile(identifier)

    def can_move(self, source: str, destination: str) -> ValidationResult:
        """Check a move without applying it."""
        return self.validator.validate(self.state, source, destination)

    def draw_cards(self) -> DrawResult:
        """Draw from the stock onto the waste.

        If the stock is empty the waste is turned back into the stock, keeping
        its order and card visibility. Otherwise up to `rules.draw_count`
        cards move from the head of the stock to the top of the waste,
        each turned face-up.

        Returns:
            DrawResult with the cards drawn (empty on a recycle)
        """
        stock = self.state.get_pile(STOCK)
        waste = self.state.get_pile(WASTE)

        if not stock:
            self.state.set_pile(STOCK, waste)
            self.state.set_pile(WASTE, [])
            logger.info(f"Recycled {len(waste)} waste cards into stock")
            self._log_draw(recycled=True)
            return DrawResult(cards=[], recycled=True)

        draw_count = min(self.rules.draw_count, len(stock))
        drawn = [card.flipped(True) for card in stock[:draw_count]]
        self.state.set_pile(STOCK, stock[draw_count:])
        self.state.set_pile(WASTE, waste + drawn)

        logger.debug(f"Drew {', '.join(str(c) for c in drawn)}")
        self._log_draw(recycled=False)
        return DrawResult(cards=drawn)

    def move_card(self, source: str, destination: str) -> list[Card]:
        """Move the movable cards of one pile onto another.

        Args:
            source: Source pile identifier ("W", "T1".."T7", "F1".."F4")
            destination: Destination pile identifier

        Returns:
            Cards moved, bottom to top

        Raises:
            InvalidIdentifierError, IndexOutOfRangeError: Bad identifier
            EmptySourceError, NoMovableCardsError: Nothing to lift
            InvalidMoveError: Destination does not accept the cards
        """
        try:
            cards = self.validator.check_move(self.state, source, destination)
        except MoveError as e:
            logger.info(f"Rejected move {source} -> {destination}: {e.message}")
            if self.game_logger:
                self.game_logger.log_rejected(source, destination, int(e.code), e.message)
            raise

        src_ref = self.validator.resolve_pile(source)
        dest_ref = self.validator.resolve_pile(destination)

        src_pile = self.state.get_pile(src_ref)
        dest_pile = self.state.get_pile(dest_ref)
        remaining = src_pile[:len(src_pile) - len(cards)]

        # Expose the next card of a tableau
        if src_ref.kind == PileKind.TABLEAU and remaining and not remaining[-1].face_up:
            remaining[-1] = remaining[-1].flipped(True)

        self.state.set_pile(dest_ref, dest_pile + cards)
        self.state.set_pile(src_ref, remaining)
        self.move_count += 1

        logger.debug(f"Moved {len(cards)} card(s) {src_ref} -> {dest_ref}")
        if self.game_logger:
            self.game_logger.log_move(src_ref.identifier, dest_ref.identifier, cards)
        return cards

    def is_won(self) -> bool:
        """Check if all foundations are complete."""
        return self.state.is_won()

    def _log_draw(self, recycled: bool) -> None:
        if self.game_logger:
            self.game_logger.log_draw(
                self.state.stock_count,
                len(self.state.waste),
                recycled,
            )
