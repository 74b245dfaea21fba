"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from klondike.models.card import FOUNDATION_SUITS, RANK_NAMES, SUIT_SYMBOLS

if TYPE_CHECKING:
    from klondike.models.card import Card
    from klondike.models.game_state import GameState

# ANSI sequences
RED = "\033[31m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"

FACE_DOWN = "[░░░]"
EMPTY_SLOT = "     "


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Log records go to stderr so they do not interleave with the board.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(
        self,
        color: bool = True,
        clear_screen: bool = False,
        waste_visible: int = 3,
    ):
        """Initialize display.

        Args:
            color: Whether to print red suits in ANSI red
            clear_screen: Whether to clear the terminal before each board
            waste_visible: Number of waste cards to show
        """
        self.color = color
        self.clear_screen = clear_screen
        self.waste_visible = waste_visible

    def format_card(self, card: "Card") -> str:
        """Format a card as a fixed-width cell, masking face-down cards."""
        if not card.face_up:
            return FACE_DOWN
        cell = f"[{RANK_NAMES[card.rank]:>2}{SUIT_SYMBOLS[card.suit]}]"
        if self.color and card.is_red:
            return f"{RED}{cell}{RESET}"
        return cell

    def format_pile(self, cards: list["Card"]) -> str:
        """Format a pile left to right, bottom to top."""
        return " ".join(self.format_card(c) for c in cards)

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 42)

    def print_state(self, state: "GameState") -> None:
        """Print the whole board."""
        if self.clear_screen:
            print(CLEAR_SCREEN, end="")

        print("\nFoundations:")
        for i, pile in enumerate(state.foundations):
            suit = SUIT_SYMBOLS[FOUNDATION_SUITS[i]]
            print(f" F{i + 1} {suit}: {self.format_pile(pile)}")

        print("\nStock:")
        if state.stock_count:
            print(f" [{state.stock_count} cards]")
        else:
            print(" Empty")

        print("\nWaste:")
        waste = state.waste_top(self.waste_visible)
        if waste:
            print(f" {self.format_pile(waste)}")
        else:
            print(" Empty")

        print("\nTableaus:")
        for line in self.tableau_lines(state):
            print(line)

    def tableau_lines(self, state: "GameState") -> list[str]:
        """Build the tableau as side-by-side columns with a label row."""
        labels = " ".join(f" T{i + 1}  " for i in range(len(state.tableaus)))
        lines = [labels.rstrip()]

        height = max((len(pile) for pile in state.tableaus), default=0)
        for row in range(height):
            cells = [
                self.format_card(pile[row]) if row < len(pile) else EMPTY_SLOT
                for pile in state.tableaus
            ]
            lines.append(" ".join(cells).rstrip())
        return lines

    def print_help(self) -> None:
        """Print available commands."""
        print("Commands:")
        print("  draw (d)            Draw cards from the stock")
        print("  move SRC DEST (m)   Move cards, e.g. 'move W T3' or 'm T1 F1'")
        print("  help (h, ?)         Show this help")
        print("  quit (q, exit)      Leave the game")
        print("Piles: W = waste, T1-T7 = tableaus, F1-F4 = foundations")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        print(f"Error: {message}")

    def print_win(self, moves: int) -> None:
        """Print the win banner."""
        self.print_separator()
        print(f"All foundations complete in {moves} moves. You win!")
        self.print_separator()

    def print_goodbye(self) -> None:
        """Print the exit message."""
        print("Thanks for playing!")
