"""Main entry point for console Klondike."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from klondike.commands import Command, CommandType, read_command
from klondike.config import load_config
from klondike.game.engine import GameEngine
from klondike.game.errors import MoveError
from klondike.logging import GameLogConfig, GameLogger
from klondike.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Klondike Solitaire in the terminal"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed for a reproducible deal (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not color red suits",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear the screen before each board",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Append a JSONL move log to this file",
    )
    return parser.parse_args(argv)


def run_game_loop(
    engine: GameEngine,
    display: GameDisplay,
    read_fn: Callable[[], Command] = read_command,
) -> bool:
    """Run the command loop until the player quits or wins.

    Args:
        engine: Game engine holding the state
        display: Board renderer
        read_fn: Source of player commands

    Returns:
        True if the game was won
    """
    display.print_state(engine.state)

    while True:
        command = read_fn()

        if command.type == CommandType.QUIT:
            display.print_goodbye()
            return False

        if command.type == CommandType.INVALID:
            print(command.error)
            continue

        if command.type == CommandType.HELP:
            display.print_help()
            continue

        if command.type == CommandType.DRAW:
            result = engine.draw_cards()
            if result.recycled:
                print("Recycled waste pile back into stock.")
        elif command.type == CommandType.MOVE:
            try:
                engine.move_card(command.source, command.destination)
            except MoveError as e:
                display.print_error(e.message)

        display.print_state(engine.state)

        if engine.is_won():
            display.print_win(engine.move_count)
            return True


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.no_color:
        config.display.color = False
    if args.clear:
        config.display.clear_screen = True
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))

    setup_logging(config.logging.level)

    display = GameDisplay(
        color=config.display.color,
        clear_screen=config.display.clear_screen,
        waste_visible=config.display.waste_visible,
    )

    try:
        with GameLogger(config.game_log) as game_logger:
            engine = GameEngine(config=config, game_logger=game_logger)
            game_logger.log_session_start(config.game.seed)
            logger.info(f"Session started (seed={config.game.seed})")

            won = run_game_loop(engine, display)

            game_logger.log_session_end(won, engine.move_count)
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
