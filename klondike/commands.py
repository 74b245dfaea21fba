"""Console command parsing and input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandType(str, Enum):
    """Kind of command entered by the player."""

    DRAW = "draw"
    MOVE = "move"
    HELP = "help"
    QUIT = "quit"
    INVALID = "invalid"


COMMAND_ALIASES: dict[str, CommandType] = {
    "draw": CommandType.DRAW,
    "dr": CommandType.DRAW,
    "d": CommandType.DRAW,
    "move": CommandType.MOVE,
    "mv": CommandType.MOVE,
    "m": CommandType.MOVE,
    "help": CommandType.HELP,
    "h": CommandType.HELP,
    "?": CommandType.HELP,
    "quit": CommandType.QUIT,
    "exit": CommandType.QUIT,
    "q": CommandType.QUIT,
}

PROMPT = "\nEnter command: "


@dataclass
class Command:
    """Parsed player command."""

    type: CommandType
    source: str = ""
    destination: str = ""
    error: str | None = None


def parse_command(line: str) -> Command:
    """Parse one line of player input.

    Pile identifiers are upper-cased so "t1" and "T1" are the same pile.

    Args:
        line: Raw input line

    Returns:
        Command (type INVALID with an error message if not understood)
    """
    tokens = line.split()
    if not tokens:
        return Command(CommandType.INVALID, error="Please enter a command.")

    command_type = COMMAND_ALIASES.get(tokens[0].lower())
    if command_type is None:
        return Command(
            CommandType.INVALID,
            error=f"Unknown command '{tokens[0]}'. Available commands: draw, move, help, quit",
        )

    if command_type == CommandType.MOVE:
        if len(tokens) != 3:
            return Command(
                CommandType.INVALID,
                error="Invalid move command. Usage: move SOURCE DESTINATION",
            )
        return Command(
            CommandType.MOVE,
            source=tokens[1].upper(),
            destination=tokens[2].upper(),
        )

    if len(tokens) > 1:
        return Command(
            CommandType.INVALID,
            error=f"'{tokens[0]}' takes no arguments",
        )
    return Command(command_type)


def read_command(prompt: str = PROMPT) -> Command:
    """Read and parse one command from stdin.

    End of input and Ctrl-C are treated as quit.
    """
    try:
        raw = input(prompt)
    except (EOFError, KeyboardInterrupt):
        return Command(CommandType.QUIT)
    return parse_command(raw)
