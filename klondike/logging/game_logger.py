"""Game logger for move-by-move event trails."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from klondike.models.card import Card

from .formatters import format_cards


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "klondike_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    The log is append-only and is never read back into a game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, seed: int | None) -> None:
        """Log session start.

        Args:
            seed: Shuffle seed, if one was given.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
        })

    def log_draw(self, stock_count: int, waste_count: int, recycled: bool) -> None:
        """Log a draw from the stock.

        Args:
            stock_count: Stock size after the draw.
            waste_count: Waste size after the draw.
            recycled: True if the waste was turned back into the stock.
        """
        self._write({
            "type": "draw",
            "stock": stock_count,
            "waste": waste_count,
            "recycled": recycled,
        })

    def log_move(self, source: str, destination: str, cards: list[Card]) -> None:
        """Log a successful move.

        Args:
            source: Source pile identifier.
            destination: Destination pile identifier.
            cards: Cards moved, bottom to top.
        """
        self._write({
            "type": "move",
            "source": source,
            "destination": destination,
            "cards": format_cards(cards),
        })

    def log_rejected(self, source: str, destination: str, code: int, message: str) -> None:
        """Log a rejected move.

        Args:
            source: Source pile identifier as entered.
            destination: Destination pile identifier as entered.
            code: ErrorCode value.
            message: Error message shown to the player.
        """
        self._write({
            "type": "rejected",
            "source": source,
            "destination": destination,
            "code": code,
            "message": message,
        })

    def log_session_end(self, won: bool, moves: int) -> None:
        """Log session end.

        Args:
            won: Whether all foundations were completed.
            moves: Number of successful moves.
        """
        self._write({
            "type": "session_end",
            "timestamp": datetime.now().isoformat(),
            "won": won,
            "moves": moves,
        })
