"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from schwimmen.config import GameLogConfig
from schwimmen.game.refreshable import Refreshable
from schwimmen.models.game_state import Game
from schwimmen.models.player import Player

from .formatters import format_cards, format_hands


class GameLogger(Refreshable):
    """Logger for game events in JSONL format.

    Registered as a listener on a GameService. Each line in the output
    file is a JSON object representing one event.
    """

    def __init__(self, config: GameLogConfig | None = None, show_hands: bool = True):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
            show_hands: Whether hands are written on every turn.
        """
        self.config = config or GameLogConfig()
        self.show_hands = show_hands
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
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def refresh_after_start_new_game(self, game: Game) -> None:
        """Log game start with the dealt hands and open cards."""
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "players": [p.name for p in game.players],
            "hands": format_hands(game.players),
            "open_cards": format_cards(game.open_cards),
            "draw_pile": len(game.unused_cards),
        })

    def refresh_after_game_turn(self, game: Game) -> None:
        """Log the player whose turn just began."""
        record: dict[str, Any] = {
            "type": "turn",
            "turn": game.turn_number,
            "player": game.active_player.name,
            "knocked": [p.name for p in game.players if p.has_knocked],
            "open_cards": format_cards(game.open_cards),
            "draw_pile": len(game.unused_cards),
        }
        if self.show_hands:
            record["hands"] = format_hands(game.players)
        self._write(record)

    def refresh_after_game_over(self, players: list[Player]) -> None:
        """Log the final ranking."""
        self._write({
            "type": "game_over",
            "timestamp": datetime.now().isoformat(),
            "ranking": [
                {"name": p.name, "score": p.score}
                for p in players
            ],
        })
