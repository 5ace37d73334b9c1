"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from schwimmen.game.refreshable import Refreshable

if TYPE_CHECKING:
    from schwimmen.models.game_state import Game
    from schwimmen.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay(Refreshable):
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show player hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_hands(self, players: list["Player"]) -> None:
        """Print hands for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("Hands:")
        for player in players:
            print(f"  {player.name}: {player.hand()}")

    def refresh_after_start_new_game(self, game: "Game") -> None:
        self.print_separator()
        print(f"NEW GAME: {', '.join(p.name for p in game.players)}")
        self.print_separator()
        print(f"Open cards: {game.open_cards}")
        print(f"Draw pile: {len(game.unused_cards)} cards")
        self.print_hands(game.players)

    def refresh_after_game_turn(self, game: "Game") -> None:
        player = game.active_player
        knocked = [p.name for p in game.players if p.has_knocked]
        status_str = f" [knocked: {', '.join(knocked)}]" if knocked else ""
        print(f"\nTurn {game.turn_number}: {player.name}{status_str}")
        print(f"Open cards: {game.open_cards}")
        if self.show_hands:
            print(f"  Hand: {player.hand()}")

    def refresh_after_game_over(self, players: list["Player"]) -> None:
        print()
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()
        for rank, player in enumerate(players, 1):
            print(f"  #{rank}: {player.name} - {player.score:g} points")
