"""Observer hooks fired after game-flow state changes."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable

if TYPE_CHECKING:
    from schwimmen.models.game_state import Game
    from schwimmen.models.player import Player

logger = logging.getLogger(__name__)


class Refreshable:
    """Listener notified by a RefreshingService.

    Every hook is a no-op by default; override the ones you need.
    """

    def refresh_after_start_new_game(self, game: "Game") -> None:
        """Called after a new game was set up and dealt."""

    def refresh_after_game_turn(self, game: "Game") -> None:
        """Called after the turn passed to the next player."""

    def refresh_after_game_over(self, players: list["Player"]) -> None:
        """Called after the game ended, with players ranked best first."""


class RefreshingService:
    """Holds registered Refreshables and fans notifications out to them."""

    def __init__(self) -> None:
        self.refreshables: list[Refreshable] = []

    def add_refreshable(self, refreshable: Refreshable) -> None:
        """Register a listener."""
        self.refreshables.append(refreshable)

    def add_refreshables(self, refreshables: Iterable[Refreshable]) -> None:
        """Register several listeners in order."""
        for refreshable in refreshables:
            self.add_refreshable(refreshable)

    def remove_refreshable(self, refreshable: Refreshable) -> None:
        """Unregister a listener. Unknown listeners are ignored."""
        if refreshable in self.refreshables:
            self.refreshables.remove(refreshable)

    def on_all_refreshables(
        self, method: Callable[..., None], *args: Any
    ) -> None:
        """Call ``method`` on every listener, in registration order.

        Args:
            method: Unbound hook, e.g. ``Refreshable.refresh_after_game_turn``.
            *args: Arguments passed to the hook.
        """
        logger.debug(f"Notifying {len(self.refreshables)} listeners: {method.__name__}")
        for refreshable in self.refreshables:
            getattr(refreshable, method.__name__)(*args)
