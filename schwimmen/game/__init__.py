"""Game flow logic."""

from .refreshable import Refreshable, RefreshingService
from .service import MAX_PLAYERS, MIN_PLAYERS, GameService

__all__ = [
    "GameService",
    "Refreshable",
    "RefreshingService",
    "MIN_PLAYERS",
    "MAX_PLAYERS",
]
