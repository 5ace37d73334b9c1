"""Exceptions raised by the game-flow core."""


class GameError(Exception):
    """Base class for all game-flow errors."""


class PlayerCountError(GameError):
    """Number of players is outside the allowed range."""


class PlayerNameError(GameError):
    """A player name is blank or duplicated."""


class InsufficientCardsError(GameError):
    """Draw pile cannot cover the requested cards."""


class NoActiveGameError(GameError):
    """An operation needs a game but none has been started."""


class GameOverError(GameError):
    """The current game has already ended."""
