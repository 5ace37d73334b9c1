"""Game models."""

from .card import Card, CardSuit, CardValue, create_deck
from .game_state import Game
from .player import Player

__all__ = [
    "Card",
    "CardSuit",
    "CardValue",
    "create_deck",
    "Player",
    "Game",
]
