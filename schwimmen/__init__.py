"""Schwimmen game-flow core."""

__version__ = "0.1.0"
