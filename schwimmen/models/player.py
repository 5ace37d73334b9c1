"""Player model."""

from pydantic import BaseModel, Field

from .card import Card

DEFAULT_CARD_SLOTS = 3


class Player(BaseModel):
    """Player state.

    ``score`` and ``has_knocked`` are written by play logic outside the
    game-flow core; the core only reads them.
    """

    name: str
    cards: list[Card | None] = Field(
        default_factory=lambda: [None] * DEFAULT_CARD_SLOTS
    )
    score: float = 0.0
    has_knocked: bool = False

    @classmethod
    def with_slots(cls, name: str, card_slots: int) -> "Player":
        """Create a player with ``card_slots`` empty hand slots."""
        return cls(name=name, cards=[None] * card_slots)

    def hand(self) -> list[Card]:
        """Get the cards currently held (empty slots skipped)."""
        return [c for c in self.cards if c is not None]

    def __str__(self) -> str:
        status = " (knocked)" if self.has_knocked else ""
        return f"{self.name}[{self.score:g}]{status}"

    def __repr__(self) -> str:
        return (
            f"Player(name={self.name!r}, score={self.score}, "
            f"knocked={self.has_knocked})"
        )
