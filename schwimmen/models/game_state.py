"""Game state model."""

from pydantic import BaseModel, Field, model_validator

from .card import Card
from .player import DEFAULT_CARD_SLOTS, Player


class Game(BaseModel):
    """State of one match.

    ``unused_cards`` is the draw pile with the next card to deal at index 0.
    ``open_cards`` is the shared face-up pool; its length never changes.
    """

    players: list[Player]
    unused_cards: list[Card] = Field(default_factory=list)
    open_cards: list[Card | None] = Field(
        default_factory=lambda: [None] * DEFAULT_CARD_SLOTS
    )

    # Turn cursor. Starts one before player 0 so the first advance lands on 0.
    player_index: int = -1
    turn_number: int = 0
    is_over: bool = False

    @model_validator(mode="after")
    def check_layout(self) -> "Game":
        if not self.players:
            raise ValueError("A game needs at least one player")
        for player in self.players:
            if len(player.cards) != len(self.open_cards):
                raise ValueError(
                    f"Player {player.name!r} has {len(player.cards)} card slots, "
                    f"expected {len(self.open_cards)}"
                )
        if self.player_index < 0:
            self.player_index = len(self.players) - 1
        return self

    @property
    def active_player(self) -> Player:
        """Player at the turn cursor."""
        return self.players[self.player_index]

    def open_card_count(self) -> int:
        """Number of filled open-pile slots."""
        return sum(1 for c in self.open_cards if c is not None)

    def card_count(self) -> int:
        """Total cards held by the draw pile, open pile and all hands."""
        return (
            len(self.unused_cards)
            + self.open_card_count()
            + sum(len(p.hand()) for p in self.players)
        )

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_number}"]
        if self.is_over:
            parts.append("[OVER]")
        else:
            parts.append(f"{self.active_player.name}'s turn")
        parts.append(f"draw pile: {len(self.unused_cards)}")
        return " ".join(parts)
