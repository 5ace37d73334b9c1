"""Card model and deck definition."""

from enum import IntEnum

from pydantic import BaseModel


class CardSuit(IntEnum):
    """Card suit."""

    CLUBS = 0
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3


class CardValue(IntEnum):
    """Card value, ordered from weakest to strongest."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def reduced(cls) -> list["CardValue"]:
        """Values used by the reduced 32-card deck (7 to Ace)."""
        return [v for v in cls if v >= cls.SEVEN]


VALUE_NAMES = {
    CardValue.TWO: "2",
    CardValue.THREE: "3",
    CardValue.FOUR: "4",
    CardValue.FIVE: "5",
    CardValue.SIX: "6",
    CardValue.SEVEN: "7",
    CardValue.EIGHT: "8",
    CardValue.NINE: "9",
    CardValue.TEN: "10",
    CardValue.JACK: "J",
    CardValue.QUEEN: "Q",
    CardValue.KING: "K",
    CardValue.ACE: "A",
}

SUIT_SYMBOLS = {
    CardSuit.CLUBS: "♣",
    CardSuit.SPADES: "♠",
    CardSuit.HEARTS: "♥",
    CardSuit.DIAMONDS: "♦",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: CardSuit
    value: CardValue

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{VALUE_NAMES[self.value]}"

    def __repr__(self) -> str:
        return str(self)


def create_deck() -> list[Card]:
    """Create the reduced 32-card deck, suit by suit."""
    return [
        Card(suit=suit, value=value)
        for suit in CardSuit
        for value in CardValue.reduced()
    ]
