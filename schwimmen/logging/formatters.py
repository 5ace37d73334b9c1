"""Formatters for game log output."""

from schwimmen.models.card import VALUE_NAMES, Card, CardSuit
from schwimmen.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[CardSuit, str] = {
    CardSuit.CLUBS: "C",
    CardSuit.SPADES: "S",
    CardSuit.HEARTS: "H",
    CardSuit.DIAMONDS: "D",
}

EMPTY_SLOT = "--"


def format_card(card: Card | None) -> str:
    """Format a single card slot to string.

    Args:
        card: Card to format, or None for an empty slot.

    Returns:
        Formatted string (e.g., "S10" for Spades 10, "--" for an empty slot).
    """
    if card is None:
        return EMPTY_SLOT
    return f"{SUIT_CODES[card.suit]}{VALUE_NAMES[card.value]}"


def format_cards(cards: list[Card | None]) -> str:
    """Format card slots to a comma-separated string.

    Empty string if there are no slots.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Map each player name to their formatted hand."""
    return {p.name: format_cards(p.cards) for p in players}
