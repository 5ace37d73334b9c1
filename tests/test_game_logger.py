"""Tests for game log output."""

import json

import pytest

from schwimmen.config import GameLogConfig
from schwimmen.logging import GameLogger, format_card, format_cards, format_hands
from schwimmen.models.card import Card, CardSuit, CardValue
from schwimmen.models.player import Player


class TestFormatters:
    """Tests for log formatters."""

    def test_format_card(self):
        assert format_card(Card(suit=CardSuit.SPADES, value=CardValue.TEN)) == "S10"
        assert format_card(Card(suit=CardSuit.HEARTS, value=CardValue.ACE)) == "HA"

    def test_format_empty_slot(self):
        assert format_card(None) == "--"

    def test_format_cards(self):
        cards = [
            Card(suit=CardSuit.CLUBS, value=CardValue.SEVEN),
            None,
            Card(suit=CardSuit.DIAMONDS, value=CardValue.QUEEN),
        ]
        assert format_cards(cards) == "C7,--,DQ"
        assert format_cards([]) == ""

    def test_format_hands(self):
        player = Player.with_slots("Alice", 2)
        player.cards[0] = Card(suit=CardSuit.CLUBS, value=CardValue.KING)
        assert format_hands([player]) == {"Alice": "CK,--"}


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "game.jsonl"


def read_events(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestGameLogger:
    """Tests for GameLogger as a service listener."""

    def test_disabled_writes_nothing(self, service, tmp_path):
        with GameLogger() as game_logger:
            service.add_refreshable(game_logger)
            service.start_game(["Alice", "Bob"])
        assert list(tmp_path.iterdir()) == []

    def test_full_match(self, service, log_path, deck):
        config = GameLogConfig(enabled=True, output_path=str(log_path))
        with GameLogger(config, show_hands=False) as game_logger:
            service.add_refreshable(game_logger)
            game = service.start_game(["Alice", "Bob"])
            game.players[0].has_knocked = True
            game.players[1].score = 12
            service.advance_turn()  # Alice knocked before her turn

        events = read_events(log_path)

        assert [e["type"] for e in events] == ["game_start", "game_over"]
        start = events[0]
        assert start["players"] == ["Alice", "Bob"]
        assert start["hands"]["Alice"] == format_cards(deck[0:3])
        assert start["open_cards"] == format_cards(deck[6:9])
        assert start["draw_pile"] == 23
        assert events[1]["ranking"] == [
            {"name": "Bob", "score": 12},
            {"name": "Alice", "score": 0},
        ]

    def test_turn_event(self, service, log_path):
        config = GameLogConfig(enabled=True, output_path=str(log_path))
        with GameLogger(config) as game_logger:
            service.add_refreshable(game_logger)
            game = service.start_game(["Alice", "Bob"])
            game.players[1].has_knocked = True
            service.advance_turn()

        turn = read_events(log_path)[1]
        assert turn["type"] == "turn"
        assert turn["turn"] == 1
        assert turn["player"] == "Alice"
        assert turn["knocked"] == ["Bob"]
        assert set(turn["hands"]) == {"Alice", "Bob"}

    def test_appends_to_existing_log(self, service, log_path):
        config = GameLogConfig(enabled=True, output_path=str(log_path))
        for _ in range(2):
            with GameLogger(config) as game_logger:
                service.add_refreshable(game_logger)
                service.start_game(["Alice", "Bob"])
            service.remove_refreshable(game_logger)

        assert len(read_events(log_path)) == 2
