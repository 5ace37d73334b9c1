"""Shared fixtures."""

import pytest

from schwimmen.config import Config, GameConfig
from schwimmen.game.refreshable import Refreshable
from schwimmen.game.service import GameService
from schwimmen.models.card import create_deck


def keep_order(cards):
    """Shuffle stub that leaves the deck as built."""


class RecordingRefreshable(Refreshable):
    """Listener that records every notification it receives."""

    def __init__(self):
        self.events = []

    def refresh_after_start_new_game(self, game):
        self.events.append(("start", game))

    def refresh_after_game_turn(self, game):
        self.events.append(("turn", game.player_index))

    def refresh_after_game_over(self, players):
        self.events.append(("over", [p.name for p in players]))

    def names(self):
        return [e[0] for e in self.events]


@pytest.fixture
def config():
    return Config(game=GameConfig(card_slots=3))


@pytest.fixture
def recorder():
    return RecordingRefreshable()


@pytest.fixture
def service(config, recorder):
    svc = GameService(config, shuffle=keep_order)
    svc.add_refreshable(recorder)
    return svc


@pytest.fixture
def deck():
    return create_deck()
