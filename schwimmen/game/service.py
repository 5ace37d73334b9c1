"""Game-flow service: setup, dealing, open pile and turn order."""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence

from schwimmen.config import Config
from schwimmen.exceptions import (
    GameOverError,
    InsufficientCardsError,
    NoActiveGameError,
    PlayerCountError,
    PlayerNameError,
)
from schwimmen.models.card import Card, create_deck
from schwimmen.models.game_state import Game
from schwimmen.models.player import Player

from .refreshable import Refreshable, RefreshingService

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 4

DeckFactory = Callable[[], list[Card]]
ScoreUpdater = Callable[[Player], None]
Shuffle = Callable[[list[Card]], None]


def _keep_score(player: Player) -> None:
    """Default score updater; scoring is owned by the caller."""


class GameService(RefreshingService):
    """Controls the flow of a single match.

    Holds at most one active game. ``start_game`` replaces it; the other
    operations act on it and are meant to be called by the play logic
    (card swaps, knocking) that sits on top of this service.
    """

    def __init__(
        self,
        config: Config | None = None,
        deck_factory: DeckFactory = create_deck,
        score_updater: ScoreUpdater = _keep_score,
        shuffle: Shuffle | None = None,
    ):
        """Initialize the service.

        Args:
            config: Configuration (uses defaults if not provided)
            deck_factory: Builds the full, unshuffled deck
            score_updater: Recomputes a player's score after a card was dealt
            shuffle: Shuffles a list in place (seeded from config if not provided)
        """
        super().__init__()
        self.config = config or Config()
        self.deck_factory = deck_factory
        self.score_updater = score_updater
        self.shuffle = shuffle or random.Random(self.config.game.seed).shuffle

        self.game: Game | None = None

    @property
    def card_slots(self) -> int:
        """Hand size, equal to the open pile size."""
        return self.config.game.card_slots

    def start_game(self, player_names: Sequence[str]) -> Game:
        """Start a new game with the given players and deal the cards.

        Args:
            player_names: Player names in seating order

        Returns:
            The new game

        Raises:
            PlayerCountError: Fewer than 2 or more than 4 names
            PlayerNameError: A blank or duplicated name
            InsufficientCardsError: Deck too small for hands and open pile
        """
        game = self.initialize_players(player_names)
        try:
            self.distribute_cards(game)
        except Exception:
            self.game = None
            raise

        logger.info(
            f"New game started with {len(game.players)} players: "
            f"{', '.join(p.name for p in game.players)}"
        )
        self.on_all_refreshables(Refreshable.refresh_after_start_new_game, game)
        return game

    def initialize_players(self, player_names: Sequence[str]) -> Game:
        """Validate the names and replace the current game with a fresh one.

        Checks run in a fixed order and the first failure wins: too few
        players, too many players, blank names, duplicated names.
        """
        names = list(player_names)
        if len(names) < MIN_PLAYERS:
            raise PlayerCountError(
                f"The minimal number of players ({MIN_PLAYERS}) is not reached!"
            )
        if len(names) > MAX_PLAYERS:
            raise PlayerCountError(
                f"The maximal number of players ({MAX_PLAYERS}) is exceeded!"
            )

        for name in names:
            if not name.strip():
                raise PlayerNameError(
                    "One or more of the assigned player names are blank!"
                )
        if len(set(names)) != len(names):
            raise PlayerNameError(
                "One or more of the assigned player names are duplicated!"
            )

        players = [Player.with_slots(name, self.card_slots) for name in names]
        self.game = Game(players=players, open_cards=[None] * self.card_slots)
        return self.game

    def distribute_cards(self, game: Game) -> None:
        """Fill the draw pile, deal every hand and seed the open pile.

        Hands are dealt player by player, slot by slot, from the front of
        the shuffled draw pile. Nothing is dealt if the pile is too small.
        """
        game.unused_cards.extend(self.deck_factory())
        self.shuffle(game.unused_cards)

        needed = len(game.open_cards) + sum(len(p.cards) for p in game.players)
        if len(game.unused_cards) < needed:
            logger.warning(
                f"Deck of {len(game.unused_cards)} cards cannot cover {needed} cards"
            )
            raise InsufficientCardsError(
                "There are not enough cards in the draw pile to start the game!"
            )

        for player in game.players:
            for i in range(len(player.cards)):
                player.cards[i] = game.unused_cards.pop(0)
                self.score_updater(player)

        logger.debug(f"Hands dealt, {len(game.unused_cards)} cards left")
        self.renew_open_cards(game)

    def enough_cards_left(self, game: Game | None = None) -> bool:
        """Check whether the draw pile can refill the whole open pile."""
        if game is None:
            game = self._require_game()
        return len(game.unused_cards) >= len(game.open_cards)

    def renew_open_cards(self, game: Game | None = None) -> None:
        """Replace every open card with the next card from the draw pile.

        Raises:
            InsufficientCardsError: Draw pile smaller than the open pile
            GameOverError: The game has already ended
        """
        if game is None:
            game = self._require_game()
        self._check_running(game)
        if not self.enough_cards_left(game):
            raise InsufficientCardsError(
                "There are not enough cards in the draw pile "
                "to renew the card stack on the table!"
            )

        for i in range(len(game.open_cards)):
            game.open_cards[i] = game.unused_cards.pop(0)

        logger.debug(
            f"Open cards renewed: {game.open_cards}, "
            f"{len(game.unused_cards)} cards left"
        )

    def advance_turn(self) -> None:
        """Pass the turn to the next player.

        If that player has knocked, the round is complete and the game
        ends; otherwise listeners are told that a new turn began.
        """
        game = self._require_game()
        self._check_running(game)

        game.player_index += 1
        if game.player_index == len(game.players):
            game.player_index = 0
        game.turn_number += 1

        if game.active_player.has_knocked:
            logger.debug(f"{game.active_player.name} knocked, ending game")
            self.end_game()
        else:
            logger.debug(f"Turn {game.turn_number}: {game.active_player.name}")
            self.on_all_refreshables(Refreshable.refresh_after_game_turn, game)

    next_player = advance_turn

    def end_game(self) -> list[Player]:
        """Rank players by descending score and announce the result.

        Players with equal scores keep their seating order. A game can only
        end once.

        Returns:
            Players, best first
        """
        game = self._require_game()
        self._check_running(game)
        game.players.sort(key=lambda p: p.score, reverse=True)
        game.is_over = True

        logger.info(
            "Game over: "
            + ", ".join(f"{p.name} ({p.score:g})" for p in game.players)
        )
        self.on_all_refreshables(Refreshable.refresh_after_game_over, game.players)
        return game.players

    def _require_game(self) -> Game:
        if self.game is None:
            raise NoActiveGameError("No game has been started!")
        return self.game

    @staticmethod
    def _check_running(game: Game) -> None:
        if game.is_over:
            raise GameOverError("The game has already ended!")
