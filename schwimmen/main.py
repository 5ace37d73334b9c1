"""Command-line entry point: plays a match driven by a fixed knock schedule."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from schwimmen.config import GameLogConfig, load_config
from schwimmen.exceptions import GameError
from schwimmen.game.service import GameService
from schwimmen.logging import GameLogger
from schwimmen.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are sorted alphabetically.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(sorted(names))
    return str(Path(log_dir) / f"{timestamp}_{player_names}.jsonl")


def play_match(service: GameService, names: list[str], rounds: int) -> None:
    """Start a match and advance turns until it ends.

    After ``rounds`` full rounds the active player knocks; the match ends
    once the turn comes back to them.
    """
    game = service.start_game(names)
    knock_turn = max(rounds, 1) * len(game.players)

    while not game.is_over:
        service.advance_turn()
        if game.is_over:
            break
        if game.turn_number >= knock_turn and not any(
            p.has_knocked for p in game.players
        ):
            logger.info(f"{game.active_player.name} knocks")
            game.active_player.has_knocked = True


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Schwimmen game-flow demo: deal cards and run turns"
    )
    parser.add_argument("names", nargs="+", help="Player names (2-4)")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-r",
        "--rounds",
        type=int,
        default=1,
        help="Full rounds played before someone knocks",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show player hands in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    config = load_config(args.config)

    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    setup_logging(config.logging.level)

    if args.game_log:
        game_log_config = GameLogConfig(
            enabled=True,
            output_path=generate_log_filename(str(args.game_log), args.names),
        )
    else:
        game_log_config = config.game_log

    service = GameService(config)
    service.add_refreshable(GameDisplay(show_hands=config.logging.show_hands))

    try:
        with GameLogger(game_log_config, show_hands=config.logging.show_hands) as game_logger:
            service.add_refreshable(game_logger)
            play_match(service, args.names, args.rounds)
        return 0

    except GameError as e:
        logger.error(f"Game error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
