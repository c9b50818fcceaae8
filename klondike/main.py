"""Main entry point for the Klondike autoplay runner."""

import argparse
import logging
import random
import sys
from pathlib import Path

from klondike.config import load_config
from klondike.game.runner import GameRunner, RunResult
from klondike.service.session import RANDOM_SEED_MAX
from klondike.utils.logger import BoardDisplay, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Play seeded Klondike solitaire games with a first-move player"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Deck key of the first game (overrides config)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "--max-redeals",
        type=int,
        help="Maximum passes back through the stock per game (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-board",
        action="store_true",
        help="Print the board after every move",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.num_games:
        config.game.num_games = args.num_games
    if args.max_redeals is not None:
        config.game.max_redeals = args.max_redeals
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_board:
        config.logging.show_board = True

    setup_logging(config.logging.level)
    display = BoardDisplay(show_board=config.logging.show_board)

    first_seed = config.game.seed
    if first_seed is None:
        first_seed = random.randint(1, RANDOM_SEED_MAX)

    runner = GameRunner(config)
    if config.logging.show_board:
        runner.set_callbacks(on_move=lambda game, move: display.print_move(game, move))

    results: list[RunResult] = []
    try:
        num_games = config.game.num_games
        for number, seed in enumerate(range(first_seed, first_seed + num_games), 1):
            if config.logging.show_board:
                display.print_game_start(number, num_games, seed)
            result = runner.play(seed)
            display.print_result(result)
            results.append(result)

        display.print_final_results(results)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Runner error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
