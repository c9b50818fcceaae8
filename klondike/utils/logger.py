"""Logging utilities and board display."""

import logging
import sys
from typing import TYPE_CHECKING

from klondike.logging import format_card, format_cards, format_move, format_tableau

if TYPE_CHECKING:
    from klondike.game.engine import Game
    from klondike.game.runner import RunResult
    from klondike.models.move import Move


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class BoardDisplay:
    """Display game positions to stdout."""

    def __init__(self, show_board: bool = False):
        """Initialize display.

        Args:
            show_board: Whether to print the board after every move
        """
        self.show_board = show_board

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_board(self, game: "Game") -> None:
        """Print a readable version of the position."""
        stock = game.stock
        print(f"Stock: {len(stock.draw)} left | Waste: {format_card(stock.top_card())}")
        print("Tableaus:")
        for index, tableau in enumerate(game.tableaus):
            print(f"  T{index}: {format_tableau(tableau)}")
        print("Foundations:")
        for index, foundation in enumerate(game.foundations):
            print(f"  F{index}: {format_cards(tuple(reversed(foundation.cards)))}")

    def print_move(self, game: "Game", move: "Move") -> None:
        """Print a move, and the board if enabled."""
        print(f"  -> {format_move(move)}")
        if self.show_board:
            self.print_board(game)

    def print_game_start(self, game_number: int, num_games: int, seed: int) -> None:
        """Print game start message."""
        self.print_separator()
        print(f"GAME {game_number}/{num_games} (seed {seed})")
        self.print_separator()

    def print_result(self, result: "RunResult") -> None:
        """Print the outcome of one game."""
        status = " WON" if result.won else ""
        print(
            f"Seed {result.seed}: score {result.score}/52, "
            f"{result.moves} moves, {result.redeals} redeals{status}"
        )
        if self.show_board:
            self.print_board(result.game)

    def print_final_results(self, results: list["RunResult"]) -> None:
        """Print totals over all games."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()
        total = sum(r.score for r in results)
        won = sum(1 for r in results if r.won)
        print(f"  Games: {len(results)}")
        print(f"  Won: {won}")
        print(f"  Total score: {total}")
