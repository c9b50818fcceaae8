"""Automated first-move player for running seeded games end to end."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from klondike.config import Config
from klondike.models.deck import Deck
from klondike.models.move import Move

from .engine import Game

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one autoplayed game."""

    seed: int
    score: int
    moves: int
    redeals: int
    won: bool
    game: Game


class GameRunner:
    """Plays games by always taking the first possible move.

    When no move is available the stock is turned; once it is exhausted the
    waste is redealt, as long as the last pass through the stock allowed at
    least one move. This is a regression driver, not a strategy.
    """

    def __init__(self, config: Config | None = None):
        """Initialize runner.

        Args:
            config: Configuration (uses defaults if not provided)
        """
        self.config = config or Config()
        self._on_move: Callable[[Game, Move], None] | None = None

    def set_callbacks(self, on_move: Callable[[Game, Move], None] | None = None) -> None:
        """Set event callbacks.

        Args:
            on_move: Called after each move with the new position and the move
        """
        self._on_move = on_move

    def play(self, seed: int) -> RunResult:
        """Play a single game dealt from ``seed``."""
        game = Game.new(Deck.new().shuffle(seed))
        logger.info(f"Starting game with seed {seed}")
        return self.play_from(game, seed)

    def play_from(self, game: Game, seed: int = 0) -> RunResult:
        """Play from an existing position until no progress can be made.

        Args:
            game: Starting position
            seed: Seed recorded in the result

        Returns:
            RunResult for the final position
        """
        max_redeals = self.config.game.max_redeals
        moves = 0
        redeals = 0
        moved_this_pass = True

        while True:
            possible = game.possible_moves()
            if possible:
                move = possible[0]
                game = game.perform(move)
                moves += 1
                moved_this_pass = True
                if self._on_move:
                    self._on_move(game, move)
                continue

            if not game.stock.is_exhausted():
                game = game.turn()
                continue

            if not game.stock.waste or not moved_this_pass:
                break
            if max_redeals is not None and redeals >= max_redeals:
                break

            game = game.reshuffle().turn()
            redeals += 1
            moved_this_pass = False

        result = RunResult(
            seed=seed,
            score=game.score(),
            moves=moves,
            redeals=redeals,
            won=game.is_won(),
            game=game,
        )
        logger.info(
            f"Game {seed} finished: score {result.score}, "
            f"{result.moves} moves, {result.redeals} redeals"
        )
        return result

    def play_games(self, seeds: Iterable[int]) -> int:
        """Play one game per seed.

        Returns:
            Total score over all games
        """
        return sum(self.play(seed).score for seed in seeds)
