"""Thread-safe holder for one game in progress."""

import logging
import random
import threading

from klondike.errors import IllegalMoveError
from klondike.game.engine import Game
from klondike.logging import format_move
from klondike.models.deck import Deck
from klondike.models.move import Move

logger = logging.getLogger(__name__)

# Upper bound for randomly chosen deck keys
RANDOM_SEED_MAX = 1_000_000


class GameSession:
    """Owns one Game value and serializes every change to it.

    Each mutating call replaces the held game with the new value while
    holding a lock, so concurrent callers see a total order of moves and
    readers always get a complete position.
    """

    def __init__(self, seed: int | None = None, game: Game | None = None):
        """Initialize session.

        Args:
            seed: Deck key. A random key in 1..RANDOM_SEED_MAX if not provided.
            game: Start from this position instead of dealing a new one.
        """
        self._seed = seed if seed is not None else random.randint(1, RANDOM_SEED_MAX)
        self._game = game if game is not None else Game.new(Deck.new().shuffle(self._seed))
        self._lock = threading.Lock()
        logger.info(f"Session started with seed {self._seed}")

    @property
    def seed(self) -> int:
        """Deck key this session was dealt from."""
        return self._seed

    def get_state(self) -> Game:
        """Get the current position."""
        with self._lock:
            return self._game

    def possible_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        with self._lock:
            return self._game.possible_moves()

    def turn(self) -> Game:
        """Turn one stock card and return the new position."""
        with self._lock:
            self._game = self._game.turn()
            return self._game

    def reshuffle(self) -> Game:
        """Redeal the waste if the draw pile is empty and return the new position."""
        with self._lock:
            self._game = self._game.reshuffle()
            return self._game

    def perform(self, move: Move, validate: bool = True) -> Game:
        """Apply a move and return the new position.

        Args:
            move: Move to apply
            validate: Reject moves not currently in possible_moves

        Raises:
            IllegalMoveError: If validation is on and the move is not legal.
                The held position is left unchanged.
        """
        with self._lock:
            if validate and move not in self._game.possible_moves():
                raise IllegalMoveError(f"Illegal move: {format_move(move)}")
            self._game = self._game.perform(move)
            return self._game
