"""Game logic."""

from .engine import FOUNDATION_COUNT, TABLEAU_COUNT, Game
from .runner import GameRunner, RunResult
from .validator import PositionValidator, Violation, ViolationKind

__all__ = [
    "FOUNDATION_COUNT",
    "TABLEAU_COUNT",
    "Game",
    "GameRunner",
    "RunResult",
    "PositionValidator",
    "Violation",
    "ViolationKind",
]
