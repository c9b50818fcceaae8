"""Session holding."""

from .session import RANDOM_SEED_MAX, GameSession

__all__ = ["RANDOM_SEED_MAX", "GameSession"]
