"""Text formatting for log output."""

from .formatters import format_card, format_cards, format_move, format_tableau

__all__ = [
    "format_card",
    "format_cards",
    "format_move",
    "format_tableau",
]
