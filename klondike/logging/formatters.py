"""Formatters for log output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from klondike.models.card import RANK_NAMES, Card, Suit
from klondike.models.move import Location

if TYPE_CHECKING:
    from klondike.models.move import Move
    from klondike.models.tableau import Tableau

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.SPADES: "S",
    Suit.CLUBS: "C",
}

LOCATION_CODES: dict[Location, str] = {
    Location.TABLEAU: "T",
    Location.FOUNDATION: "F",
    Location.DECK: "deck",
}


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format, or None.

    Returns:
        Formatted string (e.g., "HA" for the ace of hearts, "--" for None).
    """
    if card is None:
        return "--"
    return f"{SUIT_CODES[card.suit]}{RANK_NAMES[card.rank]}"


def format_cards(cards: Sequence[Card]) -> str:
    """Format cards to a comma-separated string, in the order given.

    Returns:
        Comma-separated card strings (e.g., "S8,H7"). Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def _format_location(kind: Location, index: int) -> str:
    if kind == Location.DECK:
        return LOCATION_CODES[kind]
    return f"{LOCATION_CODES[kind]}{index}"


def format_move(move: Move) -> str:
    """Format a move (e.g., "T3->F0 HA", "deck->T5 SK")."""
    source = _format_location(move.from_kind, move.from_index)
    target = _format_location(move.to_kind, move.to_index)
    return f"{source}->{target} {format_card(move.card)}"


def format_tableau(tableau: Tableau) -> str:
    """Format a tableau as hidden markers followed by the run, base first.

    Example: "## ## SK,HQ" for two hidden cards under a king-queen run.
    """
    hidden = ["##"] * tableau.cards_down()
    run = format_cards(tuple(reversed(tableau.up)))
    return " ".join([*hidden, run]) if run else " ".join(hidden)
