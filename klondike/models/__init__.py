"""Game models."""

from .card import Card, Color, Rank, Suit, ranks, suits
from .deck import DECK_SIZE, Deck
from .foundation import Foundation
from .move import (
    DeckToFoundation,
    DeckToTableau,
    Location,
    Move,
    TableauToFoundation,
    TableauToTableau,
)
from .stock import Stock
from .tableau import Tableau

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "ranks",
    "suits",
    "DECK_SIZE",
    "Deck",
    "Foundation",
    "Location",
    "Move",
    "TableauToFoundation",
    "TableauToTableau",
    "DeckToFoundation",
    "DeckToTableau",
    "Stock",
    "Tableau",
]
