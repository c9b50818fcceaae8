"""Card model."""

from enum import Enum, IntEnum

from pydantic import BaseModel


class Suit(str, Enum):
    """Card suit, in canonical deck order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    SPADES = "spades"
    CLUBS = "clubs"


class Color(str, Enum):
    """Card color."""

    RED = "red"
    BLACK = "black"


class Rank(IntEnum):
    """Card rank. Ace is low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


SUIT_COLORS = {
    Suit.HEARTS: Color.RED,
    Suit.DIAMONDS: Color.RED,
    Suit.SPADES: Color.BLACK,
    Suit.CLUBS: Color.BLACK,
}

# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    suit: Suit
    rank: Rank

    @property
    def color(self) -> Color:
        """Color derived from the suit."""
        return SUIT_COLORS[self.suit]

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def suits() -> list[Suit]:
    """List of possible card suits."""
    return list(Suit)


def ranks() -> list[Rank]:
    """List of possible card ranks."""
    return list(Rank)
