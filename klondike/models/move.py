"""Move models.

A move is one of four shapes. Each carries the card that would move so a
consumer does not need to look it up again.
"""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel

from .card import Card


class Location(str, Enum):
    """Kind of pile a move reads from or writes to."""

    TABLEAU = "tableau"
    FOUNDATION = "foundation"
    DECK = "deck"


class TableauToFoundation(BaseModel, frozen=True):
    """Exposed tableau card onto a foundation."""

    kind: Literal["tableau_to_foundation"] = "tableau_to_foundation"
    from_index: int
    to_index: int
    card: Card

    @property
    def from_kind(self) -> Location:
        return Location.TABLEAU

    @property
    def to_kind(self) -> Location:
        return Location.FOUNDATION


class TableauToTableau(BaseModel, frozen=True):
    """Whole face-up run from one column onto another.

    ``card`` is the base (highest) card of the moving run.
    """

    kind: Literal["tableau_to_tableau"] = "tableau_to_tableau"
    from_index: int
    to_index: int
    card: Card

    @property
    def from_kind(self) -> Location:
        return Location.TABLEAU

    @property
    def to_kind(self) -> Location:
        return Location.TABLEAU


class DeckToFoundation(BaseModel, frozen=True):
    """Waste card onto a foundation."""

    kind: Literal["deck_to_foundation"] = "deck_to_foundation"
    to_index: int
    card: Card

    @property
    def from_kind(self) -> Location:
        return Location.DECK

    @property
    def from_index(self) -> int:
        return 0

    @property
    def to_kind(self) -> Location:
        return Location.FOUNDATION


class DeckToTableau(BaseModel, frozen=True):
    """Waste card onto a tableau column."""

    kind: Literal["deck_to_tableau"] = "deck_to_tableau"
    to_index: int
    card: Card

    @property
    def from_kind(self) -> Location:
        return Location.DECK

    @property
    def from_index(self) -> int:
        return 0

    @property
    def to_kind(self) -> Location:
        return Location.TABLEAU


Move = Union[TableauToFoundation, TableauToTableau, DeckToFoundation, DeckToTableau]
