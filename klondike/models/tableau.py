"""Tableau column model."""

from typing import Any, Sequence

from pydantic import BaseModel, model_validator

from klondike.errors import IllegalMoveError

from .card import Card, Rank


class Tableau(BaseModel, frozen=True):
    """One playing column: a face-down pile under a face-up run.

    ``down[0]`` is the next hidden card to be revealed. ``up[0]`` is the
    exposed, playable card (lowest rank of the run) and ``up[-1]`` is the
    base of the run (highest rank).

    Whenever ``up`` would be empty while ``down`` still holds cards, the
    next hidden card is turned face up.
    """

    down: tuple[Card, ...] = ()
    up: tuple[Card, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _reveal(cls, data: Any) -> Any:
        if isinstance(data, dict):
            down = tuple(data.get("down", ()))
            up = tuple(data.get("up", ()))
            if not up and down:
                down, up = down[1:], down[:1]
            data = {**data, "down": down, "up": up}
        return data

    def cards_down(self) -> int:
        """Number of face-down cards."""
        return len(self.down)

    def cards_up(self) -> int:
        """Number of face-up cards."""
        return len(self.up)

    def is_empty(self) -> bool:
        """Check if the column holds no cards at all."""
        return not self.down and not self.up

    def bottom_card(self) -> Card | None:
        """Get the exposed (lowest) card of the run, if any."""
        return self.up[0] if self.up else None

    def top_card(self) -> Card | None:
        """Get the base (highest) card of the run, if any."""
        return self.up[-1] if self.up else None

    def add(self, cards: Sequence[Card]) -> "Tableau":
        """Add cards to the face-down pile, revealing one if none is up.

        Used when dealing.
        """
        return Tableau(down=(*self.down, *cards), up=self.up)

    def take(self) -> "Tableau":
        """Remove the exposed card.

        Raises:
            IllegalMoveError: If no card is face up.
        """
        if not self.up:
            raise IllegalMoveError("Cannot take from an empty tableau")
        return Tableau(down=self.down, up=self.up[1:])

    def take_all(self) -> "Tableau":
        """Remove the whole face-up run."""
        return Tableau(down=self.down, up=())

    def can_drop(self, card: Card) -> bool:
        """Check if ``card`` may be placed on this column.

        An empty column accepts only a king. Otherwise the card must be one
        rank lower than the exposed card and of the opposite color.
        """
        exposed = self.bottom_card()
        if exposed is None:
            return card.rank == Rank.KING
        return exposed.rank == card.rank + 1 and exposed.color != card.color

    def drop(self, card: Card) -> "Tableau":
        """Place ``card`` on the exposed end of the run. Legality is not checked."""
        return Tableau(down=self.down, up=(card, *self.up))

    def drop_cards(self, cards: Sequence[Card]) -> "Tableau":
        """Place a whole run taken from another column.

        ``cards`` is ordered like ``up`` (exposed card first), and that order
        is kept on arrival.
        """
        tableau = self
        for card in reversed(cards):
            tableau = tableau.drop(card)
        return tableau
