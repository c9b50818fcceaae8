"""Stock (draw pile and waste pile) model."""

from typing import Sequence

from pydantic import BaseModel

from klondike.errors import IllegalMoveError

from .card import Card


class Stock(BaseModel, frozen=True):
    """Undealt cards and the face-up waste pile turned from them.

    ``draw[0]`` is the next card to turn; ``waste[0]`` is the playable card.
    """

    draw: tuple[Card, ...] = ()
    waste: tuple[Card, ...] = ()

    @classmethod
    def new(cls, cards: Sequence[Card]) -> "Stock":
        """Create a stock with every card in the draw pile."""
        return cls(draw=tuple(cards))

    def turn(self) -> "Stock":
        """Turn one card from the draw pile onto the waste. No-op when exhausted."""
        if not self.draw:
            return self
        return Stock(draw=self.draw[1:], waste=(self.draw[0], *self.waste))

    def top_card(self) -> Card | None:
        """Get the playable waste card, if any."""
        return self.waste[0] if self.waste else None

    def take(self) -> "Stock":
        """Remove the playable waste card.

        Raises:
            IllegalMoveError: If the waste is empty.
        """
        if not self.waste:
            raise IllegalMoveError("Cannot take from an empty waste pile")
        return Stock(draw=self.draw, waste=self.waste[1:])

    def cards(self) -> tuple[Card, ...]:
        """Remaining undrawn cards."""
        return self.draw

    def is_exhausted(self) -> bool:
        """Check if the draw pile is empty."""
        return not self.draw

    def retry(self) -> "Stock":
        """Turn the waste back over into the draw pile for another pass.

        Raises:
            IllegalMoveError: If the draw pile still has cards.
        """
        if self.draw:
            raise IllegalMoveError("Cannot redeal while the draw pile has cards")
        return Stock(draw=tuple(reversed(self.waste)), waste=())
