"""Foundation pile model."""

from pydantic import BaseModel

from .card import Card, Rank


class Foundation(BaseModel, frozen=True):
    """Same-suit pile built upward from the ace.

    ``cards[0]`` is the most recently dropped card.
    """

    cards: tuple[Card, ...] = ()

    def top_card(self) -> Card | None:
        """Get the card currently on top, if any."""
        return self.cards[0] if self.cards else None

    def is_empty(self) -> bool:
        """Check if no card has been dropped yet."""
        return not self.cards

    def can_drop(self, card: Card) -> bool:
        """Check if ``card`` may be placed on this foundation.

        An empty foundation accepts any ace. Otherwise the card must share
        the top card's suit and be exactly one rank higher.
        """
        top = self.top_card()
        if top is None:
            return card.rank == Rank.ACE
        return card.suit == top.suit and card.rank == top.rank + 1

    def drop(self, card: Card) -> "Foundation":
        """Place ``card`` on top. Legality is the caller's responsibility."""
        return Foundation(cards=(card, *self.cards))

    def __len__(self) -> int:
        return len(self.cards)
