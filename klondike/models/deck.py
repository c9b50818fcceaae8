"""Deck model and seeded shuffling."""

import random

from pydantic import BaseModel

from .card import Card, ranks, suits

DECK_SIZE = 52


class Deck(BaseModel, frozen=True):
    """Ordered sequence of cards consumed once when a game is dealt."""

    cards: tuple[Card, ...] = ()

    @classmethod
    def new(cls) -> "Deck":
        """Create the 52-card deck in canonical order (suit-major, rank-minor)."""
        return cls(cards=tuple(Card(suit=suit, rank=rank) for suit in suits() for rank in ranks()))

    def shuffle(self, seed: int) -> "Deck":
        """Return a permutation of this deck keyed by ``seed``.

        The generator is private to the call, so the same seed always yields
        the same order and no global random state is touched. Negative seeds
        are folded onto odd keys so that ``seed`` and ``-seed`` differ.

        Args:
            seed: Any integer key.

        Returns:
            A new shuffled Deck.
        """
        key = seed * 2 if seed >= 0 else -seed * 2 - 1
        rng = random.Random(key)
        cards = list(self.cards)
        rng.shuffle(cards)
        return Deck(cards=tuple(cards))

    def __len__(self) -> int:
        return len(self.cards)
