"""Rule validation for whole positions."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from klondike.models.card import Card, Rank
from klondike.models.deck import Deck
from klondike.models.foundation import Foundation
from klondike.models.move import Location
from klondike.models.tableau import Tableau

if TYPE_CHECKING:
    from .engine import Game


class ViolationKind(str, Enum):
    """Kind of rule a position breaks."""

    TABLEAU_SEQUENCE = "tableau_sequence"  # Run not alternating color / descending
    FOUNDATION_SEQUENCE = "foundation_sequence"  # Pile not same suit / ascending
    FOUNDATION_BASE = "foundation_base"  # Pile does not start with an ace
    HIDDEN_WITHOUT_EXPOSED = "hidden_without_exposed"
    DUPLICATE_CARD = "duplicate_card"
    MISSING_CARD = "missing_card"


@dataclass(frozen=True)
class Violation:
    """A single defect found in a position.

    ``card`` is the offending card and ``neighbor`` the adjacent card it
    conflicts with, when there is one. ``location`` and ``index`` are None
    for defects that belong to the position as a whole.
    """

    kind: ViolationKind
    location: Location | None = None
    index: int | None = None
    card: Card | None = None
    neighbor: Card | None = None

    def __str__(self) -> str:
        where = f" at {self.location.value} {self.index}" if self.location else ""
        detail = f" {self.card}" if self.card else ""
        if self.neighbor:
            detail += f" / {self.neighbor}"
        return f"{self.kind.value}{where}:{detail}"


class PositionValidator:
    """Checks a position against the placement rules.

    Every check runs independently and all findings are returned, so one
    position can report several defects at once.
    """

    def validate(self, game: Game, check_cards: bool = False) -> list[Violation]:
        """Validate a position.

        Args:
            game: Position to check.
            check_cards: Also check that each of the 52 cards appears exactly
                once. Off by default so partial positions can be checked.

        Returns:
            All violations found, empty if the position is sound.
        """
        violations: list[Violation] = []
        for index, tableau in enumerate(game.tableaus):
            violations.extend(self.check_tableau(tableau, index))
        for index, foundation in enumerate(game.foundations):
            violations.extend(self.check_foundation(foundation, index))
        if check_cards:
            violations.extend(self.check_cards(game.all_cards()))
        return violations

    def check_tableau(self, tableau: Tableau, index: int) -> list[Violation]:
        """Check a face-up run for alternating color and descending rank."""
        violations: list[Violation] = []

        if not tableau.up and tableau.down:
            violations.append(
                Violation(
                    kind=ViolationKind.HIDDEN_WITHOUT_EXPOSED,
                    location=Location.TABLEAU,
                    index=index,
                    card=tableau.down[0],
                )
            )

        for card, below in zip(tableau.up, tableau.up[1:]):
            if below.rank != card.rank + 1 or below.color == card.color:
                violations.append(
                    Violation(
                        kind=ViolationKind.TABLEAU_SEQUENCE,
                        location=Location.TABLEAU,
                        index=index,
                        card=card,
                        neighbor=below,
                    )
                )
        return violations

    def check_foundation(self, foundation: Foundation, index: int) -> list[Violation]:
        """Check a foundation for same suit, ascending rank and an ace base."""
        violations: list[Violation] = []
        cards = foundation.cards

        for card, below in zip(cards, cards[1:]):
            if card.suit != below.suit or card.rank != below.rank + 1:
                violations.append(
                    Violation(
                        kind=ViolationKind.FOUNDATION_SEQUENCE,
                        location=Location.FOUNDATION,
                        index=index,
                        card=card,
                        neighbor=below,
                    )
                )

        if cards and cards[-1].rank != Rank.ACE:
            violations.append(
                Violation(
                    kind=ViolationKind.FOUNDATION_BASE,
                    location=Location.FOUNDATION,
                    index=index,
                    card=cards[-1],
                )
            )
        return violations

    def check_cards(self, cards: list[Card]) -> list[Violation]:
        """Check that the position holds each of the 52 cards exactly once."""
        violations: list[Violation] = []
        counts = Counter(cards)

        for card, count in counts.items():
            if count > 1:
                violations.append(Violation(kind=ViolationKind.DUPLICATE_CARD, card=card))

        for card in Deck.new().cards:
            if card not in counts:
                violations.append(Violation(kind=ViolationKind.MISSING_CARD, card=card))
        return violations
