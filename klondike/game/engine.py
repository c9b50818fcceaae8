"""Game engine for Klondike solitaire.

A Game is an immutable position. Every operation returns a new Game; the
caller decides which move to play and when the game is over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from pydantic import BaseModel

from klondike.errors import IllegalMoveError
from klondike.logging import format_move
from klondike.models.card import Card
from klondike.models.deck import DECK_SIZE, Deck
from klondike.models.foundation import Foundation
from klondike.models.move import (
    DeckToFoundation,
    DeckToTableau,
    Move,
    TableauToFoundation,
    TableauToTableau,
)
from klondike.models.stock import Stock
from klondike.models.tableau import Tableau

from .validator import PositionValidator

if TYPE_CHECKING:
    from .validator import Violation

logger = logging.getLogger(__name__)

TABLEAU_COUNT = 7
FOUNDATION_COUNT = 4

MOVE_TYPES = (TableauToFoundation, TableauToTableau, DeckToFoundation, DeckToTableau)


class Game(BaseModel, frozen=True):
    """One Klondike position: a stock, seven tableaus and four foundations."""

    stock: Stock
    tableaus: tuple[Tableau, ...]
    foundations: tuple[Foundation, ...]

    @classmethod
    def new(cls, deck: Deck | Sequence[Card]) -> Game:
        """Deal a new game.

        Tableau ``i`` receives ``i + 1`` cards with one turned up, the
        foundations start empty, and the remaining 24 cards form the stock
        with its first card already turned.

        Args:
            deck: A 52-card deck, usually shuffled.

        Returns:
            The initial position.

        Raises:
            IllegalMoveError: If the deck does not hold exactly 52 cards.
        """
        cards = tuple(deck.cards) if isinstance(deck, Deck) else tuple(deck)
        if len(cards) != DECK_SIZE:
            raise IllegalMoveError(f"Expected {DECK_SIZE} cards, got {len(cards)}")

        tableaus: list[Tableau] = []
        dealt = 0
        for count in range(1, TABLEAU_COUNT + 1):
            tableaus.append(Tableau().add(cards[dealt : dealt + count]))
            dealt += count

        return cls(
            stock=Stock.new(cards[dealt:]).turn(),
            tableaus=tuple(tableaus),
            foundations=tuple(Foundation() for _ in range(FOUNDATION_COUNT)),
        )

    def score(self) -> int:
        """Number of cards moved onto the foundations (0-52)."""
        return sum(len(f) for f in self.foundations)

    def is_won(self) -> bool:
        """Check if every card is on a foundation."""
        return self.score() == DECK_SIZE

    def all_cards(self) -> list[Card]:
        """Every card in the position, in stock, tableau, foundation order."""
        cards: list[Card] = [*self.stock.draw, *self.stock.waste]
        for tableau in self.tableaus:
            cards.extend(tableau.down)
            cards.extend(tableau.up)
        for foundation in self.foundations:
            cards.extend(foundation.cards)
        return cards

    def possible_moves(self) -> list[Move]:
        """List every legal move in a fixed order.

        Order: tableau to foundation, deck to foundation, tableau to
        tableau, deck to tableau. Within each group tableaus are scanned by
        index. Automated players rely on this order.
        """
        moves: list[Move] = []
        moves.extend(self._tableau_to_foundation_moves())
        moves.extend(self._deck_to_foundation_moves())
        moves.extend(self._tableau_to_tableau_moves())
        moves.extend(self._deck_to_tableau_moves())
        return moves

    def _find_foundation(self, card: Card) -> int | None:
        """Index of the first foundation accepting ``card``, if any."""
        for index, foundation in enumerate(self.foundations):
            if foundation.can_drop(card):
                return index
        return None

    def _tableau_to_foundation_moves(self) -> list[Move]:
        moves: list[Move] = []
        for index, tableau in enumerate(self.tableaus):
            card = tableau.bottom_card()
            if card is None:
                continue
            target = self._find_foundation(card)
            if target is not None:
                moves.append(TableauToFoundation(from_index=index, to_index=target, card=card))
        return moves

    def _deck_to_foundation_moves(self) -> list[Move]:
        card = self.stock.top_card()
        if card is None:
            return []
        target = self._find_foundation(card)
        if target is None:
            return []
        return [DeckToFoundation(to_index=target, card=card)]

    def _tableau_to_tableau_moves(self) -> list[Move]:
        moves: list[Move] = []
        for source_index, source in enumerate(self.tableaus):
            card = source.top_card()
            if card is None:
                continue
            for target_index, target in enumerate(self.tableaus):
                if target_index == source_index or not target.can_drop(card):
                    continue
                # A run already resting on an empty column gains nothing by
                # moving to another empty column.
                if target.cards_up() == 0 and source.cards_down() == 0:
                    continue
                moves.append(
                    TableauToTableau(from_index=source_index, to_index=target_index, card=card)
                )
        return moves

    def _deck_to_tableau_moves(self) -> list[Move]:
        card = self.stock.top_card()
        if card is None:
            return []
        return [
            DeckToTableau(to_index=index, card=card)
            for index, tableau in enumerate(self.tableaus)
            if tableau.can_drop(card)
        ]

    def perform(self, move: Move) -> Game:
        """Apply ``move`` and return the resulting position.

        The move is trusted to come from :meth:`possible_moves`; legality is
        not re-checked.

        Raises:
            IllegalMoveError: If ``move`` is not one of the four move shapes,
                or it reads from an empty pile.
        """
        if not isinstance(move, MOVE_TYPES):
            raise IllegalMoveError(f"Unknown move: {move!r}")
        logger.debug(f"Perform {format_move(move)}")

        if isinstance(move, TableauToFoundation):
            source = self.tableaus[move.from_index]
            card = source.bottom_card()
            if card is None:
                raise IllegalMoveError(f"Tableau {move.from_index} has no exposed card")
            return self._replace(
                tableaus={move.from_index: source.take()},
                foundations={move.to_index: self.foundations[move.to_index].drop(card)},
            )

        if isinstance(move, TableauToTableau):
            source = self.tableaus[move.from_index]
            target = self.tableaus[move.to_index]
            return self._replace(
                tableaus={
                    move.from_index: source.take_all(),
                    move.to_index: target.drop_cards(source.up),
                },
            )

        if isinstance(move, DeckToFoundation):
            card = self._waste_card()
            return self._replace(
                stock=self.stock.take(),
                foundations={move.to_index: self.foundations[move.to_index].drop(card)},
            )

        card = self._waste_card()
        return self._replace(
            stock=self.stock.take(),
            tableaus={move.to_index: self.tableaus[move.to_index].drop(card)},
        )

    def turn(self) -> Game:
        """Turn one card from the stock. No-op when the draw pile is empty."""
        if self.stock.is_exhausted():
            return self
        logger.debug("Turn stock")
        return self._replace(stock=self.stock.turn())

    def reshuffle(self) -> Game:
        """Redeal the waste into the draw pile once the draw pile is empty.

        Returns this game unchanged while the draw pile still has cards.
        """
        if not self.stock.is_exhausted():
            return self
        logger.debug(f"Redeal {len(self.stock.waste)} cards from waste")
        return self._replace(stock=self.stock.retry())

    def validate(self, check_cards: bool = False) -> list[Violation]:
        """Collect every rule violation in this position.

        With ``check_cards`` the 52-card conservation check runs as well.
        """
        return PositionValidator().validate(self, check_cards=check_cards)

    def _waste_card(self) -> Card:
        card = self.stock.top_card()
        if card is None:
            raise IllegalMoveError("Waste pile is empty")
        return card

    def _replace(
        self,
        stock: Stock | None = None,
        tableaus: dict[int, Tableau] | None = None,
        foundations: dict[int, Foundation] | None = None,
    ) -> Game:
        """Build a new game with the given piles swapped in."""
        new_tableaus = list(self.tableaus)
        for index, tableau in (tableaus or {}).items():
            new_tableaus[index] = tableau
        new_foundations = list(self.foundations)
        for index, foundation in (foundations or {}).items():
            new_foundations[index] = foundation
        return Game(
            stock=stock if stock is not None else self.stock,
            tableaus=tuple(new_tableaus),
            foundations=tuple(new_foundations),
        )
