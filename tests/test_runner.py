"""Tests for the first-move autoplay runner."""

import pytest

from klondike.config import Config, GameConfig
from klondike.game.engine import Game
from klondike.game.runner import GameRunner
from klondike.models.card import Card, Suit
from klondike.models.foundation import Foundation
from klondike.models.stock import Stock
from klondike.models.tableau import Tableau

SUITS = [Suit.HEARTS, Suit.DIAMONDS, Suit.SPADES, Suit.CLUBS]


def card(suit: Suit, rank: int) -> Card:
    return Card(suit=suit, rank=rank)


def empty_game(stock: Stock) -> Game:
    return Game(
        stock=stock,
        tableaus=tuple(Tableau() for _ in range(7)),
        foundations=tuple(Foundation() for _ in range(4)),
    )


@pytest.fixture
def runner():
    return GameRunner()


class TestGameRunner:
    """Tests for GameRunner class."""

    def test_play_terminates(self, runner):
        """Test that a seeded game finishes with a sound position."""
        result = runner.play(1234)
        assert result.seed == 1234
        assert 0 <= result.score <= 52
        assert result.score == result.game.score()
        assert result.game.validate(check_cards=True) == []

    def test_play_is_deterministic(self, runner):
        """Test that the same seed gives the same result."""
        first = runner.play(42)
        second = runner.play(42)
        assert first.score == second.score
        assert first.moves == second.moves
        assert first.game == second.game

    def test_play_games_total(self, runner):
        """Test that play_games sums individual scores."""
        seeds = [1, 2, 3]
        expected = sum(runner.play(s).score for s in seeds)
        assert runner.play_games(seeds) == expected

    def test_on_move_callback(self, runner):
        """Test that the callback fires once per move."""
        seen = []
        runner.set_callbacks(on_move=lambda game, move: seen.append(move))
        result = runner.play(7)
        assert len(seen) == result.moves

    def test_finishes_won_game(self, runner):
        """Test playing the last four kings home."""
        game = Game(
            stock=Stock(),
            tableaus=(
                *[Tableau(up=(card(s, 13),)) for s in SUITS],
                *[Tableau() for _ in range(3)],
            ),
            foundations=tuple(
                Foundation(cards=tuple(card(s, r) for r in range(12, 0, -1))) for s in SUITS
            ),
        )
        result = runner.play_from(game)
        assert result.won
        assert result.moves == 4
        assert result.score == 52

    def test_redeals_while_useful(self, runner):
        """Test that the runner redeals until a pass makes no progress."""
        game = empty_game(Stock(draw=(card(Suit.SPADES, 2), card(Suit.DIAMONDS, 5), card(Suit.SPADES, 1))))
        result = runner.play_from(game)
        assert result.score == 2
        assert result.moves == 2
        assert result.redeals == 2

    def test_max_redeals(self):
        """Test that the redeal limit is honoured."""
        runner = GameRunner(Config(game=GameConfig(max_redeals=0)))
        game = empty_game(Stock(draw=(card(Suit.SPADES, 2), card(Suit.DIAMONDS, 5), card(Suit.SPADES, 1))))
        result = runner.play_from(game)
        assert result.score == 1
        assert result.redeals == 0
