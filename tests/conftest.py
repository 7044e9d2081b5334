"""
Pytest configuration and shared fixtures for minipoker tests.
"""

import random

import pytest
from minipoker.core.card import Card, Deck, Rank, Suit, parse_cards
from minipoker.core.round import PokerRound
from minipoker.core.rules import TableConfig


class ScriptedRandom:
    """Random source whose choices follow a fixed list of cards."""

    def __init__(self, cards):
        self._cards = list(cards)

    def choice(self, seq):
        card = self._cards.pop(0)
        assert card in seq, f"{card} is not available to draw"
        return card


@pytest.fixture
def deck():
    """Create a deck with a seeded random source."""
    return Deck(rng=random.Random(1234))


@pytest.fixture
def game():
    """Create a seeded round with the default table (3 opponents)."""
    return PokerRound(rng=random.Random(42))


@pytest.fixture
def scripted_game():
    """
    Factory for a round whose deal order is fixed.

    Usage:
        game = scripted_game("J♦ 3♣", ["K♠ K♦", "Q♦ 5♠", "A♠ 6♦"], "2♣ 7♦ 9♠ J♥ 4♣")
    """
    def make(player, opponents, board, **config):
        order = parse_cards(player)
        for hand in opponents:
            order += parse_cards(hand)
        order += parse_cards(board)
        table = TableConfig(num_opponents=len(opponents), **config)
        return PokerRound(config=table, rng=ScriptedRandom(order))
    return make


@pytest.fixture
def play_to_river():
    """Run a round from draw to river with a single default bet."""
    def play(game):
        assert game.draw().success
        assert game.bet().success
        assert game.deal_flop().success
        assert game.deal_turn().success
        assert game.deal_river().success
        return game
    return play


@pytest.fixture
def royal_flush():
    """A♥ K♥ Q♥ J♥ 10♥."""
    return parse_cards("A♥ K♥ Q♥ J♥ 10♥")


@pytest.fixture
def straight_flush():
    """King-high straight flush in spades."""
    return parse_cards("9♠ K♠ Q♠ J♠ 10♠")


@pytest.fixture
def wheel_straight():
    """A wheel straight (A-2-3-4-5), mixed suits."""
    return [
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.TWO, Suit.DIAMONDS),
        Card(Rank.THREE, Suit.CLUBS),
        Card(Rank.FOUR, Suit.SPADES),
        Card(Rank.FIVE, Suit.HEARTS),
    ]
