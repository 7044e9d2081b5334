"""
Tests for Card and Deck classes.
"""

import random

import pytest
from minipoker.core.card import (
    Card, Deck, DeckExhaustedError, Rank, Suit, UNIVERSE, parse_cards,
)


class TestCard:
    """Tests for Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_from_string(self):
        """Test creating cards from text."""
        card1 = Card.from_string("A♠")
        assert card1.rank == Rank.ACE
        assert card1.suit == Suit.SPADES

        card2 = Card.from_string("10h")
        assert card2.rank == Rank.TEN
        assert card2.suit == Suit.HEARTS

        card3 = Card.from_string("Td")
        assert card3.rank == Rank.TEN
        assert card3.suit == Suit.DIAMONDS

        card4 = Card.from_string("Q♣\ufe0f")
        assert card4.rank == Rank.QUEEN
        assert card4.suit == Suit.CLUBS

    def test_invalid_card_string(self):
        """Test that invalid text is rejected."""
        with pytest.raises(ValueError):
            Card.from_string("1h")
        with pytest.raises(ValueError):
            Card.from_string("Ax")
        with pytest.raises(ValueError):
            Card.from_string("A")

    def test_card_equality_by_value(self):
        """Two separately created cards with the same suit and rank are equal."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card.from_string("As")
        card3 = Card(Rank.ACE, Suit.HEARTS)

        assert card1 == card2
        assert hash(card1) == hash(card2)
        assert card1 != card3
        assert len({card1, card2, card3}) == 2

    def test_card_is_immutable(self):
        """Test that cards cannot be modified."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.TWO

    def test_card_comparison(self):
        """Test card comparison (by rank)."""
        ace = Card(Rank.ACE, Suit.SPADES)
        king = Card(Rank.KING, Suit.HEARTS)
        two = Card(Rank.TWO, Suit.CLUBS)

        assert two < king < ace

    def test_card_str(self):
        """Test card string representation."""
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"

    def test_card_to_dict(self):
        """Test card serialization."""
        assert Card(Rank.KING, Suit.DIAMONDS).to_dict() == {
            "rank": "K",
            "suit": "♦",
            "text": "K♦",
            "color": "red",
        }
        assert Card(Rank.TWO, Suit.CLUBS).color == "black"

    def test_parse_cards(self):
        """Test parsing several cards."""
        cards = parse_cards("A♥ K♥ Q♥ J♥ 10♥")
        assert len(cards) == 5
        assert all(c.suit == Suit.HEARTS for c in cards)


class TestDeck:
    """Tests for Deck class."""

    def test_universe(self):
        """The universe holds 52 distinct cards."""
        assert len(UNIVERSE) == 52
        assert len(set(UNIVERSE)) == 52

    def test_new_deck(self, deck):
        """A new deck has nothing used."""
        assert deck.remaining == 52
        assert len(deck) == 52
        assert deck.used == frozenset()

    def test_draw_marks_card_used(self, deck):
        """Drawing adds the card to the used set."""
        card = deck.draw()
        assert card in deck.used
        assert deck.remaining == 51

    def test_draws_are_unique(self, deck):
        """No card is drawn twice before a reset."""
        drawn = [deck.draw() for _ in range(52)]
        assert len(set(drawn)) == 52

    def test_draw_raises_when_exhausted(self, deck):
        """Drawing from an exhausted deck fails fast."""
        for _ in range(52):
            deck.draw()
        with pytest.raises(DeckExhaustedError):
            deck.draw()

    def test_reset_used(self, deck):
        """Resetting makes every card available again."""
        for _ in range(20):
            deck.draw()
        deck.reset_used()
        assert deck.remaining == 52
        assert deck.used == frozenset()

    def test_deal_hole_cards(self, deck):
        """Each participant gets 2 distinct cards."""
        hands = deck.deal_hole_cards(4)
        assert len(hands) == 4
        assert all(len(hand) == 2 for hand in hands)

        all_cards = [card for hand in hands for card in hand]
        assert len(set(all_cards)) == 8
        assert set(all_cards) == deck.used

    def test_deal_hole_cards_needs_participants(self, deck):
        """Dealing to nobody is an error."""
        with pytest.raises(ValueError):
            deck.deal_hole_cards(0)

    def test_seeded_decks_match(self):
        """The same seed deals the same cards."""
        deck1 = Deck(rng=random.Random(7))
        deck2 = Deck(rng=random.Random(7))
        assert [deck1.draw() for _ in range(10)] == [deck2.draw() for _ in range(10)]

    @pytest.mark.parametrize("seed", range(20))
    def test_full_round_draws_are_unique(self, seed):
        """A full round's worth of cards never repeats."""
        deck = Deck(rng=random.Random(seed))
        hands = deck.deal_hole_cards(4)
        board = [deck.draw() for _ in range(5)]
        cards = [c for hand in hands for c in hand] + board
        assert len(set(cards)) == 13
