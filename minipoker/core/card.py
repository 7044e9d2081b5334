"""
Card and Deck classes for the poker mini-game.

Cards are plain values: two cards with the same rank and suit are equal no
matter which draw produced them. The deck never shuffles a list; it draws
uniformly at random from the cards not yet used in the current round.
"""

from __future__ import annotations
import logging
import random
from typing import FrozenSet, List, Optional, Set
from enum import IntEnum

from minipoker.core.rules import DECK_SIZE, HOLE_CARDS


logger = logging.getLogger(__name__)


class Suit(IntEnum):
    """Card suits."""
    HEARTS = 0    # ♥
    DIAMONDS = 1  # ♦
    CLUBS = 2     # ♣
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks, valued by their zero-based index in 2..A."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.HEARTS: "h",
    Suit.DIAMONDS: "d",
    Suit.CLUBS: "c",
    Suit.SPADES: "s",
}

RANK_LABELS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

LABEL_TO_RANK = {v: k for k, v in RANK_LABELS.items()}
LABEL_TO_RANK["T"] = Rank.TEN
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class DeckExhaustedError(RuntimeError):
    """Raised when a draw is requested but every card has been used."""


class Card:
    """
    A playing card identified by its (suit, rank) pair.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - Text: Card.from_string("A♠"), Card.from_string("10h"), Card.from_string("Td")
    """

    __slots__ = ("rank", "suit")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "rank", Rank(rank))
        object.__setattr__(self, "suit", Suit(suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from text.

        Accepts a rank label ("2".."10", "T", "J", "Q", "K", "A") followed by
        a suit char ("h", "d", "c", "s") or symbol ("♥", "♦", "♣", "♠").
        A trailing emoji variation selector is ignored.
        """
        s = s.strip().replace("\ufe0f", "")
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in LABEL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(LABEL_TO_RANK[rank_part], suit)

    @property
    def key(self) -> tuple:
        """The (suit, rank) pair that identifies this card."""
        return (self.suit, self.rank)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self.key == other.key
        return False

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Card({RANK_LABELS[self.rank]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return f"{RANK_LABELS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_LABELS[self.rank],
            "suit": SUIT_SYMBOLS[self.suit],
            "text": str(self),
            "color": self.color,
        }


# Every card in canonical order; draws pick from the unused part of this list.
UNIVERSE: List[Card] = [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    Draw-without-replacement over the 52-card universe.

    Usage:
        deck = Deck()
        deck.reset_used()
        hole_cards = deck.deal_hole_cards(4)
        flop = [deck.draw() for _ in range(3)]
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source with a ``choice`` method. Defaults to a fresh
                ``random.Random()``; pass a seeded one for reproducible deals.
        """
        self._rng = rng or random.Random()
        self._used: Set[Card] = set()

    def reset_used(self) -> None:
        """Forget every drawn card. Call once at the start of each round."""
        self._used = set()

    def draw(self) -> Card:
        """
        Draw one uniformly random card that has not been used this round.

        Raises:
            DeckExhaustedError: If all 52 cards have been used.
        """
        available = [card for card in UNIVERSE if card not in self._used]
        if not available:
            raise DeckExhaustedError(f"All {DECK_SIZE} cards have been drawn")

        card = self._rng.choice(available)
        self._used.add(card)
        logger.debug(f"Drew {card} ({len(self._used)} used)")
        return card

    def deal_hole_cards(self, participants: int) -> List[List[Card]]:
        """
        Deal two hole cards to each participant, in seat order.

        Raises:
            ValueError: If participants is not positive.
            DeckExhaustedError: If the deck runs out.
        """
        if participants < 1:
            raise ValueError(f"Need at least 1 participant, got {participants}")
        return [
            [self.draw() for _ in range(HOLE_CARDS)]
            for _ in range(participants)
        ]

    @property
    def used(self) -> FrozenSet[Card]:
        """Cards drawn since the last reset."""
        return frozenset(self._used)

    @property
    def remaining(self) -> int:
        """Number of cards that can still be drawn."""
        return DECK_SIZE - len(self._used)

    def __len__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "A♥ K♥ Q♥ J♥ 10♥" or "As Kh Td".
    """
    return [Card.from_string(s) for s in cards_str.split()]
