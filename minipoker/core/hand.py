"""
Hand classification for the poker mini-game.

A hand is mapped to a category from 0 (High Card) to 9 (Royal Flush).
Only categories are compared; kickers never break ties.

Hand categories (best to worst):
9. Royal Flush: 10 J Q K A of one suit
8. Straight Flush: 5 consecutive cards of one suit
7. Four of a Kind: 4 cards of one rank
6. Full House: 3 of a kind + pair
5. Flush: all cards of one suit
4. Straight: 5 consecutive cards
3. Three of a Kind: 3 cards of one rank
2. Two Pair: exactly 2 ranks paired
1. One Pair: 2 cards of one rank
0. High Card: no made hand

Note: Ace can be low in the A-2-3-4-5 straight (wheel).
"""

from __future__ import annotations
from typing import Iterable, List, Sequence
from itertools import combinations
from enum import IntEnum
from collections import Counter

from minipoker.core.card import Card, Rank
from minipoker.core.rules import HAND_SIZE, HandEvaluation


class HandCategory(IntEnum):
    """Hand categories from worst (0) to best (9)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


HAND_CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

WHEEL = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]
ROYAL = [Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]


def classify(cards: Iterable[Card]) -> HandCategory:
    """
    Classify exactly the cards given.

    Flush needs every card to share a suit, and a straight needs exactly
    5 distinct ranks, so both only apply to 5-card input in practice.
    Fewer than 5 cards can only make pairs, trips or quads.

    Args:
        cards: Any number of Card objects, in any order

    Returns:
        HandCategory of the card set
    """
    cards = list(cards)
    if not cards:
        raise ValueError("Cannot classify an empty hand")

    ranks = sorted(card.rank for card in cards)

    is_flush = len(cards) >= HAND_SIZE and len({card.suit for card in cards}) == 1
    is_straight = _is_straight(ranks)

    if is_flush and is_straight:
        if ranks == ROYAL:
            return HandCategory.ROYAL_FLUSH
        return HandCategory.STRAIGHT_FLUSH

    counts = list(Counter(ranks).values())

    if 4 in counts:
        return HandCategory.FOUR_OF_A_KIND
    if 3 in counts and 2 in counts:
        return HandCategory.FULL_HOUSE
    if is_flush:
        return HandCategory.FLUSH
    if is_straight:
        return HandCategory.STRAIGHT
    if 3 in counts:
        return HandCategory.THREE_OF_A_KIND
    if counts.count(2) == 2:
        return HandCategory.TWO_PAIR
    if 2 in counts:
        return HandCategory.ONE_PAIR
    return HandCategory.HIGH_CARD


def _is_straight(ranks: List[Rank]) -> bool:
    """Check if sorted ranks are 5 distinct consecutive values (or the wheel)."""
    if len(set(ranks)) != HAND_SIZE or len(ranks) != HAND_SIZE:
        return False
    return ranks[4] - ranks[0] == 4 or ranks == WHEEL


def classify_best(cards: Sequence[Card]) -> HandCategory:
    """
    Classify the best 5-card hand within 5-7 cards.

    Raises:
        ValueError: If fewer than 5 cards are given
    """
    if len(cards) < HAND_SIZE:
        raise ValueError(f"Need at least {HAND_SIZE} cards, got {len(cards)}")
    return max(classify(combo) for combo in combinations(cards, HAND_SIZE))


def evaluate_hand(
    cards: Sequence[Card],
    mode: HandEvaluation = HandEvaluation.BEST_FIVE,
) -> HandCategory:
    """
    Evaluate a hand using the given mode.

    BEST_FIVE falls back to the exact classification when fewer than
    5 cards are available.
    """
    if mode == HandEvaluation.BEST_FIVE and len(cards) >= HAND_SIZE:
        return classify_best(cards)
    return classify(cards)


def compare_hands(
    cards1: Sequence[Card],
    cards2: Sequence[Card],
    mode: HandEvaluation = HandEvaluation.BEST_FIVE,
) -> int:
    """
    Compare two hands by category.

    Returns:
        1 if cards1 is better, -1 if cards2 is better, 0 if same category
    """
    category1 = evaluate_hand(cards1, mode)
    category2 = evaluate_hand(cards2, mode)

    if category1 > category2:
        return 1
    elif category1 < category2:
        return -1
    else:
        return 0


def hand_name(category: int) -> str:
    """Convert a category rank to a display name."""
    try:
        return HAND_CATEGORY_NAMES[HandCategory(category)]
    except ValueError:
        return "Unknown"
