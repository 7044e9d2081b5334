"""
minipoker Core - Pure Python round logic

This module contains all game logic without any network dependencies.
"""

from minipoker.core.card import Card, Deck, DeckExhaustedError, Rank, Suit
from minipoker.core.player import Participant
from minipoker.core.hand import HandCategory, classify, classify_best, evaluate_hand
from minipoker.core.rules import ActionType, HandEvaluation, RoundPhase, TableConfig
from minipoker.core.round import PokerRound, ActionResult, RoundResult, determine_winner

__all__ = [
    "Card",
    "Deck",
    "DeckExhaustedError",
    "Rank",
    "Suit",
    "Participant",
    "HandCategory",
    "classify",
    "classify_best",
    "evaluate_hand",
    "ActionType",
    "HandEvaluation",
    "RoundPhase",
    "TableConfig",
    "PokerRound",
    "ActionResult",
    "RoundResult",
    "determine_winner",
]
