"""
minipoker - Single-table Poker Mini-Game Engine

A small poker game against computer opponents with:
- Pure Python round logic (deck, hand classifier, round resolver)
- FastAPI + WebSocket surface for a presentation layer
- Pluggable computer opponents

Usage:
    from minipoker.core import PokerRound, classify
    from minipoker.agents import BaseAgent, CallingAgent
"""

__version__ = "0.1.0"

from minipoker.core.card import Card, Deck
from minipoker.core.player import Participant
from minipoker.core.round import PokerRound
from minipoker.core.hand import HandCategory, classify

__all__ = [
    "Card",
    "Deck",
    "Participant",
    "PokerRound",
    "HandCategory",
    "classify",
    "__version__",
]
