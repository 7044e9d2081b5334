"""
Participant class for the poker mini-game.

Manages per-seat state:
- Money balance
- Hole cards
- Whether the seat is the human player or a computer opponent
"""

from __future__ import annotations
from typing import List, Dict, Any
from dataclasses import dataclass, field

from minipoker.core.card import Card


@dataclass
class Participant:
    """
    A seat at the table.

    Attributes:
        seat: Seat index (0 is the human player, 1..N are opponents)
        money: Current balance
        hole_cards: The participant's private cards (2 once dealt)
        is_computer: True for computer opponents
    """
    seat: int
    money: int
    hole_cards: List[Card] = field(default_factory=list)
    is_computer: bool = False

    @property
    def name(self) -> str:
        return f"Computer {self.seat}" if self.is_computer else "Player"

    def reset_for_new_round(self) -> None:
        """Drop hole cards; the balance carries over."""
        self.hole_cards = []

    def deal_cards(self, cards: List[Card]) -> None:
        """Deal hole cards to the participant."""
        self.hole_cards = list(cards)

    def can_afford(self, amount: int) -> bool:
        return 0 < amount <= self.money

    def pay(self, amount: int) -> int:
        """
        Take amount out of the balance.

        Returns:
            The amount paid, or 0 if the balance is insufficient
        """
        if not self.can_afford(amount):
            return 0
        self.money -= amount
        return amount

    def collect(self, amount: int) -> None:
        """Add winnings to the balance."""
        self.money += amount

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, report only how many hole cards are held
        """
        result: Dict[str, Any] = {
            "seat": self.seat,
            "name": self.name,
            "money": self.money,
            "is_computer": self.is_computer,
            "card_count": len(self.hole_cards),
        }

        if not hide_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hole_cards) if self.hole_cards else "??"
        return f"{self.name} [{cards_str}] ${self.money}"
