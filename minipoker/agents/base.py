"""
Base Agent Interface for computer opponents.

An agent is asked how it responds each time the player bets. The round
passes the agent a state snapshot that includes the agent's own hole cards.

Usage:
    class MyAgent(BaseAgent):
        def respond(self, game_state, bet_amount):
            return OpponentResponse.CALL
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from minipoker.core.rules import OpponentResponse


class BaseAgent(ABC):
    """
    Abstract base class for computer opponents.

    Attributes:
        seat: Seat index this agent plays (1..N)
        name: Human-readable name
    """

    def __init__(self, seat: int, name: Optional[str] = None):
        """
        Initialize the agent.

        Args:
            seat: Seat index this agent plays
            name: Optional human-readable name
        """
        self.seat = seat
        self.name = name or f"Agent-{seat}"

    @abstractmethod
    def respond(self, game_state: Dict[str, Any], bet_amount: int) -> OpponentResponse:
        """
        Respond to a bet placed by the player.

        Args:
            game_state: Dictionary containing:
                - public_info: Pot, community cards, seats and flags
                - private_info: This agent's hole cards and money
            bet_amount: Amount the player just bet

        Returns:
            OpponentResponse.CALL or OpponentResponse.FOLD
        """
        pass

    def reset(self) -> None:
        """
        Reset the agent's internal state for a new round.

        Override this method if your agent keeps state between rounds.
        """
        pass

    def on_round_end(self, result: Dict[str, Any]) -> None:
        """
        Called when a round is resolved.

        Args:
            result: Winner record with winner_index, hand_type and amount
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.seat}, {self.name})"
