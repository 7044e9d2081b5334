"""
Rules, constants and table configuration for the poker mini-game.

One human player (seat 0) plays against a fixed number of computer
opponents (seats 1..N). A round runs:

1. Draw: every participant receives 2 hole cards.
2. Bet: the player moves a fixed increment into the pot; opponents call.
3. Flop (3 cards), turn (1 card), river (1 card) are dealt to the board.
   Each stage requires a bet to have been placed.
4. On the river the round resolves immediately. Hands are compared by
   category only and a player tying the best category wins the pot.

Folding ends the round at once and discards the pot.
"""

from enum import Enum, auto
from dataclasses import dataclass


class RoundPhase(Enum):
    """Phases of a round."""
    IDLE = auto()              # No cards dealt (start, or after a fold)
    HOLE_CARDS_DEALT = auto()  # Every participant holds 2 cards
    FLOP_DEALT = auto()        # 3 community cards
    TURN_DEALT = auto()        # 4 community cards
    RIVER_DEALT = auto()       # 5 community cards, round resolved


class ActionType(Enum):
    """Actions the player can trigger."""
    DRAW = "DRAW"
    BET = "BET"
    FOLD = "FOLD"
    DEAL_FLOP = "DEAL_FLOP"
    DEAL_TURN = "DEAL_TURN"
    DEAL_RIVER = "DEAL_RIVER"


class OpponentResponse(Enum):
    """Responses a computer opponent can give to a bet."""
    CALL = "CALL"
    FOLD = "FOLD"


class HandEvaluation(Enum):
    """How a set of more than 5 cards is classified."""
    EXACT = "EXACT"          # Classify exactly the cards given
    BEST_FIVE = "BEST_FIVE"  # Best classification over every 5-card subset


# Default table settings
DEFAULT_STARTING_MONEY = 1000
DEFAULT_BET = 10
DEFAULT_NUM_OPPONENTS = 3
MAX_OPPONENTS = 7

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

DECK_SIZE = 52
HAND_SIZE = 5

PLAYER_INDEX = 0


@dataclass
class TableConfig:
    """
    Settings for a table.

    Attributes:
        starting_money: Initial balance of every participant
        bet_increment: Amount moved into the pot by a default bet
        num_opponents: Number of computer opponents
        evaluation: How 7-card hands are classified at resolution. BEST_FIVE
            takes the best 5-card subset; EXACT runs the cascade over all seven
            cards at once, so a 7-card hand never makes a straight and three
            pairs count as one pair.
    """
    starting_money: int = DEFAULT_STARTING_MONEY
    bet_increment: int = DEFAULT_BET
    num_opponents: int = DEFAULT_NUM_OPPONENTS
    evaluation: HandEvaluation = HandEvaluation.BEST_FIVE

    def __post_init__(self) -> None:
        if self.starting_money < 0:
            raise ValueError("Starting money cannot be negative")
        if self.bet_increment <= 0:
            raise ValueError("Bet increment must be positive")
        if not 1 <= self.num_opponents <= MAX_OPPONENTS:
            raise ValueError(f"Number of opponents must be 1-{MAX_OPPONENTS}")
        self.evaluation = HandEvaluation(self.evaluation)

    @property
    def num_participants(self) -> int:
        """The player plus every opponent."""
        return self.num_opponents + 1
