"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional, Dict
from pydantic import BaseModel, Field

from minipoker.core.rules import (
    DEFAULT_BET, DEFAULT_NUM_OPPONENTS, DEFAULT_STARTING_MONEY, MAX_OPPONENTS,
    HandEvaluation,
)


# ============= Request Schemas =============

class InitRoundRequest(BaseModel):
    """Request to set up a table."""
    starting_money: int = Field(ge=0, default=DEFAULT_STARTING_MONEY)
    bet_increment: int = Field(gt=0, default=DEFAULT_BET)
    num_opponents: int = Field(ge=1, le=MAX_OPPONENTS, default=DEFAULT_NUM_OPPONENTS)
    evaluation: HandEvaluation = HandEvaluation.BEST_FIVE
    seed: Optional[int] = Field(default=None, description="Seed for reproducible deals")


class BetRequest(BaseModel):
    """Request to place a bet."""
    amount: Optional[int] = Field(default=0, ge=0, description="Bet amount, 0 for the table increment")


class ActionRequest(BaseModel):
    """Request to take any round action."""
    action_type: str = Field(..., description="Action type: DRAW, BET, FOLD, DEAL_FLOP, DEAL_TURN, DEAL_RIVER")
    amount: Optional[int] = Field(default=0, ge=0, description="Amount for BET")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    color: str


class ParticipantSchema(BaseModel):
    """A seat as seen by the presentation layer."""
    seat: int
    name: str
    money: int
    is_computer: bool
    card_count: int
    cards: Optional[List[CardSchema]] = None


class WinnerSchema(BaseModel):
    """Winner information."""
    winner_index: int
    name: str
    hand_type: str
    description: str
    amount: int
    money: int
    categories: Dict[int, int] = {}


class PublicInfoSchema(BaseModel):
    """Public round state."""
    phase: str
    round_number: int
    pot: int
    current_bet: int
    board: List[CardSchema]
    player_money: int
    computer_money: int
    participants: List[ParticipantSchema]
    computer_calling: bool
    folded: bool
    river_dealt: bool
    winner_index: Optional[int] = None
    winner: Optional[WinnerSchema] = None


class PrivateInfoSchema(BaseModel):
    """Private state for one seat."""
    seat: int
    hand: List[CardSchema] = []
    money: int = 0


class RoundStateSchema(BaseModel):
    """Complete round state."""
    public_info: PublicInfoSchema
    private_info: PrivateInfoSchema


class ActionResultSchema(BaseModel):
    """Result of an action, with the state it left behind."""
    success: bool
    message: str
    action_type: Optional[str] = None
    amount: int = 0
    state: RoundStateSchema


# ============= WebSocket Message Schemas =============

class WSJoinMessage(BaseModel):
    """WebSocket join room message."""
    type: str = "join"
    room_id: str
    client_id: str


class WSActionMessage(BaseModel):
    """WebSocket action message."""
    type: str = "action"
    action: str
    amount: Optional[int] = Field(default=0, ge=0)


class WSErrorMessage(BaseModel):
    """WebSocket error message."""
    type: str = "error"
    message: str
