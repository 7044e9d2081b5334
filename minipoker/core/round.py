"""
Poker Round Engine - State Machine Implementation.

This module implements a single-table round against computer opponents.
It handles:
- Round state (phases: idle, hole cards, flop, turn, river)
- Player actions (draw, bet, fold, deal flop/turn/river)
- Opponent responses to bets
- Resolution by hand category with a player-favoured tie

Actions whose preconditions do not hold are no-ops: they return an
unsuccessful ActionResult and leave the round untouched.
"""

from __future__ import annotations
from typing import Callable, List, Dict, Optional, Any, Sequence
from dataclasses import dataclass, field
import logging
import random

from minipoker.core.card import Card, Deck
from minipoker.core.player import Participant
from minipoker.core.hand import HandCategory, evaluate_hand, hand_name
from minipoker.core.rules import (
    RoundPhase, ActionType, OpponentResponse, TableConfig,
    FLOP_CARDS, TURN_CARDS, RIVER_CARDS, TOTAL_COMMUNITY_CARDS, PLAYER_INDEX,
)
from minipoker.agents.base import BaseAgent
from minipoker.agents.calling_agent import CallingAgent


logger = logging.getLogger(__name__)

RoundListener = Callable[["PokerRound"], None]


@dataclass
class ActionResult:
    """Result of a player action."""
    success: bool
    message: str
    action_type: Optional[ActionType] = None
    amount: int = 0


@dataclass
class RoundResult:
    """Outcome of a resolved round."""
    winner_index: int
    categories: Dict[int, HandCategory] = field(default_factory=dict)
    amount: int = 0

    @property
    def hand_type(self) -> HandCategory:
        return self.categories[self.winner_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner_index": self.winner_index,
            "hand_type": self.hand_type.name,
            "description": hand_name(self.hand_type),
            "amount": self.amount,
            "categories": {seat: int(c) for seat, c in self.categories.items()},
        }


def determine_winner(categories: Dict[int, int]) -> int:
    """
    Pick the winning seat from each contending seat's hand category.

    The highest category wins. The player (seat 0) wins any tie for the
    best category; otherwise the lowest opponent seat with the best
    category wins. Kickers are never compared.
    """
    if PLAYER_INDEX not in categories:
        raise ValueError("The player must take part in the resolution")

    best = max(categories.values())
    if categories[PLAYER_INDEX] == best:
        return PLAYER_INDEX
    return min(seat for seat, category in categories.items() if category == best)


class PokerRound:
    """
    Round engine for one player against computer opponents.

    Usage:
        game = PokerRound()
        game.draw()
        game.bet()
        game.deal_flop()
        game.deal_turn()
        game.deal_river()   # resolves the round

        winner = game.get_winner()
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        agents: Optional[Sequence[BaseAgent]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a table.

        Args:
            config: Table settings (defaults to TableConfig())
            agents: One agent per opponent, in seat order (defaults to CallingAgent)
            rng: Random source for the deck
        """
        self.config = config or TableConfig()

        if agents is None:
            agents = [CallingAgent(seat) for seat in range(1, self.config.num_participants)]
        if len(agents) != self.config.num_opponents:
            raise ValueError(
                f"Expected {self.config.num_opponents} agents, got {len(agents)}"
            )
        self.agents: List[BaseAgent] = list(agents)

        self.participants: List[Participant] = [
            Participant(seat=seat, money=self.config.starting_money, is_computer=seat != PLAYER_INDEX)
            for seat in range(self.config.num_participants)
        ]

        self.deck = Deck(rng)
        self.round_number = 0
        self._listeners: List[RoundListener] = []
        self._reset_round_state()

    def _reset_round_state(self) -> None:
        """Clear everything that belongs to a single round."""
        self.phase = RoundPhase.IDLE
        self.community_cards: List[Card] = []
        self.pot = 0
        self.current_bet = 0
        self.folded = False
        self.river_dealt = False
        self.computer_calling = False
        self.folded_opponents: List[int] = []
        self.result: Optional[RoundResult] = None
        self.round_history: List[Dict[str, Any]] = []

        for participant in self.participants:
            participant.reset_for_new_round()
        self.deck.reset_used()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def player(self) -> Participant:
        return self.participants[PLAYER_INDEX]

    @property
    def opponents(self) -> List[Participant]:
        return self.participants[PLAYER_INDEX + 1:]

    @property
    def player_money(self) -> int:
        return self.player.money

    @property
    def computer_money(self) -> int:
        """Combined balance of every computer opponent."""
        return sum(p.money for p in self.opponents)

    @property
    def winner_index(self) -> Optional[int]:
        return self.result.winner_index if self.result else None

    def is_round_running(self) -> bool:
        """Check if cards are out and the round has not been resolved."""
        return self.phase not in (RoundPhase.IDLE, RoundPhase.RIVER_DEALT)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: RoundListener) -> None:
        """Register a callback invoked with the round after every successful action."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: RoundListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def take_action(self, action_type: ActionType, amount: int = 0) -> ActionResult:
        """
        Process a player action.

        Args:
            action_type: Action to perform
            amount: Bet amount for BET (0 means the configured increment)

        Returns:
            ActionResult indicating success/failure and details
        """
        if action_type == ActionType.DRAW:
            return self.draw()
        elif action_type == ActionType.BET:
            return self.bet(amount or None)
        elif action_type == ActionType.FOLD:
            return self.fold()
        elif action_type == ActionType.DEAL_FLOP:
            return self.deal_flop()
        elif action_type == ActionType.DEAL_TURN:
            return self.deal_turn()
        elif action_type == ActionType.DEAL_RIVER:
            return self.deal_river()
        return ActionResult(False, f"Unknown action: {action_type}")

    def draw(self) -> ActionResult:
        """Start a new round and deal 2 hole cards to every participant."""
        if self.is_round_running():
            return self._reject(ActionType.DRAW, "Round already in progress")

        self._reset_round_state()
        self.round_number += 1
        logger.info(f"Starting round #{self.round_number}")

        for agent in self.agents:
            agent.reset()

        hands = self.deck.deal_hole_cards(len(self.participants))
        for participant, cards in zip(self.participants, hands):
            participant.deal_cards(cards)

        self.phase = RoundPhase.HOLE_CARDS_DEALT
        self._log_action("DRAW", {
            "round_number": self.round_number,
            "player_cards": [str(c) for c in self.player.hole_cards],
        })
        return self._accept(ActionType.DRAW, "Hole cards dealt")

    def bet(self, amount: Optional[int] = None) -> ActionResult:
        """
        Move a bet from the player's balance into the pot.

        Args:
            amount: Bet amount, defaults to the configured increment
        """
        if amount is None:
            amount = self.config.bet_increment

        if not self.is_round_running():
            return self._reject(ActionType.BET, "No hole cards to bet on")
        if amount <= 0:
            return self._reject(ActionType.BET, "Bet must be positive")
        if not self.player.can_afford(amount):
            return self._reject(
                ActionType.BET, f"Cannot bet ${amount} with ${self.player.money}"
            )

        self.player.pay(amount)
        self.pot += amount
        self.current_bet += amount
        self._collect_responses(amount)

        self._log_action("BET", {"amount": amount, "pot": self.pot})
        return self._accept(ActionType.BET, f"Bet ${amount}", amount)

    def _collect_responses(self, amount: int) -> None:
        """Ask every opponent still in the round how it answers the bet."""
        for agent in self.agents:
            if agent.seat in self.folded_opponents:
                continue
            response = OpponentResponse(agent.respond(self.get_state(for_seat=agent.seat), amount))
            if response == OpponentResponse.CALL:
                self.computer_calling = True
            else:
                self.folded_opponents.append(agent.seat)
                logger.info(f"{agent.name} folds")

    def deal_flop(self) -> ActionResult:
        """Deal the flop (3 community cards)."""
        if self.phase != RoundPhase.HOLE_CARDS_DEALT or self.community_cards:
            return self._reject(ActionType.DEAL_FLOP, "Flop already dealt or no hole cards")
        if self.current_bet == 0:
            return self._reject(ActionType.DEAL_FLOP, "A bet is required before the flop")

        self._deal_community(FLOP_CARDS)
        self.phase = RoundPhase.FLOP_DEALT
        self._log_action("FLOP", {"cards": [str(c) for c in self.community_cards]})
        return self._accept(ActionType.DEAL_FLOP, "Flop dealt")

    def deal_turn(self) -> ActionResult:
        """Deal the turn (4th community card)."""
        if self.phase != RoundPhase.FLOP_DEALT or len(self.community_cards) != FLOP_CARDS:
            return self._reject(ActionType.DEAL_TURN, "Turn requires the flop")
        if self.current_bet == 0:
            return self._reject(ActionType.DEAL_TURN, "A bet is required before the turn")

        self._deal_community(TURN_CARDS)
        self.phase = RoundPhase.TURN_DEALT
        self._log_action("TURN", {"card": str(self.community_cards[-1])})
        return self._accept(ActionType.DEAL_TURN, "Turn dealt")

    def deal_river(self) -> ActionResult:
        """Deal the river (5th community card) and resolve the round."""
        if (self.phase != RoundPhase.TURN_DEALT
                or len(self.community_cards) != TOTAL_COMMUNITY_CARDS - RIVER_CARDS):
            return self._reject(ActionType.DEAL_RIVER, "River requires the turn")
        if self.current_bet == 0:
            return self._reject(ActionType.DEAL_RIVER, "A bet is required before the river")

        self._deal_community(RIVER_CARDS)
        self.phase = RoundPhase.RIVER_DEALT
        self.river_dealt = True
        self._log_action("RIVER", {"card": str(self.community_cards[-1])})

        self._resolve()
        return self._accept(ActionType.DEAL_RIVER, "River dealt")

    def fold(self) -> ActionResult:
        """Forfeit the round. The pot is discarded and nobody is credited."""
        discarded = self.pot
        self._reset_round_state()
        self.folded = True
        logger.info(f"Player folds, ${discarded} discarded")
        return self._accept(ActionType.FOLD, "Folded")

    def _deal_community(self, count: int) -> None:
        self.community_cards.extend(self.deck.draw() for _ in range(count))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _resolve(self) -> None:
        """Evaluate every contending hand and award the pot to the winner."""
        categories: Dict[int, HandCategory] = {}
        for participant in self.participants:
            if participant.seat in self.folded_opponents:
                continue
            cards = participant.hole_cards + self.community_cards
            categories[participant.seat] = evaluate_hand(cards, self.config.evaluation)

        winner_index = determine_winner(categories)
        amount = self.pot
        self.participants[winner_index].collect(amount)
        self.pot = 0

        self.result = RoundResult(winner_index=winner_index, categories=categories, amount=amount)
        logger.info(
            f"Round #{self.round_number}: {self.participants[winner_index].name} wins "
            f"${amount} with {hand_name(self.result.hand_type)}"
        )
        self._log_action("SHOWDOWN", self.result.to_dict())

        for agent in self.agents:
            agent.on_round_end(self.result.to_dict())

    def get_winner(self) -> Dict[str, Any]:
        """Get winner information once the round is resolved."""
        if self.result is None:
            return {}
        winner = self.participants[self.result.winner_index]
        return {**self.result.to_dict(), "name": winner.name, "money": winner.money}

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def get_state(self, reveal: Optional[bool] = None, for_seat: int = PLAYER_INDEX) -> Dict[str, Any]:
        """
        Get the current round state.

        Args:
            reveal: Show every opponent's hole cards. Defaults to revealing
                them once the river is dealt.
            for_seat: Seat whose private information is included

        Returns:
            Round state dictionary
        """
        if reveal is None:
            reveal = self.river_dealt

        public_info = {
            "phase": self.phase.name,
            "round_number": self.round_number,
            "pot": self.pot,
            "current_bet": self.current_bet,
            "board": [c.to_dict() for c in self.community_cards],
            "player_money": self.player_money,
            "computer_money": self.computer_money,
            "participants": [
                p.to_dict(hide_cards=not (reveal or p.seat == for_seat))
                for p in self.participants
            ],
            "computer_calling": self.computer_calling,
            "folded": self.folded,
            "river_dealt": self.river_dealt,
            "winner_index": self.winner_index,
            "winner": self.get_winner() or None,
        }

        seat = self.participants[for_seat]
        private_info = {
            "seat": for_seat,
            "hand": [c.to_dict() for c in seat.hole_cards],
            "money": seat.money,
        }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _accept(self, action_type: ActionType, message: str, amount: int = 0) -> ActionResult:
        self._notify()
        return ActionResult(True, message, action_type, amount)

    def _reject(self, action_type: ActionType, message: str) -> ActionResult:
        logger.debug(f"Ignored {action_type.value}: {message}")
        return ActionResult(False, message, action_type)

    def _log_action(self, action: str, details: Dict[str, Any]) -> None:
        """Log an action to the round history."""
        self.round_history.append({
            "action": action,
            "phase": self.phase.name,
            **details
        })

    def __repr__(self) -> str:
        return (
            f"PokerRound(#{self.round_number}, phase={self.phase.name}, "
            f"pot={self.pot}, players={len(self.participants)})"
        )
