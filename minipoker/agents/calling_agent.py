"""
Calling Agent Implementation.

The default computer opponent: it calls every bet and never folds.
"""

import logging
from typing import Dict, Any, Optional

from minipoker.agents.base import BaseAgent
from minipoker.core.rules import OpponentResponse


logger = logging.getLogger(__name__)


class CallingAgent(BaseAgent):
    """An agent that always calls."""

    def __init__(self, seat: int, name: Optional[str] = None):
        super().__init__(seat, name or f"Computer-{seat}")
        self.calls = 0

    def respond(self, game_state: Dict[str, Any], bet_amount: int) -> OpponentResponse:
        self.calls += 1
        logger.debug(f"{self.name} calls {bet_amount}")
        return OpponentResponse.CALL

    def reset(self) -> None:
        self.calls = 0
