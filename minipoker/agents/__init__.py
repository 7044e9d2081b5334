"""
minipoker Agents - computer opponent decisions.
"""

from minipoker.agents.base import BaseAgent
from minipoker.agents.calling_agent import CallingAgent

__all__ = ["BaseAgent", "CallingAgent"]
