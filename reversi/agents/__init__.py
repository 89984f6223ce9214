"""Agent modules."""

from .base_agent import BaseAgent
from .minimax_agent import MinimaxAgent
from .random_agent import RandomAgent
from ..registry import list_agents, register_agent

if "random" not in list_agents():
    register_agent("random", RandomAgent)
if "minimax" not in list_agents():
    register_agent("minimax", MinimaxAgent)

__all__ = [
    "BaseAgent",
    "MinimaxAgent",
    "RandomAgent",
]
