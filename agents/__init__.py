"""
Bot opponents for Blokus.
"""

from .gameplay_protocol import BotAgentProtocol
from .greedy_size_agent import GreedySizeAgent
from .heuristic_agent import HeuristicAgent
from .random_agent import RandomAgent
from .registry import bot_select_move, build_bot_agent, select_move

__all__ = [
    "BotAgentProtocol",
    "RandomAgent",
    "GreedySizeAgent",
    "HeuristicAgent",
    "build_bot_agent",
    "select_move",
    "bot_select_move",
]
