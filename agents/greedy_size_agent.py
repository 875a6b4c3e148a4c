"""
Size-greedy agent for Blokus (medium bots).
"""

from typing import Any, Dict, List, Optional

import numpy as np

from engine.board import Board, Player
from engine.move_generator import Move


class GreedySizeAgent:
    """
    Plays the biggest piece it can.

    Selection happens in two stages: legal moves are ranked by block count,
    then one of the moves tied for the largest size is drawn from the agent's
    random source.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.RandomState] = None):
        self.rng = rng if rng is not None else np.random.RandomState(seed)

    def select_action(self, board: Board, player: Player, legal_moves: List[Move]) -> Optional[Move]:
        if not legal_moves:
            return None

        ranked = sorted(legal_moves, key=lambda move: move.size, reverse=True)
        top_size = ranked[0].size
        candidates = [move for move in ranked if move.size == top_size]
        return candidates[self.rng.randint(0, len(candidates))]

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "GreedySizeAgent",
            "difficulty": "medium",
            "description": "Places the largest available piece, random among equals"
        }

    def set_seed(self, seed: int):
        self.rng = np.random.RandomState(seed)
