"""
Random agent for Blokus that picks uniformly from legal moves (easy bots).
"""

from typing import Any, Dict, List, Optional

import numpy as np

from engine.board import Board, Player
from engine.move_generator import Move


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    Used for the easy difficulty.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.RandomState] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
            rng: Random source to use instead of seeding a new one
        """
        self.rng = rng if rng is not None else np.random.RandomState(seed)

    def select_action(self, board: Board, player: Player, legal_moves: List[Move]) -> Optional[Move]:
        """
        Select a random legal move.

        Returns:
            Selected move, or None if no legal moves available
        """
        if not legal_moves:
            return None

        move_idx = self.rng.randint(0, len(legal_moves))
        return legal_moves[move_idx]

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "difficulty": "easy",
            "description": "Selects moves uniformly from legal moves"
        }

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.rng = np.random.RandomState(seed)
