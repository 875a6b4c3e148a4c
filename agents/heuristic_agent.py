"""
Heuristic agent for Blokus with strategic preferences (hard bots).
"""

from typing import Any, Dict, List, Optional

import numpy as np

from engine.board import Board, Player
from engine.legality import count_corner_touches
from engine.move_generator import Move


class HeuristicAgent:
    """
    Single-ply heuristic agent with strategic preferences:
    - Prefer large pieces
    - Prefer placements that touch many of its own corners
    - Prefer cells near the board center

    A small random jitter separates otherwise equal moves. There is no
    lookahead and no modelling of opponent replies.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.RandomState] = None):
        """
        Initialize heuristic agent.

        Args:
            seed: Random seed for reproducible behavior
            rng: Random source to use instead of seeding a new one
        """
        self.rng = rng if rng is not None else np.random.RandomState(seed)

        # Heuristic weights
        self.piece_size_weight = 10.0
        self.corner_touch_weight = 5.0
        self.center_preference_weight = 0.5
        self.jitter_scale = 2.0

    def select_action(self, board: Board, player: Player, legal_moves: List[Move]) -> Optional[Move]:
        """
        Select the highest-scoring move.

        Args:
            board: Current board state
            player: Player making the move
            legal_moves: List of legal moves available

        Returns:
            Selected move, or None if no legal moves available
        """
        if not legal_moves:
            return None

        first_move = not board.occupies_any(player)
        best_move = None
        best_score = -np.inf
        for move in legal_moves:
            score = self._evaluate_move(board, player, move, first_move)
            # Strict comparison keeps the earliest of equal scores
            if score > best_score:
                best_move = move
                best_score = score
        return best_move

    def _evaluate_move(self, board: Board, player: Player, move: Move, first_move: bool = False) -> float:
        """
        Evaluate a move based on heuristics.

        Returns:
            Heuristic score for the move
        """
        cells = move.cells

        # 1. Piece size preference (larger pieces are better)
        score = self.piece_size_weight * len(cells)

        # 2. Corner contact with own pieces; nothing to touch on a first move
        if not first_move:
            score += self.corner_touch_weight * count_corner_touches(board, cells, player)

        # 3. Center preference
        score += self.center_preference_weight * self._evaluate_center_preference(board, cells)

        # 4. Jitter
        score += self.rng.random_sample() * self.jitter_scale
        return score

    def _evaluate_center_preference(self, board: Board, cells) -> float:
        """Sum over blocks of (board size - distance from center)."""
        center = board.SIZE / 2
        total = 0.0
        for pos in cells:
            distance_from_center = np.sqrt((pos.x - center) ** 2 + (pos.y - center) ** 2)
            total += board.SIZE - distance_from_center
        return total

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "HeuristicAgent",
            "difficulty": "hard",
            "description": "Scores piece size, corner contact and centrality",
            "weights": {
                "piece_size": self.piece_size_weight,
                "corner_touch": self.corner_touch_weight,
                "center_preference": self.center_preference_weight,
                "jitter": self.jitter_scale
            }
        }

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.rng = np.random.RandomState(seed)

    def set_weights(self, weights: Dict[str, float]):
        """
        Set heuristic weights.

        Args:
            weights: Dictionary of weight names and values
        """
        if "piece_size" in weights:
            self.piece_size_weight = weights["piece_size"]
        if "corner_touch" in weights:
            self.corner_touch_weight = weights["corner_touch"]
        if "center_preference" in weights:
            self.center_preference_weight = weights["center_preference"]
        if "jitter" in weights:
            self.jitter_scale = weights["jitter"]
