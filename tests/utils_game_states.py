"""
Utility functions for generating test game states.
"""

from typing import Dict, FrozenSet, Tuple

import numpy as np

from engine.board import PLAYER_ORDER, Board, Player
from engine.game import apply_move, initial_hands
from engine.move_generator import LegalMoveGenerator


def generate_random_valid_state(num_moves: int, seed: int = 0) -> Tuple[Board, Dict[Player, FrozenSet[int]], Player]:
    """
    Generate a random but valid game state by playing random legal moves.

    Uses only the full-board scan so states come from the trusted reference
    generator. Players without a legal move are skipped.

    Args:
        num_moves: Number of moves to make
        seed: Random seed for reproducibility

    Returns:
        Tuple of (board, hands, current_player) for the final state
    """
    rng = np.random.RandomState(seed)
    generator = LegalMoveGenerator()

    board = Board()
    hands = initial_hands()
    index = 0
    moves_made = 0
    stuck_in_a_row = 0

    while moves_made < num_moves and stuck_in_a_row < len(PLAYER_ORDER):
        player = PLAYER_ORDER[index]
        moves = list(generator._iter_legal_moves_naive(board, hands[player], player))
        if moves:
            move = moves[rng.randint(0, len(moves))]
            board, hands = apply_move(board, hands, move, player)
            moves_made += 1
            stuck_in_a_row = 0
        else:
            stuck_in_a_row += 1
        index = (index + 1) % len(PLAYER_ORDER)

    return board, hands, PLAYER_ORDER[index]


def filled_board() -> Board:
    """A board with every cell owned by some player, so no placement fits."""
    grid = np.zeros((Board.SIZE, Board.SIZE), dtype=np.int8)
    for y in range(Board.SIZE):
        for x in range(Board.SIZE):
            grid[y, x] = PLAYER_ORDER[(x + y) % len(PLAYER_ORDER)].value
    return Board(grid)
