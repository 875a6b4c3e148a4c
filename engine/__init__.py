"""
Blokus rules engine package.

This package contains the core game logic for Blokus, including:
- Shape transforms and orientation enumeration
- The 21-piece catalog
- Board representation and placement legality
- Legal move generation
- Move application and game-over detection
"""

from .board import PLAYER_ORDER, Board, Player, Position
from .game import (
    GameOverReason, GameResult, IllegalMoveError,
    apply_move, check_game_over, initial_hands, remaining_counts,
)
from .legality import explain_placement, is_legal_placement
from .move_generator import (
    Hands, LegalMoveGenerator, Move,
    all_legal_moves, has_any_legal_move, has_legal_move, legal_moves,
)
from .pieces import ALL_PIECE_IDS, PIECES, Piece, UnknownPieceError, get_piece, piece_orientation
from .shapes import mirror_horizontal, mirror_vertical, normalize, orientations, rotate90

__all__ = [
    'Board', 'Player', 'Position', 'PLAYER_ORDER',
    'Piece', 'PIECES', 'ALL_PIECE_IDS', 'UnknownPieceError', 'get_piece', 'piece_orientation',
    'rotate90', 'mirror_horizontal', 'mirror_vertical', 'normalize', 'orientations',
    'is_legal_placement', 'explain_placement',
    'Move', 'Hands', 'LegalMoveGenerator',
    'all_legal_moves', 'has_any_legal_move', 'legal_moves', 'has_legal_move',
    'GameResult', 'GameOverReason', 'IllegalMoveError',
    'apply_move', 'check_game_over', 'initial_hands', 'remaining_counts',
]
