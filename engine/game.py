"""
Game-level rules: hands, committing a move, and game-over detection.

Everything here is pure: functions take a board and hands and return new
values without touching their inputs.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from .board import PLAYER_ORDER, Board, Player
from .legality import explain_placement
from .move_generator import Hands, Move, has_any_legal_move
from .pieces import ALL_PIECE_IDS, PIECE_ORIENTATIONS, get_piece
from .shapes import canonical_key

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when apply_move is asked to commit a move that breaks the rules."""


class GameOverReason(str, Enum):
    HAND_EMPTIED = "hand_emptied"
    ALL_PLAYERS_STUCK = "all_players_stuck"


@dataclass(frozen=True)
class GameResult:
    """
    Terminal game record.

    Attributes:
        winner: The winning player
        reason: Why the game ended
        remaining: Pieces left in each player's hand when the game ended
    """
    winner: Player
    reason: GameOverReason
    remaining: Tuple[Tuple[Player, int], ...] = ()


def initial_hands() -> Dict[Player, FrozenSet[int]]:
    """Every player starts with all 21 pieces."""
    return {player: ALL_PIECE_IDS for player in PLAYER_ORDER}


def remaining_counts(hands: Hands) -> Dict[Player, int]:
    """Pieces left per player. This is the game's score: fewer is better."""
    return {player: len(hands.get(player, frozenset())) for player in PLAYER_ORDER}


def apply_move(board: Board, hands: Hands, move: Move, player: Player) -> Tuple[Board, Dict[Player, FrozenSet[int]]]:
    """
    Return (new_board, new_hands) with move committed for player.

    Inputs are not modified. Raises IllegalMoveError if the piece is not in the
    player's hand or the placement breaks a rule.
    """
    hand = hands.get(player, frozenset())
    piece = get_piece(move.piece_id)
    if move.piece_id not in hand:
        raise IllegalMoveError(f"Piece {piece.name} is not in {player.name}'s hand")
    if canonical_key(move.shape) not in {canonical_key(shape) for shape in PIECE_ORIENTATIONS[piece.id]}:
        raise IllegalMoveError(f"Shape does not match piece {piece.name}")

    reason = explain_placement(board, move.shape, move.origin_x, move.origin_y, player)
    if reason is not None:
        raise IllegalMoveError(f"Illegal placement of {piece.name} for {player.name}: {reason}")

    new_board = board.with_cells(move.cells, player)
    new_hands = dict(hands)
    new_hands[player] = hand - {move.piece_id}
    return new_board, new_hands


def check_game_over(hands: Hands, board: Board,
                    can_move: Optional[Callable[[Player], bool]] = None) -> Optional[GameResult]:
    """
    Detect a terminal state.

    - A player whose hand is empty wins (reason HAND_EMPTIED).
    - Otherwise, if no player with pieces left can place any of them, the
      player with the fewest pieces left wins, ties going to the earliest
      player in turn order (reason ALL_PLAYERS_STUCK).

    can_move lets a caller supply cached mobility answers; by default the
    move generator is queried.
    """
    counts = remaining_counts(hands)
    remaining = tuple(counts.items())

    for player in PLAYER_ORDER:
        if counts[player] == 0:
            return GameResult(player, GameOverReason.HAND_EMPTIED, remaining)

    if can_move is None:
        def can_move(player: Player) -> bool:
            return has_any_legal_move(board, hands, player)

    for player in PLAYER_ORDER:
        if can_move(player):
            return None

    # min() keeps the first of equal values, i.e. turn order
    winner = min(PLAYER_ORDER, key=lambda player: counts[player])
    logger.debug(f"All players stuck, winner={winner.name}, remaining={counts[winner]}")
    return GameResult(winner, GameOverReason.ALL_PLAYERS_STUCK, remaining)
