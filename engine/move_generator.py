"""
Legal move generator for Blokus game.
"""

import os
import time
import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .board import Board, Player, Position
from .legality import CORNER_OFFSETS, EDGE_OFFSETS, first_failed_rule, first_move_corner, placement_cells
from .pieces import PIECE_ORIENTATIONS, get_piece
from .shapes import Shape, bounding_size, canonical_key

logger = logging.getLogger(__name__)

Hands = Mapping[Player, FrozenSet[int]]

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("BLOKUS_MOVEGEN_DEBUG", ""))

# Feature flag to toggle between full-board and frontier-based move generation
USE_FRONTIER_MOVEGEN = bool(os.getenv("BLOKUS_USE_FRONTIER_MOVEGEN", ""))

# Skip orientations that repeat an earlier one for symmetric pieces
DEDUP_ORIENTATIONS = os.getenv("BLOKUS_DEDUP_ORIENTATIONS", "1").strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class Move:
    """A placement: one orientation of a piece at a board origin."""
    piece_id: int
    orientation: int  # Index into PIECE_ORIENTATIONS[piece_id]
    shape: Shape
    origin_x: int
    origin_y: int

    @property
    def size(self) -> int:
        return len(self.shape)

    @property
    def cells(self) -> List[Position]:
        """Absolute board cells this move covers."""
        return placement_cells(self.shape, self.origin_x, self.origin_y)

    @property
    def sort_key(self) -> Tuple[int, int, int, int]:
        return self.piece_id, self.orientation, self.origin_y, self.origin_x

    def __str__(self):
        return f"Move(piece_id={self.piece_id}, orientation={self.orientation}, origin=({self.origin_x}, {self.origin_y}))"


class LegalMoveGenerator:
    """Generates all legal moves for a given board, hand and player."""

    def __init__(self, dedup_orientations: Optional[bool] = None):
        if dedup_orientations is None:
            dedup_orientations = DEDUP_ORIENTATIONS
        self.dedup_orientations = dedup_orientations
        self.piece_orientations_cache: Dict[int, List[Tuple[int, Shape]]] = {}
        self._cache_piece_orientations()

    def _cache_piece_orientations(self):
        """Cache the orientation indices each piece is searched with."""
        for piece_id, shapes in PIECE_ORIENTATIONS.items():
            entries = []
            seen = set()
            for index, shape in enumerate(shapes):
                if self.dedup_orientations:
                    key = canonical_key(shape)
                    if key in seen:
                        continue
                    seen.add(key)
                entries.append((index, shape))
            self.piece_orientations_cache[piece_id] = entries

    def _orientations_for(self, piece_id: int) -> List[Tuple[int, Shape]]:
        # Validates the id against the catalog
        get_piece(piece_id)
        return self.piece_orientations_cache[piece_id]

    def get_legal_moves(self, board: Board, hand: Iterable[int], player: Player) -> List[Move]:
        """
        Get all legal moves for a player's hand on the current board.

        Moves are ordered by (piece id, orientation index, y, x).
        """
        start = time.perf_counter()
        moves = sorted(self._iter_legal_moves(board, hand, player), key=lambda move: move.sort_key)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen[{self._mode}]: player={player.name}, legal_moves={len(moves)}, elapsed_ms={elapsed_ms:.2f}")
        logger.debug(f"Legal move generation [{self._mode}]: {len(moves)} moves in {elapsed_ms:.2f}ms for player={player.name}")
        return moves

    def has_legal_moves(self, board: Board, hand: Iterable[int], player: Player) -> bool:
        """True as soon as one legal move is found. An empty hand has none."""
        for _ in self._iter_legal_moves(board, hand, player):
            return True
        return False

    @property
    def _mode(self) -> str:
        return "frontier" if USE_FRONTIER_MOVEGEN else "naive"

    def _iter_legal_moves(self, board: Board, hand: Iterable[int], player: Player) -> Iterator[Move]:
        if USE_FRONTIER_MOVEGEN:
            return self._iter_legal_moves_frontier(board, hand, player)
        return self._iter_legal_moves_naive(board, hand, player)

    def _iter_legal_moves_naive(self, board: Board, hand: Iterable[int], player: Player) -> Iterator[Move]:
        """
        Full scan: every orientation of every piece at every origin whose
        bounding box fits on the board.
        """
        grid = board.grid
        size = board.SIZE
        player_value = player.value
        corner = first_move_corner(board, player)

        for piece_id in sorted(hand):
            for orientation, shape in self._orientations_for(piece_id):
                width, height = bounding_size(shape)
                for origin_y in range(size - height + 1):
                    for origin_x in range(size - width + 1):
                        cells = placement_cells(shape, origin_x, origin_y)
                        if first_failed_rule(grid, cells, player_value, corner) is None:
                            yield Move(piece_id, orientation, shape, origin_x, origin_y)

    def _iter_legal_moves_frontier(self, board: Board, hand: Iterable[int], player: Player) -> Iterator[Move]:
        """
        Frontier scan: only origins that put some block of the piece on a
        frontier cell. Every legal placement has such a block, so the result
        matches the full scan.
        """
        grid = board.grid
        player_value = player.value
        corner = first_move_corner(board, player)
        frontier = self.get_frontier(board, player)

        for piece_id in sorted(hand):
            for orientation, shape in self._orientations_for(piece_id):
                tried: Set[Tuple[int, int]] = set()
                for target in frontier:
                    for dx, dy in shape:
                        origin = (target.x - dx, target.y - dy)
                        if origin in tried:
                            continue
                        tried.add(origin)
                        cells = placement_cells(shape, origin[0], origin[1])
                        if first_failed_rule(grid, cells, player_value, corner) is None:
                            yield Move(piece_id, orientation, shape, origin[0], origin[1])

    def get_frontier(self, board: Board, player: Player) -> List[Position]:
        """
        Empty cells a new piece of this player could occupy while touching
        their own cells at a corner: diagonally adjacent to an own cell and
        not edge-adjacent to one. Before the first move this is the start
        corner alone (when empty).
        """
        corner = first_move_corner(board, player)
        if corner is not None:
            return [corner] if board.is_empty(corner.x, corner.y) else []

        grid = board.grid
        size = board.SIZE
        value = player.value
        frontier = []
        for y in range(size):
            for x in range(size):
                if grid[y, x] != 0:
                    continue
                touches_corner = False
                for dx, dy in CORNER_OFFSETS:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < size and 0 <= ny < size and grid[ny, nx] == value:
                        touches_corner = True
                        break
                if not touches_corner:
                    continue
                touches_edge = False
                for dx, dy in EDGE_OFFSETS:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < size and 0 <= ny < size and grid[ny, nx] == value:
                        touches_edge = True
                        break
                if not touches_edge:
                    frontier.append(Position(x, y))
        return frontier


_default_generator: Optional[LegalMoveGenerator] = None


def default_generator() -> LegalMoveGenerator:
    """Shared generator instance for the module-level helpers."""
    global _default_generator
    if _default_generator is None:
        _default_generator = LegalMoveGenerator()
    return _default_generator


def all_legal_moves(board: Board, hands: Hands, player: Player) -> List[Move]:
    """Every legal move for player, ordered by (piece id, orientation, y, x)."""
    return default_generator().get_legal_moves(board, hands.get(player, frozenset()), player)


def has_any_legal_move(board: Board, hands: Hands, player: Player) -> bool:
    """Whether player can place any piece from their hand."""
    return default_generator().has_legal_moves(board, hands.get(player, frozenset()), player)


# Names used by the presentation layer
legal_moves = all_legal_moves
has_legal_move = has_any_legal_move
