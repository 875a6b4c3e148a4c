"""
Placement legality under the Blokus adjacency rules.

Rules, checked in order:
1. Every block lies on the board
2. Every target cell is empty
3. A player's first piece must cover their starting corner
4. Later pieces must touch one of the player's own cells at a corner
5. Later pieces must not share an edge with any of the player's own cells

None of these functions mutate the board.
"""

from typing import Iterable, List, Optional, Sequence

import numpy as np

from .board import Board, Player, Position
from .shapes import Coordinate

EDGE_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))
CORNER_OFFSETS = ((-1, -1), (1, -1), (-1, 1), (1, 1))

OUT_OF_BOUNDS = "out_of_bounds"
OCCUPIED = "occupied"
START_CORNER = "start_corner"
NO_CORNER_CONTACT = "no_corner_contact"
EDGE_CONTACT = "edge_contact"

REASON_MESSAGES = {
    OUT_OF_BOUNDS: "Piece extends beyond the board",
    OCCUPIED: "Piece overlaps an occupied cell",
    START_CORNER: "First piece must cover your starting corner",
    NO_CORNER_CONTACT: "Piece must touch one of your pieces at a corner",
    EDGE_CONTACT: "Piece must not share an edge with your own pieces",
}


def placement_cells(shape: Iterable[Coordinate], origin_x: int, origin_y: int) -> List[Position]:
    """Absolute cells covered by a shape placed at (origin_x, origin_y)."""
    return [Position(origin_x + dx, origin_y + dy) for dx, dy in shape]


def count_corner_touches(board: Board, cells: Iterable[Position], player: Player) -> int:
    """Count (block, diagonal neighbour) pairs where the neighbour belongs to player."""
    grid = board.grid
    size = board.SIZE
    value = player.value
    touches = 0
    for pos in cells:
        for dx, dy in CORNER_OFFSETS:
            nx, ny = pos.x + dx, pos.y + dy
            if 0 <= nx < size and 0 <= ny < size and grid[ny, nx] == value:
                touches += 1
    return touches


def first_failed_rule(grid: np.ndarray, cells: Sequence[Position], player_value: int,
                      start_corner: Optional[Position]) -> Optional[str]:
    """
    Core rule check against a raw grid.

    start_corner is the player's corner when this is their first move and None
    otherwise. Callers scanning many placements compute it once per query.
    """
    size = grid.shape[0]
    if not cells:
        return OUT_OF_BOUNDS

    for pos in cells:
        if pos.x < 0 or pos.x >= size or pos.y < 0 or pos.y >= size:
            return OUT_OF_BOUNDS

    for pos in cells:
        if grid[pos.y, pos.x] != 0:
            return OCCUPIED

    if start_corner is not None:
        if start_corner not in cells:
            return START_CORNER
        return None

    has_corner_connection = False
    for pos in cells:
        for dx, dy in CORNER_OFFSETS:
            nx, ny = pos.x + dx, pos.y + dy
            if 0 <= nx < size and 0 <= ny < size and grid[ny, nx] == player_value:
                has_corner_connection = True
                break
        if has_corner_connection:
            break
    if not has_corner_connection:
        return NO_CORNER_CONTACT

    for pos in cells:
        for dx, dy in EDGE_OFFSETS:
            nx, ny = pos.x + dx, pos.y + dy
            if 0 <= nx < size and 0 <= ny < size and grid[ny, nx] == player_value:
                return EDGE_CONTACT

    return None


def first_move_corner(board: Board, player: Player) -> Optional[Position]:
    """The player's start corner if they have not placed anything yet, else None."""
    if board.occupies_any(player):
        return None
    return board.start_corner(player)


def explain_placement(board: Board, shape: Iterable[Coordinate], origin_x: int,
                      origin_y: int, player: Player) -> Optional[str]:
    """
    Return the first rule a placement breaks, or None if it is legal.

    The returned value is one of the module-level reason constants.
    """
    cells = placement_cells(shape, origin_x, origin_y)
    return first_failed_rule(board.grid, cells, player.value, first_move_corner(board, player))


def is_legal_placement(board: Board, shape: Iterable[Coordinate], origin_x: int,
                       origin_y: int, player: Player) -> bool:
    """Check whether placing shape at (origin_x, origin_y) is legal for player."""
    return explain_placement(board, shape, origin_x, origin_y, player) is None
