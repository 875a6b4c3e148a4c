"""
Blokus Board implementation with 20x20 grid and starting corners.
"""

import numpy as np
from typing import Dict, Iterable, List, Optional
from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    """Player enumeration, in turn order."""
    BLUE = 1
    YELLOW = 2
    RED = 3
    GREEN = 4


PLAYER_ORDER: List[Player] = list(Player)


@dataclass(frozen=True)
class Position:
    """Represents an absolute (x, y) cell on the board."""
    x: int
    y: int


class Board:
    """
    Blokus game board implementation.

    The board is a 20x20 grid indexed as grid[y, x] where:
    - 0 represents empty space
    - 1-4 represent players (BLUE, YELLOW, RED, GREEN)

    A Board handed to the legality engine or move generator is treated as a
    read-only snapshot. New states are derived with copy().
    """

    SIZE = 20

    START_CORNERS: Dict[Player, Position] = {
        Player.BLUE: Position(0, 0),
        Player.YELLOW: Position(SIZE - 1, 0),
        Player.RED: Position(SIZE - 1, SIZE - 1),
        Player.GREEN: Position(0, SIZE - 1),
    }

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        elif grid.shape != (self.SIZE, self.SIZE):
            raise ValueError(f"Board grid must be {self.SIZE}x{self.SIZE}, got {grid.shape}")
        self.grid = grid

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.SIZE and 0 <= y < self.SIZE

    def get_player_at(self, x: int, y: int) -> Optional[Player]:
        """Get the player at a position, or None if empty or off-board."""
        if not self.is_valid_position(x, y):
            return None
        value = int(self.grid[y, x])
        if value == 0:
            return None
        return Player(value)

    def is_empty(self, x: int, y: int) -> bool:
        """Check if an on-board position is empty."""
        return self.is_valid_position(x, y) and self.grid[y, x] == 0

    def start_corner(self, player: Player) -> Position:
        """Designated starting corner for a player."""
        return self.START_CORNERS[player]

    def occupies_any(self, player: Player) -> bool:
        """True once the player has at least one cell on the board."""
        return bool(np.any(self.grid == player.value))

    def cell_count(self, player: Player) -> int:
        """Number of cells covered by a player."""
        return int(np.count_nonzero(self.grid == player.value))

    def with_cells(self, cells: Iterable[Position], player: Player) -> 'Board':
        """Return a new board with the given cells set to player. Self is untouched."""
        new_board = self.copy()
        for pos in cells:
            new_board.grid[pos.y, pos.x] = player.value
        return new_board

    def to_lists(self) -> List[List[Optional[str]]]:
        """Board as nested lists of player names (None for empty), row by row."""
        return [
            [Player(int(value)).name if value else None for value in row]
            for row in self.grid
        ]

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return Board(self.grid.copy())

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        result = []
        for row in range(self.SIZE):
            row_str = ""
            for col in range(self.SIZE):
                value = self.grid[row, col]
                if value == 0:
                    row_str += "."
                else:
                    row_str += Player(int(value)).name[0]
            result.append(row_str)
        return "\n".join(result)
