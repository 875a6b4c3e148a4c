"""
Blokus piece catalog: the 21 free polyominoes of size 1 through 5.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Tuple

from .shapes import ORIENTATION_COUNT, Shape, normalize, orientations


class UnknownPieceError(LookupError):
    """Raised when a piece id is not in the catalog. Always a programming error."""


@dataclass(frozen=True)
class Piece:
    """Immutable piece definition."""
    id: int
    name: str
    shape: Shape  # normalized (x, y) offsets

    @property
    def size(self) -> int:
        """Number of unit squares in the piece."""
        return len(self.shape)

    def __post_init__(self):
        """Validate piece after initialization."""
        if len(set(self.shape)) != len(self.shape):
            raise ValueError(f"Piece {self.name} has duplicate cells")
        if normalize(self.shape) != self.shape:
            raise ValueError(f"Piece {self.name} shape must be normalized")


def _piece(piece_id: int, name: str, *cells: Tuple[int, int]) -> Piece:
    return Piece(piece_id, name, tuple(cells))


PIECES: Tuple[Piece, ...] = (
    # Monomino and domino
    _piece(1, "I1", (0, 0)),
    _piece(2, "I2", (0, 0), (1, 0)),

    # Trominoes
    _piece(3, "I3", (0, 0), (1, 0), (2, 0)),
    _piece(4, "L3", (0, 0), (1, 0), (1, 1)),

    # Tetrominoes
    _piece(5, "I4", (0, 0), (1, 0), (2, 0), (3, 0)),
    _piece(6, "L4", (0, 0), (1, 0), (2, 0), (2, 1)),
    _piece(7, "T4", (0, 0), (1, 0), (2, 0), (1, 1)),
    _piece(8, "O4", (0, 0), (1, 0), (0, 1), (1, 1)),
    _piece(9, "S4", (1, 0), (2, 0), (0, 1), (1, 1)),

    # Pentominoes
    _piece(10, "I5", (0, 0), (1, 0), (2, 0), (3, 0), (4, 0)),
    _piece(11, "L5", (0, 0), (1, 0), (2, 0), (3, 0), (3, 1)),
    _piece(12, "Y5", (0, 0), (1, 0), (2, 0), (3, 0), (1, 1)),
    _piece(13, "N5", (0, 0), (1, 0), (2, 0), (2, 1), (3, 1)),
    _piece(14, "P5", (0, 0), (1, 0), (0, 1), (1, 1), (0, 2)),
    _piece(15, "U5", (0, 0), (1, 0), (0, 1), (2, 0), (2, 1)),
    _piece(16, "V5", (0, 0), (0, 1), (0, 2), (1, 2), (2, 2)),
    _piece(17, "W5", (0, 0), (0, 1), (1, 1), (1, 2), (2, 2)),
    _piece(18, "Z5", (0, 0), (1, 0), (1, 1), (1, 2), (2, 2)),
    _piece(19, "F5", (1, 0), (2, 0), (0, 1), (1, 1), (1, 2)),
    _piece(20, "T5", (0, 0), (1, 0), (2, 0), (1, 1), (1, 2)),
    _piece(21, "X5", (1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),
)

ALL_PIECE_IDS: FrozenSet[int] = frozenset(piece.id for piece in PIECES)

_PIECES_BY_ID: Dict[int, Piece] = {piece.id: piece for piece in PIECES}

# Precomputed 8 orientations per piece, indexed as in shapes.orientations()
PIECE_ORIENTATIONS: Dict[int, List[Shape]] = {
    piece.id: orientations(piece.shape) for piece in PIECES
}


def get_piece(piece_id: int) -> Piece:
    """Look up a piece by id."""
    try:
        return _PIECES_BY_ID[piece_id]
    except KeyError:
        raise UnknownPieceError(f"Unknown piece id: {piece_id!r}") from None


def piece_orientation(piece_id: int, orientation: int) -> Shape:
    """Return one normalized orientation of a piece."""
    get_piece(piece_id)
    if not 0 <= orientation < ORIENTATION_COUNT:
        raise ValueError(f"Orientation must be in [0, {ORIENTATION_COUNT}), got {orientation}")
    return PIECE_ORIENTATIONS[piece_id][orientation]
