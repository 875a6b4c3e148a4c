"""
Pydantic schemas for game moves.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .game_config import PlayerColor


class MoveRequest(BaseModel):
    """Request to place a piece."""
    player: PlayerColor
    piece_id: int = Field(..., ge=1, le=21, description="ID of the piece to place")
    orientation: int = Field(..., ge=0, le=7, description="Orientation index of the piece")
    origin_x: int = Field(..., ge=0, le=19, description="Board column of the shape origin")
    origin_y: int = Field(..., ge=0, le=19, description="Board row of the shape origin")

    class Config:
        json_schema_extra = {
            "example": {
                "player": "BLUE",
                "piece_id": 1,
                "orientation": 0,
                "origin_x": 0,
                "origin_y": 0
            }
        }


class MoveResponse(BaseModel):
    """Response after a placement or pass."""
    success: bool
    message: str
    reason: Optional[str] = Field(default=None, description="Rule that rejected the move, if any")
    game_over: bool = False
    winner: Optional[PlayerColor] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "message": "Piece must not share an edge with your own pieces",
                "reason": "edge_contact",
                "game_over": False,
                "winner": None
            }
        }


class Position(BaseModel):
    """Cell on the board."""
    x: int = Field(..., ge=0, le=19)
    y: int = Field(..., ge=0, le=19)


class PlacedMove(BaseModel):
    """A move that was committed."""
    player: PlayerColor
    piece_id: int
    orientation: int
    origin_x: int
    origin_y: int
    cells: List[Position] = Field(description="All cells covered by this move")
    move_number: int = Field(description="Move number in the game")
