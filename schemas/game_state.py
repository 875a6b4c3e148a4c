"""
Game state schemas
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .game_config import PlayerColor
from .move import PlacedMove


class GamePhase(str, Enum):
    """Controller state machine phases."""
    AWAITING_MENU_SETUP = "awaiting_menu_setup"
    AWAITING_TURN_INPUT = "awaiting_turn_input"
    EVALUATING_AUTO_PASS = "evaluating_auto_pass"
    BOT_THINKING = "bot_thinking"
    GAME_OVER = "game_over"


class GameResultView(BaseModel):
    """Final result."""
    winner: PlayerColor
    reason: str = Field(description="'hand_emptied' or 'all_players_stuck'")


class GameStateView(BaseModel):
    """Read-only snapshot of the game for the presentation layer."""
    phase: GamePhase
    current_player: PlayerColor
    board: List[List[Optional[PlayerColor]]] = Field(description="20x20 board, row by row")
    hands: Dict[PlayerColor, List[int]] = Field(description="Piece ids still in each hand")
    remaining: Dict[PlayerColor, int] = Field(description="Pieces left per player (lower is better)")
    move_count: int
    last_move: Optional[PlacedMove] = None
    result: Optional[GameResultView] = None
