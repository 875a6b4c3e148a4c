"""
Pydantic schemas for the boundary between the game core and its UI.
"""

from .game_config import BotDifficulty, GameConfig, PlayerColor, PlayerConfig
from .game_state import GamePhase, GameResultView, GameStateView
from .move import MoveRequest, MoveResponse, PlacedMove, Position

__all__ = [
    "BotDifficulty",
    "GameConfig",
    "PlayerColor",
    "PlayerConfig",
    "GamePhase",
    "GameResultView",
    "GameStateView",
    "MoveRequest",
    "MoveResponse",
    "PlacedMove",
    "Position",
]
