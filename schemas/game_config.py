"""
Pydantic schemas for game configuration.
"""

import os
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def _default_think_time_ms() -> int:
    return int(os.getenv("BLOKUS_THINK_TIME_MS", "500"))


class PlayerColor(str, Enum):
    """Player identities, in turn order."""
    BLUE = "BLUE"
    YELLOW = "YELLOW"
    RED = "RED"
    GREEN = "GREEN"


class BotDifficulty(str, Enum):
    """Bot move-selection policies."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PlayerConfig(BaseModel):
    """Configuration for one seat."""
    player: PlayerColor
    name: Optional[str] = None
    is_bot: bool = False
    bot_difficulty: Optional[BotDifficulty] = None

    @model_validator(mode="after")
    def _bot_needs_difficulty(self) -> "PlayerConfig":
        if self.is_bot and self.bot_difficulty is None:
            raise ValueError(f"Bot player {self.player.value} needs a bot_difficulty")
        if not self.is_bot and self.bot_difficulty is not None:
            raise ValueError(f"Human player {self.player.value} cannot have a bot_difficulty")
        return self

    @property
    def display_name(self) -> str:
        return self.name or f"{self.player.value.title()} Player"


class GameConfig(BaseModel):
    """Configuration for a four-player game."""
    players: List[PlayerConfig] = Field(..., min_length=4, max_length=4)
    think_time_ms: int = Field(default_factory=_default_think_time_ms, ge=0, le=10000,
                               description="Delay before a bot move or auto-pass is applied")
    seed: Optional[int] = Field(default=None, description="Seed for bot randomness")

    class Config:
        json_schema_extra = {
            "example": {
                "players": [
                    {"player": "BLUE", "name": "Alice"},
                    {"player": "YELLOW", "is_bot": True, "bot_difficulty": "easy"},
                    {"player": "RED", "is_bot": True, "bot_difficulty": "medium"},
                    {"player": "GREEN", "is_bot": True, "bot_difficulty": "hard"}
                ],
                "think_time_ms": 500,
                "seed": 42
            }
        }

    @field_validator("players")
    @classmethod
    def _one_seat_per_color(cls, players: List[PlayerConfig]) -> List[PlayerConfig]:
        colors = [config.player for config in players]
        if len(set(colors)) != len(colors):
            raise ValueError("Each player color may appear only once")
        # Seats are stored in turn order regardless of input order
        order = list(PlayerColor)
        return sorted(players, key=lambda config: order.index(config.player))

    @classmethod
    def all_humans(cls, **kwargs) -> "GameConfig":
        return cls(players=[PlayerConfig(player=color) for color in PlayerColor], **kwargs)

    def for_player(self, color: PlayerColor) -> PlayerConfig:
        for config in self.players:
            if config.player == color:
                return config
        raise KeyError(color)
