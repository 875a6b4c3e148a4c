"""
Turn control for a four-player game: the synchronous state machine and its
asyncio driver.
"""

from .controller import GameController, to_color, to_player
from .game_manager import GameManager

__all__ = ["GameController", "GameManager", "to_color", "to_player"]
