"""
Bot agent protocol for gameplay turns.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from engine.board import Board, Player
from engine.move_generator import Move


class BotAgentProtocol(Protocol):
    """
    Minimal gameplay contract for bot agents.
    """

    def select_action(
        self,
        board: Board,
        player: Player,
        legal_moves: List[Move],
    ) -> Optional[Move]:
        ...

    def get_action_info(self) -> Dict[str, Any]:
        ...
