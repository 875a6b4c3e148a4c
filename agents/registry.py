"""
Agent registry and the bot move-selection entry point.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from agents.gameplay_protocol import BotAgentProtocol
from agents.greedy_size_agent import GreedySizeAgent
from agents.heuristic_agent import HeuristicAgent
from agents.random_agent import RandomAgent
from engine.board import Board, Player
from engine.move_generator import Hands, Move, all_legal_moves
from schemas.game_config import BotDifficulty

logger = logging.getLogger(__name__)

_AGENTS_BY_DIFFICULTY = {
    BotDifficulty.EASY: RandomAgent,
    BotDifficulty.MEDIUM: GreedySizeAgent,
    BotDifficulty.HARD: HeuristicAgent,
}


def build_bot_agent(
    difficulty: Union[BotDifficulty, str],
    seed: Optional[int] = None,
    rng: Optional[np.random.RandomState] = None,
) -> BotAgentProtocol:
    """Build the agent that plays a difficulty level."""
    try:
        agent_cls = _AGENTS_BY_DIFFICULTY[BotDifficulty(difficulty)]
    except ValueError:
        raise ValueError(f"Unknown bot difficulty: {difficulty}") from None
    return agent_cls(seed=seed, rng=rng)


def select_move(
    board: Board,
    hands: Hands,
    player: Player,
    difficulty: Union[BotDifficulty, str],
    rng: Optional[np.random.RandomState] = None,
) -> Optional[Move]:
    """
    Choose a move for a bot player.

    Returns None when the player has no legal move; the caller treats that as
    a forced pass.
    """
    agent = build_bot_agent(difficulty, rng=rng)
    moves = all_legal_moves(board, hands, player)
    if not moves:
        logger.debug(f"Bot {player.name} has no legal moves")
        return None
    move = agent.select_action(board, player, moves)
    logger.debug(f"Bot {player.name} ({BotDifficulty(difficulty).value}) chose {move} from {len(moves)} moves")
    return move


bot_select_move = select_move
