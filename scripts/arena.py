"""
Play all-bot games and report results per seat.

Example:
    python -m scripts.arena --difficulties easy medium hard hard --games 5 --seed 7
"""

import argparse
import logging
import time
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional

from engine.board import Player
from gameplay.controller import GameController
from schemas.game_config import BotDifficulty, GameConfig, PlayerColor, PlayerConfig
from schemas.game_state import GamePhase
from utils.logging_setup import setup_console_logging, setup_logging

logger = logging.getLogger(__name__)


def play_game(difficulties: List[BotDifficulty], seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Play one game with four bots, synchronously and without think delays.

    Returns:
        Match result dictionary
    """
    config = GameConfig(
        players=[
            PlayerConfig(player=color, is_bot=True, bot_difficulty=difficulty)
            for color, difficulty in zip(PlayerColor, difficulties)
        ],
        think_time_ms=0,
        seed=seed,
    )
    controller = GameController()
    controller.start(config)

    start_time = time.time()
    while controller.phase != GamePhase.GAME_OVER:
        if controller.phase == GamePhase.EVALUATING_AUTO_PASS:
            controller.evaluate_auto_pass()
            continue
        token = controller.begin_bot_turn()
        controller.apply_bot_move(controller.compute_bot_move(), token)

    result = controller.result
    return {
        "winner": result.winner.name,
        "reason": result.reason.value,
        "remaining": {player.name: count for player, count in result.remaining},
        "moves": len(controller.history),
        "duration_s": round(time.time() - start_time, 3),
    }


def main(argv: Optional[List[str]] = None) -> Counter:
    parser = argparse.ArgumentParser(description="Blokus bot arena")
    parser.add_argument("--difficulties", nargs=4, default=["easy", "medium", "hard", "hard"],
                        choices=[d.value for d in BotDifficulty],
                        help="Difficulty for BLUE, YELLOW, RED and GREEN")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Base seed; game i uses seed + i")
    parser.add_argument("--log-dir", type=str, default=None, help="Also write logs to this directory")
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    args = parser.parse_args(argv)

    level = logging.INFO if args.verbose else logging.WARNING
    if args.log_dir:
        setup_logging(Path(args.log_dir), "arena", level)
    else:
        setup_console_logging(level)

    difficulties = [BotDifficulty(d) for d in args.difficulties]
    wins: Counter = Counter()
    for index in range(args.games):
        seed = None if args.seed is None else args.seed + index
        outcome = play_game(difficulties, seed=seed)
        wins[outcome["winner"]] += 1
        print(f"Game {index + 1}: {outcome['winner']} wins ({outcome['reason']}), "
              f"{outcome['moves']} moves, remaining={outcome['remaining']}")

    print("\nWins by seat:")
    for player, difficulty in zip(Player, difficulties):
        print(f"  {player.name:<7} ({difficulty.value:<6}): {wins[player.name]}")
    return wins


if __name__ == "__main__":
    main()
