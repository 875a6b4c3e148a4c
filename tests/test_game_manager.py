"""
Tests for the asyncio game driver: deferred bot moves, auto-pass scheduling,
timeouts and cancellation on reset.
"""

import asyncio
import time
import unittest
from unittest.mock import patch

from engine.board import Board, Player
from engine.game import GameOverReason
from engine.pieces import ALL_PIECE_IDS
from gameplay.game_manager import GameManager
from schemas.game_config import BotDifficulty, GameConfig, PlayerColor, PlayerConfig
from schemas.game_state import GamePhase
from schemas.move import MoveRequest


def make_config(human_colors=(PlayerColor.BLUE,), think_time_ms=0, seed=5) -> GameConfig:
    players = []
    for color in PlayerColor:
        if color in human_colors:
            players.append(PlayerConfig(player=color))
        else:
            players.append(PlayerConfig(player=color, is_bot=True, bot_difficulty=BotDifficulty.MEDIUM))
    return GameConfig(players=players, think_time_ms=think_time_ms, seed=seed)


class TestGameManager(unittest.TestCase):
    """Test deferred turn handling."""

    def test_bots_play_until_human_turn(self):
        async def run_test():
            manager = GameManager()
            view = manager.start(make_config())
            self.assertEqual(view.phase, GamePhase.AWAITING_TURN_INPUT)
            self.assertEqual(view.current_player, PlayerColor.BLUE)
            self.assertIsNone(manager.pending_task)

            response = manager.submit(MoveRequest(player=PlayerColor.BLUE, piece_id=1,
                                                  orientation=0, origin_x=0, origin_y=0))
            self.assertTrue(response.success)
            self.assertIsNotNone(manager.pending_task)

            view = await manager.run_until_human_input()
            self.assertEqual(view.phase, GamePhase.AWAITING_TURN_INPUT)
            self.assertEqual(view.current_player, PlayerColor.BLUE)
            self.assertEqual(view.move_count, 4)
            for color in (PlayerColor.YELLOW, PlayerColor.RED, PlayerColor.GREEN):
                self.assertEqual(view.remaining[color], 20)

        asyncio.run(run_test())

    def test_all_bot_game_runs_to_completion(self):
        async def run_test():
            manager = GameManager()
            config = make_config(human_colors=())
            manager.controller.start(config)
            for player in Player:
                manager.controller.hands[player] = frozenset({1, 2, 3})
            manager.schedule_next()

            view = await manager.run_until_human_input()
            self.assertEqual(view.phase, GamePhase.GAME_OVER)
            self.assertEqual(view.result.winner, PlayerColor.BLUE)
            self.assertEqual(view.result.reason, GameOverReason.HAND_EMPTIED.value)
            self.assertIsNone(manager.pending_task)

        asyncio.run(run_test())

    def test_pass_schedules_auto_pass_evaluation(self):
        async def run_test():
            manager = GameManager()
            manager.start(GameConfig.all_humans(think_time_ms=0))
            response = manager.pass_turn(PlayerColor.BLUE)
            self.assertTrue(response.success)
            self.assertEqual(manager.controller.phase, GamePhase.EVALUATING_AUTO_PASS)

            view = await manager.run_until_human_input()
            self.assertEqual(view.phase, GamePhase.AWAITING_TURN_INPUT)
            self.assertEqual(view.current_player, PlayerColor.YELLOW)

        asyncio.run(run_test())

    def test_rejected_move_schedules_nothing(self):
        async def run_test():
            manager = GameManager()
            manager.start(make_config())
            response = manager.submit(MoveRequest(player=PlayerColor.BLUE, piece_id=1,
                                                  orientation=0, origin_x=5, origin_y=5))
            self.assertFalse(response.success)
            self.assertIsNone(manager.pending_task)

        asyncio.run(run_test())

    def test_reset_cancels_pending_task(self):
        async def run_test():
            manager = GameManager()
            manager.start(make_config(think_time_ms=10000))
            manager.submit(MoveRequest(player=PlayerColor.BLUE, piece_id=1,
                                       orientation=0, origin_x=0, origin_y=0))
            task = manager.pending_task
            self.assertIsNotNone(task)

            manager.reset()
            with self.assertRaises(asyncio.CancelledError):
                await task
            self.assertTrue(task.cancelled())
            self.assertIsNone(manager.pending_task)
            self.assertEqual(manager.controller.phase, GamePhase.AWAITING_MENU_SETUP)
            self.assertEqual(manager.controller.board, Board())

        asyncio.run(run_test())

    def test_stale_deferred_work_does_nothing(self):
        async def run_test():
            manager = GameManager()
            manager.start(make_config())
            manager.submit(MoveRequest(player=PlayerColor.BLUE, piece_id=1,
                                       orientation=0, origin_x=0, origin_y=0))
            stale_generation = manager.controller.generation

            manager.reset()
            manager.start(make_config())
            await manager._deferred_auto_pass(stale_generation)
            await manager._deferred_bot_move(stale_generation)

            self.assertEqual(manager.controller.board, Board())
            self.assertEqual(manager.controller.current_player, Player.BLUE)
            self.assertEqual(manager.controller.phase, GamePhase.AWAITING_TURN_INPUT)

        asyncio.run(run_test())

    def test_bot_exception_passes_turn(self):
        async def run_test():
            manager = GameManager()
            manager.start(make_config())
            manager.submit(MoveRequest(player=PlayerColor.BLUE, piece_id=1,
                                       orientation=0, origin_x=0, origin_y=0))
            # Let the auto-pass check for YELLOW run so its bot turn is scheduled
            manager.controller.settle()
            manager._cancel_pending()
            generation = manager.controller.begin_bot_turn()

            with patch.object(manager.controller, "compute_bot_move", side_effect=RuntimeError("Agent error")):
                await manager._deferred_bot_move(generation)
            manager._cancel_pending()

            self.assertEqual(manager.controller.hands[Player.YELLOW], ALL_PIECE_IDS)
            self.assertTrue(manager.controller.board.is_empty(19, 0))
            self.assertEqual(manager.controller.current_player, Player.RED)

        asyncio.run(run_test())

    def test_bot_timeout_passes_turn(self):
        async def run_test():
            manager = GameManager(bot_timeout=0.05)
            manager.start(make_config())
            manager.submit(MoveRequest(player=PlayerColor.BLUE, piece_id=1,
                                       orientation=0, origin_x=0, origin_y=0))
            manager.controller.settle()
            manager._cancel_pending()
            generation = manager.controller.begin_bot_turn()

            def slow_move():
                time.sleep(0.3)
                return None

            with patch.object(manager.controller, "compute_bot_move", side_effect=slow_move):
                await manager._deferred_bot_move(generation)
            manager._cancel_pending()

            self.assertEqual(manager.controller.hands[Player.YELLOW], ALL_PIECE_IDS)
            self.assertEqual(manager.controller.current_player, Player.RED)

        asyncio.run(run_test())

    def test_think_time(self):
        manager = GameManager()
        self.assertEqual(manager.think_time, 0)
        manager.controller.start(make_config(think_time_ms=250))
        self.assertAlmostEqual(manager.think_time, 0.25)


if __name__ == '__main__':
    unittest.main()
