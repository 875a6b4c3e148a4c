"""
Smoke test for the bot arena script.
"""

import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import engine.move_generator as move_generator
from schemas.game_config import BotDifficulty
from scripts.arena import main, play_game
from utils.logging_setup import setup_logging


def _close_root_handlers():
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)

class TestArena(unittest.TestCase):

    def setUp(self):
        # Frontier generation keeps full games quick
        patcher = patch.object(move_generator, "USE_FRONTIER_MOVEGEN", True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_play_game(self):
        outcome = play_game([BotDifficulty.MEDIUM, BotDifficulty.HARD, BotDifficulty.EASY, BotDifficulty.HARD], seed=3)
        self.assertIn(outcome["winner"], ("BLUE", "YELLOW", "RED", "GREEN"))
        self.assertIn(outcome["reason"], ("hand_emptied", "all_players_stuck"))
        self.assertEqual(set(outcome["remaining"]), {"BLUE", "YELLOW", "RED", "GREEN"})
        # Every move consumes exactly one piece
        self.assertEqual(outcome["moves"], 84 - sum(outcome["remaining"].values()))

    def test_seeded_games_repeat(self):
        difficulties = [BotDifficulty.EASY] * 4
        self.assertEqual(play_game(difficulties, seed=11)["remaining"],
                         play_game(difficulties, seed=11)["remaining"])

    def test_main_writes_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            wins = main(["--difficulties", "hard", "medium", "medium", "easy",
                         "--games", "1", "--seed", "1", "--log-dir", tmp])
            self.assertEqual(sum(wins.values()), 1)
            self.assertTrue((Path(tmp) / "arena.log").exists())
            _close_root_handlers()


class TestLoggingSetup(unittest.TestCase):

    def test_setup_logging_replaces_handlers(self):
        with tempfile.TemporaryDirectory() as tmp:
            setup_logging(Path(tmp), "first")
            log_file = setup_logging(Path(tmp) / "nested", "second", logging.DEBUG)
            root = logging.getLogger()
            self.assertEqual(log_file, Path(tmp) / "nested" / "second.log")
            self.assertEqual(len(root.handlers), 2)
            self.assertEqual(root.level, logging.DEBUG)
            _close_root_handlers()


if __name__ == '__main__':
    unittest.main()
