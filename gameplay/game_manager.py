"""
Asyncio driver for a game: deferred bot moves and auto-pass checks.

Bot turns and auto-pass evaluations run as tasks that wait for the configured
think time before acting, so the UI can show the previous move. Each task
captures the controller generation when scheduled and does nothing if a reset
or game over has happened by the time it wakes.
"""

import asyncio
import logging
import time
from typing import Optional

from gameplay.controller import GameController, to_player
from schemas.game_config import GameConfig, PlayerColor
from schemas.game_state import GamePhase, GameStateView
from schemas.move import MoveRequest, MoveResponse

logger = logging.getLogger(__name__)

# Agents that take longer than this pass their turn
BOT_MOVE_TIMEOUT_SECONDS = 5.0


class GameManager:
    """Owns one GameController and the single pending deferred task for it."""

    def __init__(self, controller: Optional[GameController] = None,
                 bot_timeout: float = BOT_MOVE_TIMEOUT_SECONDS):
        self.controller = controller or GameController()
        self.bot_timeout = bot_timeout
        self._pending: Optional[asyncio.Task] = None

    @property
    def think_time(self) -> float:
        config = self.controller.config
        return (config.think_time_ms if config else 0) / 1000.0

    @property
    def pending_task(self) -> Optional[asyncio.Task]:
        return self._pending

    def state(self) -> GameStateView:
        return self.controller.snapshot()

    # ------------------------------------------------------------------
    # Commands from the UI. Must be called from the running event loop.
    # ------------------------------------------------------------------

    def start(self, config: GameConfig) -> GameStateView:
        self._cancel_pending()
        if self.controller.phase != GamePhase.AWAITING_MENU_SETUP:
            self.controller.reset()
        self.controller.start(config)
        self.schedule_next()
        return self.state()

    def reset(self) -> None:
        self._cancel_pending()
        self.controller.reset()

    def submit(self, request: MoveRequest) -> MoveResponse:
        response = self.controller.submit(request)
        if response.success:
            self.schedule_next()
        return response

    def pass_turn(self, color: PlayerColor) -> MoveResponse:
        response = self.controller.pass_turn(to_player(color))
        if response.success:
            self.schedule_next()
        return response

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def schedule_next(self) -> Optional[asyncio.Task]:
        """Schedule whatever deferred work the controller's phase calls for."""
        controller = self.controller
        if controller.phase == GamePhase.GAME_OVER:
            self._cancel_pending()
            return None

        if controller.phase == GamePhase.EVALUATING_AUTO_PASS:
            coro = self._deferred_auto_pass(controller.generation)
        elif (controller.phase == GamePhase.AWAITING_TURN_INPUT
              and controller.is_bot(controller.current_player)):
            coro = self._deferred_bot_move(controller.begin_bot_turn())
        else:
            return None

        self._pending = asyncio.get_running_loop().create_task(coro)
        return self._pending

    async def run_until_human_input(self) -> GameStateView:
        """Wait until the game needs a human or has ended."""
        while self._pending is not None:
            task = self._pending
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
            if self._pending is task:
                self._pending = None
        return self.state()

    def _cancel_pending(self) -> None:
        task = self._pending
        self._pending = None
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()
            logger.debug("Cancelled pending deferred task")

    def _is_current(self, generation: int, phase: GamePhase) -> bool:
        controller = self.controller
        return controller.generation == generation and controller.phase == phase

    async def _deferred_auto_pass(self, generation: int) -> None:
        await asyncio.sleep(self.think_time)
        if not self._is_current(generation, GamePhase.EVALUATING_AUTO_PASS):
            return
        self.controller.evaluate_auto_pass()
        self.schedule_next()

    async def _deferred_bot_move(self, generation: int) -> None:
        await asyncio.sleep(self.think_time)
        if not self._is_current(generation, GamePhase.BOT_THINKING):
            return

        player = self.controller.current_player
        start = time.perf_counter()
        move = None
        try:
            move = await asyncio.wait_for(
                asyncio.get_running_loop().run_in_executor(None, self.controller.compute_bot_move),
                timeout=self.bot_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Bot {player.name} timed out after {self.bot_timeout}s; passing")
        except Exception:
            logger.exception(f"Bot {player.name} failed to choose a move; passing")
        logger.debug(f"Bot {player.name} move selection took {time.perf_counter() - start:.4f}s")

        # A reset during selection makes this result stale; the controller drops it
        response = self.controller.apply_bot_move(move, generation)
        if response.success:
            self.schedule_next()
