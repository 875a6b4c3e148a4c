"""
Turn and game-state controller.

The controller is the only owner and mutator of the committed board and
hands. Every transition is applied in full (board, hand, win check, turn
advance) before the next request is considered.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from agents.registry import select_move
from engine.board import PLAYER_ORDER, Board, Player
from engine.game import GameResult, apply_move, check_game_over, initial_hands, remaining_counts
from engine.legality import REASON_MESSAGES, explain_placement
from engine.move_generator import LegalMoveGenerator, Move
from engine.pieces import ALL_PIECE_IDS, get_piece, piece_orientation
from engine.shapes import ORIENTATION_COUNT
from schemas.game_config import BotDifficulty, GameConfig, PlayerColor
from schemas.game_state import GamePhase, GameResultView, GameStateView
from schemas.move import MoveRequest, MoveResponse, PlacedMove, Position

logger = logging.getLogger(__name__)


def to_color(player: Player) -> PlayerColor:
    return PlayerColor(player.name)


def to_player(color: PlayerColor) -> Player:
    return Player[PlayerColor(color).value]


class GameController:
    """
    Four-player Blokus state machine.

    Phases:
        AWAITING_MENU_SETUP -> start() -> AWAITING_TURN_INPUT
        AWAITING_TURN_INPUT -> place_piece()/pass_turn() -> EVALUATING_AUTO_PASS
        AWAITING_TURN_INPUT -> begin_bot_turn() -> BOT_THINKING
        BOT_THINKING -> apply_bot_move() -> EVALUATING_AUTO_PASS
        EVALUATING_AUTO_PASS -> evaluate_auto_pass() -> AWAITING_TURN_INPUT
        any -> GAME_OVER when a result is found; reset() -> AWAITING_MENU_SETUP

    ``generation`` increases on start, reset and game over. Deferred work
    captures it and is discarded when it no longer matches.
    """

    def __init__(self, move_generator: Optional[LegalMoveGenerator] = None):
        self.move_generator = move_generator or LegalMoveGenerator()
        self.phase = GamePhase.AWAITING_MENU_SETUP
        self.config: Optional[GameConfig] = None
        self.generation = 0
        self._clear_state()

    def _clear_state(self):
        self.board = Board()
        self.hands = initial_hands()
        self.current_index = 0
        self.result: Optional[GameResult] = None
        self.history: List[PlacedMove] = []
        self.rng = np.random.RandomState(self.config.seed if self.config else None)
        self._mobility: Dict[Player, bool] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_player(self) -> Player:
        return PLAYER_ORDER[self.current_index]

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def is_bot(self, player: Player) -> bool:
        if self.config is None:
            return False
        return self.config.for_player(to_color(player)).is_bot

    def difficulty_for(self, player: Player) -> Optional[BotDifficulty]:
        if self.config is None:
            return None
        return self.config.for_player(to_color(player)).bot_difficulty

    def can_move(self, player: Player) -> bool:
        """Whether player has a legal move in the committed state. Cached until the next placement."""
        if player not in self._mobility:
            self._mobility[player] = self.move_generator.has_legal_moves(
                self.board, self.hands[player], player
            )
        return self._mobility[player]

    def legal_moves(self, player: Optional[Player] = None) -> List[Move]:
        """Legal moves for a player (default: current), e.g. for move previews."""
        player = player or self.current_player
        return self.move_generator.get_legal_moves(self.board, self.hands[player], player)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, config: Optional[GameConfig] = None) -> None:
        """Begin a new game with an empty board and full hands."""
        if self.phase != GamePhase.AWAITING_MENU_SETUP:
            raise RuntimeError(f"Cannot start a game from phase {self.phase.value}; reset first")
        self.config = config or GameConfig.all_humans()
        self.generation += 1
        self._clear_state()
        self.phase = GamePhase.AWAITING_TURN_INPUT
        seats = []
        for seat in self.config.players:
            controller = seat.bot_difficulty.value if seat.is_bot else "human"
            seats.append(f"{seat.player.value}={controller}")
        logger.info(f"Game started (generation={self.generation}): {', '.join(seats)}")

    def reset(self) -> None:
        """Abandon the current game and return to setup. Pending deferred work becomes stale."""
        self.generation += 1
        self.phase = GamePhase.AWAITING_MENU_SETUP
        self._clear_state()
        logger.info(f"Game reset (generation={self.generation})")

    # ------------------------------------------------------------------
    # Human input
    # ------------------------------------------------------------------

    def submit(self, request: MoveRequest) -> MoveResponse:
        """Apply a validated MoveRequest."""
        return self.place_piece(
            to_player(request.player), request.piece_id, request.orientation,
            request.origin_x, request.origin_y,
        )

    def place_piece(self, player: Player, piece_id: int, orientation: int,
                    origin_x: int, origin_y: int) -> MoveResponse:
        """
        Place a piece for a human player.

        Rejected requests leave the game unchanged and say why.
        """
        rejection = self._check_turn(player, human=True)
        if rejection is not None:
            return rejection

        if piece_id not in ALL_PIECE_IDS:
            return self._reject(f"Unknown piece {piece_id}", player)
        if piece_id not in self.hands[player]:
            return self._reject(f"Piece {get_piece(piece_id).name} was already placed", player)
        if not 0 <= orientation < ORIENTATION_COUNT:
            return self._reject(f"Orientation must be between 0 and {ORIENTATION_COUNT - 1}", player)

        shape = piece_orientation(piece_id, orientation)
        reason = explain_placement(self.board, shape, origin_x, origin_y, player)
        if reason is not None:
            return self._reject(REASON_MESSAGES[reason], player, reason=reason)

        return self._commit(Move(piece_id, orientation, shape, origin_x, origin_y), player)

    def pass_turn(self, player: Player) -> MoveResponse:
        """Explicitly pass the turn."""
        rejection = self._check_turn(player, human=True)
        if rejection is not None:
            return rejection

        if self.can_move(player):
            logger.warning(f"Player {player.name} is passing but has legal moves available")
        logger.info(f"{player.name} passed")
        self._advance_turn()
        return MoveResponse(success=True, message="Turn passed successfully")

    # ------------------------------------------------------------------
    # Bot turns
    # ------------------------------------------------------------------

    def begin_bot_turn(self) -> int:
        """Enter BOT_THINKING for the current bot player. Returns the generation token."""
        player = self.current_player
        if self.phase != GamePhase.AWAITING_TURN_INPUT or not self.is_bot(player):
            raise RuntimeError(f"{player.name} cannot start a bot turn in phase {self.phase.value}")
        self.phase = GamePhase.BOT_THINKING
        return self.generation

    def compute_bot_move(self) -> Optional[Move]:
        """Pick the current bot's move without changing any state."""
        player = self.current_player
        return select_move(self.board, self.hands, player, self.difficulty_for(player), rng=self.rng)

    def apply_bot_move(self, move: Optional[Move], generation: int) -> MoveResponse:
        """
        Commit a bot's chosen move, or pass when it is None.

        Results computed for an older generation are dropped.
        """
        if generation != self.generation or self.phase != GamePhase.BOT_THINKING:
            logger.warning(f"Discarding stale bot result (generation={generation}, current={self.generation}, phase={self.phase.value})")
            return MoveResponse(success=False, message="Stale bot move discarded")

        player = self.current_player
        if move is None:
            logger.info(f"{player.name} (bot) has no legal move and passes")
            self._advance_turn()
            return MoveResponse(success=True, message="Bot passed")
        return self._commit(move, player)

    # ------------------------------------------------------------------
    # Auto-pass
    # ------------------------------------------------------------------

    def evaluate_auto_pass(self) -> bool:
        """
        Decide whether the current player must pass.

        Returns True when a forced pass happened. A stuck player's turn is
        skipped without consuming a piece, then the game-over check runs.
        """
        if self.phase != GamePhase.EVALUATING_AUTO_PASS:
            raise RuntimeError(f"Auto-pass evaluation is not due in phase {self.phase.value}")

        player = self.current_player
        if self.can_move(player):
            self.phase = GamePhase.AWAITING_TURN_INPUT
            return False

        logger.info(f"{player.name} has no legal moves; passing automatically")
        self._advance_turn()
        return True

    def settle(self) -> None:
        """Run auto-pass evaluation until a player must act or the game ends."""
        while self.phase == GamePhase.EVALUATING_AUTO_PASS:
            self.evaluate_auto_pass()

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> GameStateView:
        """Serializable view of the game for the presentation layer."""
        result = None
        if self.result is not None:
            result = GameResultView(winner=to_color(self.result.winner), reason=self.result.reason.value)
        return GameStateView(
            phase=self.phase,
            current_player=to_color(self.current_player),
            board=self.board.to_lists(),
            hands={to_color(p): sorted(self.hands[p]) for p in PLAYER_ORDER},
            remaining={to_color(p): count for p, count in remaining_counts(self.hands).items()},
            move_count=len(self.history),
            last_move=self.history[-1] if self.history else None,
            result=result,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_turn(self, player: Player, human: bool) -> Optional[MoveResponse]:
        if self.phase == GamePhase.GAME_OVER:
            return MoveResponse(success=False, message="Game is over", game_over=True,
                                winner=to_color(self.result.winner))
        if self.phase != GamePhase.AWAITING_TURN_INPUT:
            return MoveResponse(success=False, message=f"Not accepting input in phase {self.phase.value}")
        if player != self.current_player:
            return MoveResponse(success=False, message=f"It's not {player.name}'s turn")
        if human and self.is_bot(player):
            return MoveResponse(success=False, message=f"{player.name} is controlled by a bot")
        return None

    def _reject(self, message: str, player: Player, reason: Optional[str] = None) -> MoveResponse:
        logger.warning(f"Rejected move for {player.name}: {message}")
        return MoveResponse(success=False, message=message, reason=reason)

    def _commit(self, move: Move, player: Player) -> MoveResponse:
        self.board, self.hands = apply_move(self.board, self.hands, move, player)
        self._mobility = {}
        self.history.append(PlacedMove(
            player=to_color(player),
            piece_id=move.piece_id,
            orientation=move.orientation,
            origin_x=move.origin_x,
            origin_y=move.origin_y,
            cells=[Position(x=pos.x, y=pos.y) for pos in move.cells],
            move_number=len(self.history) + 1,
        ))
        logger.info(f"{player.name} placed {get_piece(move.piece_id).name} at ({move.origin_x}, {move.origin_y}), "
                    f"{len(self.hands[player])} pieces left")

        if self._check_game_over():
            return MoveResponse(success=True, message="Move successful", game_over=True,
                                winner=to_color(self.result.winner))
        self._advance_turn(check=False)
        return MoveResponse(success=True, message="Move successful")

    def _advance_turn(self, check: bool = True) -> None:
        self.current_index = (self.current_index + 1) % len(PLAYER_ORDER)
        self.phase = GamePhase.EVALUATING_AUTO_PASS
        if check:
            self._check_game_over()

    def _check_game_over(self) -> bool:
        result = check_game_over(self.hands, self.board, can_move=self.can_move)
        if result is None:
            return False
        self.result = result
        self.phase = GamePhase.GAME_OVER
        self.generation += 1
        logger.info(f"Game over: {result.winner.name} wins ({result.reason.value})")
        return True
