"""
Game engine for TicTacToe.

One GameEngine instance per game session. It owns the board and the
lifecycle state, and is only mutated through add_player and execute_move.
"""

import threading
from typing import Dict, List, Optional, Tuple

import numpy as np

from .config import EngineConfig
from .errors import IllegalStateError, IllegalStateToAddPlayer
from .game_state import Cell, GameState, Move, opponent_of
from .logging_config import get_logger
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = get_logger(__name__)


class GameEngine:
    """
    State machine for a single game.

    Game flow:
    1. Player 1 joins (NEW -> WAITING_FOR_PLAYER_TWO)
    2. Player 2 joins (-> PLAYER_ONE_TO_MOVE)
    3. Players alternate moves until a line is completed or the board is full

    Mutations and queries run under a per-engine lock, so each call is
    atomic with respect to other callers of the same engine.
    """

    def __init__(self, game_id, board_size: Optional[int] = None):
        """
        Create a game in the NEW state with an empty board.

        Args:
            game_id: Opaque identifier chosen by the caller.
            board_size: Side of the board (default: EngineConfig.BOARD_SIZE).
        """
        self._game_id = game_id
        self._board_size = EngineConfig.resolve_board_size(board_size)
        self._board = np.zeros((self._board_size, self._board_size), dtype=np.int8)
        self._state = GameState.NEW
        self._moves: List[Move] = []

        self._validator = MoveValidator(self._board_size)
        self._win_checker = WinChecker(self._board_size)
        self._lock = threading.RLock()

    @property
    def game_id(self):
        return self._game_id

    @property
    def board_size(self) -> int:
        return self._board_size

    def add_player(self) -> int:
        """
        Add a player to the game.

        Returns:
            The id of the player that joined (1, then 2).

        Raises:
            IllegalStateToAddPlayer: Both players have already joined.
        """
        with self._lock:
            if self._state == GameState.NEW:
                logger.info("%s: player 1 has joined", self._game_id)
                self._state = GameState.WAITING_FOR_PLAYER_TWO
                return EngineConfig.PLAYER_ONE

            if self._state == GameState.WAITING_FOR_PLAYER_TWO:
                logger.info("%s: player 2 has joined", self._game_id)
                self._state = GameState.PLAYER_ONE_TO_MOVE
                return EngineConfig.PLAYER_TWO

            logger.warning("%s: cannot add a player in state %s", self._game_id, self._state.value)
            raise IllegalStateToAddPlayer(
                f"Cannot add a player in state {self._state.value}", game_id=self._game_id
            )

    def execute_move(self, player_id, cell_id) -> None:
        """
        Execute a move for a player at a given cell.

        The outcome of the move is read afterwards with state().

        Args:
            player_id: 1 or 2.
            cell_id: Cell index, row-major (0-8 on a 3x3 board).

        Raises:
            IllegalStateToExecuteMove: The game is not in play.
            IllegalPlayerId: Missing or unknown player id.
            IllegalCellId: Missing or off-board cell id.
            IncorrectPlayerTurn: It is the other player's turn.
            CellAlreadyPlayed: The cell is already occupied.
            IllegalStateError: The turn could not be passed on.
        """
        with self._lock:
            result = self._validator.check_move(
                self._state, self._board, player_id, cell_id, game_id=self._game_id
            )
            if not result.is_valid:
                logger.warning(
                    "%s: rejected move for %s at cell %s: %s",
                    self._game_id, player_id, cell_id, result.error.code
                )
                raise result.error

            player_id = int(player_id)
            cell_id = int(cell_id)

            # provisional: the turn passes on unless the move ends the game
            if player_id not in EngineConfig.PLAYER_IDS:
                logger.error("%s: no turn order for player %s", self._game_id, player_id)
                raise IllegalStateError(
                    f"No turn order for player {player_id}", game_id=self._game_id
                )
            next_state = GameState.to_move(opponent_of(player_id))

            logger.info("%s: executing move for %s at cell %s", self._game_id, player_id, cell_id)
            row, col = EngineConfig.cell_to_row_col(cell_id, self._board_size)
            self._board[row, col] = player_id
            self._moves.append(Move(player_id, cell_id, len(self._moves)))
            self._state = next_state

            self._check_for_win()

    def _check_for_win(self) -> None:
        logger.debug("%s: checking for win...", self._game_id)

        winning_player_id = self._win_checker.check_winner(self._board, game_id=self._game_id)
        if winning_player_id is not None:
            self._set_state_on_win(winning_player_id)
            return

        if not self._check_for_stalemate():
            logger.debug("%s: game has not been won", self._game_id)

    def _set_state_on_win(self, player_id: int) -> None:
        logger.info("%s: %s has won the game", self._game_id, player_id)

        if player_id not in EngineConfig.PLAYER_IDS:
            logger.error("%s: line completed by unknown player %s", self._game_id, player_id)
            raise IllegalStateError(
                f"Line completed by unknown player {player_id}", game_id=self._game_id
            )
        self._state = GameState.wins(player_id)

    def _check_for_stalemate(self) -> bool:
        logger.debug("%s: checking for stalemate...", self._game_id)

        stalemate = self._win_checker.is_full(self._board)
        if stalemate:
            logger.info("%s: no one has won the game", self._game_id)
            self._state = GameState.STALEMATE
        return stalemate

    # ==================== QUERIES ====================

    def state(self) -> GameState:
        """Get the current state of the game."""
        with self._lock:
            return self._state

    def is_over(self) -> bool:
        """True if the game has been won or drawn."""
        with self._lock:
            return self._state.is_terminal

    def winner(self) -> Optional[int]:
        """Id of the player who won, or None."""
        with self._lock:
            return self._state.winner

    def board(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Snapshot of the board as rows of Cell values."""
        with self._lock:
            return tuple(tuple(Cell(int(value)) for value in row) for row in self._board)

    def board_array(self) -> np.ndarray:
        """Copy of the board as a numpy array of player ids (0 = empty)."""
        with self._lock:
            return self._board.copy()

    def available_cells(self) -> List[int]:
        """Cells the player to move may play; empty unless the game is in play."""
        with self._lock:
            return self._validator.get_valid_moves(self._state, self._board)

    def winning_line(self) -> Optional[Tuple[int, ...]]:
        """Cell ids of the line that won the game, or None."""
        with self._lock:
            if self._state.winner is None:
                return None
            return self._win_checker.get_winning_line(self._board)

    def moves(self) -> Tuple[Move, ...]:
        """Moves applied so far, oldest first."""
        with self._lock:
            return tuple(self._moves)

    def to_dict(self) -> Dict:
        """
        Plain-data view of the game for a transport layer.

        Returns:
            Dict with game_id, state (enum value), board (rows of ints)
            and moves.
        """
        with self._lock:
            return {
                "game_id": self._game_id,
                "state": self._state.value,
                "board": self._board.tolist(),
                "moves": [
                    {
                        "player_id": move.player_id,
                        "cell_id": move.cell_id,
                        "move_number": move.move_number,
                    }
                    for move in self._moves
                ],
            }

    def copy(self) -> "GameEngine":
        """Create an independent copy of this game."""
        with self._lock:
            new_engine = GameEngine(self._game_id, self._board_size)
            new_engine._board = self._board.copy()
            new_engine._state = self._state
            new_engine._moves = list(self._moves)
            return new_engine

    def render(self) -> str:
        """Text picture of the board, X for player 1 and O for player 2."""
        marks = {Cell.EMPTY: " ", Cell.PLAYER_ONE: "X", Cell.PLAYER_TWO: "O"}
        size = self._board_size

        with self._lock:
            rows = [[marks[Cell(int(value))] for value in row] for row in self._board]

        lines = ["┌" + "┬".join(["───"] * size) + "┐"]
        for index, row in enumerate(rows):
            lines.append("│" + "│".join(f" {mark} " for mark in row) + "│")
            if index < size - 1:
                lines.append("├" + "┼".join(["───"] * size) + "┤")
        lines.append("└" + "┴".join(["───"] * size) + "┘")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"GameEngine(game_id={self._game_id!r}, state={self._state.name})"
