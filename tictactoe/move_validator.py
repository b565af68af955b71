"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

import numbers
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .config import EngineConfig
from .errors import (
    CellAlreadyPlayed,
    GameRuleError,
    IllegalCellId,
    IllegalPlayerId,
    IllegalStateToExecuteMove,
    IncorrectPlayerTurn,
)
from .game_state import Cell, GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameRuleError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


def _is_integral(value) -> bool:
    # bool is an int subclass but never a valid id
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order (the first failure is reported):
    1. The game must be in play
    2. The player id must be 1 or 2
    3. The cell id must be on the board
    4. It must be that player's turn
    5. The cell must be empty
    """

    def __init__(self, board_size: Optional[int] = None):
        self.board_size = EngineConfig.resolve_board_size(board_size)
        self.cell_count = EngineConfig.cell_count(self.board_size)

    def is_valid_player_id(self, player_id) -> bool:
        return _is_integral(player_id) and player_id in EngineConfig.PLAYER_IDS

    def is_valid_cell_id(self, cell_id) -> bool:
        return _is_integral(cell_id) and 0 <= cell_id < self.cell_count

    def check_move(
        self,
        state: GameState,
        board: np.ndarray,
        player_id,
        cell_id,
        game_id=None
    ) -> ValidationResult:
        """
        Validate a move without raising.

        Args:
            state: Current game state.
            board: Current board.
            player_id: Player attempting the move.
            cell_id: Target cell, row-major.
            game_id: Attached to the error for the caller's benefit.

        Returns:
            ValidationResult with is_valid and the error that would be raised.
        """
        if not state.in_play:
            return ValidationResult(
                is_valid=False,
                error=IllegalStateToExecuteMove(
                    f"Cannot execute a move in state {state.value}", game_id=game_id
                )
            )

        if not self.is_valid_player_id(player_id):
            return ValidationResult(
                is_valid=False,
                error=IllegalPlayerId(f"Invalid player id {player_id!r}", game_id=game_id)
            )

        if not self.is_valid_cell_id(cell_id):
            return ValidationResult(
                is_valid=False,
                error=IllegalCellId(
                    f"Invalid cell id {cell_id!r}. Must be 0-{self.cell_count - 1}.",
                    game_id=game_id
                )
            )

        if player_id != state.player_to_move:
            return ValidationResult(
                is_valid=False,
                error=IncorrectPlayerTurn(
                    f"Player {player_id} cannot move, it is player {state.player_to_move}'s turn",
                    game_id=game_id
                )
            )

        row, col = EngineConfig.cell_to_row_col(int(cell_id), self.board_size)
        if board[row, col] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=CellAlreadyPlayed(
                    f"Cell {cell_id} is already occupied by player {board[row, col]}",
                    game_id=game_id
                )
            )

        return ValidationResult(is_valid=True)

    def validate_move(self, state, board, player_id, cell_id, game_id=None) -> None:
        """
        Validate a move, raising the first rule it breaks.

        Raises:
            GameRuleError: One of IllegalStateToExecuteMove, IllegalPlayerId,
                IllegalCellId, IncorrectPlayerTurn, CellAlreadyPlayed.
        """
        result = self.check_move(state, board, player_id, cell_id, game_id)
        if not result.is_valid:
            raise result.error

    def get_valid_moves(self, state: GameState, board: np.ndarray) -> List[int]:
        """
        Get all cells the player to move may play.

        Returns:
            Sorted list of empty cell ids, empty if the game is not in play.
        """
        if not state.in_play:
            return []

        return [int(cell_id) for cell_id in np.flatnonzero(board.ravel() == Cell.EMPTY)]
