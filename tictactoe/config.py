"""
Engine configuration for the TicTacToe game engine.
Board dimensions, player ids, AI search depth and logging defaults.
"""

import numbers
import os
from typing import Optional, Tuple

from .errors import InvalidBoardSize


class EngineConfig:
    """
    Configuration for the game engine.

    The board is square and a line must span the whole side to win,
    so BOARD_SIZE alone sets both the grid and the win length.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Player ids handed out by add_player, in join order
    PLAYER_ONE = 1
    PLAYER_TWO = 2
    PLAYER_IDS = (PLAYER_ONE, PLAYER_TWO)

    # ==================== AI SETTINGS ====================
    # 9 plies covers a full game from an empty board
    AI_SEARCH_DEPTH = 9

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "INFO")
    LOG_FORMAT = "simple"  # "simple" or "detailed"

    @classmethod
    def resolve_board_size(cls, board_size: Optional[int] = None) -> int:
        """
        Get the board side to use.

        Args:
            board_size: Requested side, or None for BOARD_SIZE.

        Returns:
            The side as a plain int.

        Raises:
            InvalidBoardSize: board_size is not an integer of at least 1.
        """
        if board_size is None:
            return cls.BOARD_SIZE
        if (not isinstance(board_size, numbers.Integral)
                or isinstance(board_size, bool) or board_size < 1):
            raise InvalidBoardSize(f"Invalid board size {board_size!r}. Must be an integer >= 1.")
        return int(board_size)

    @classmethod
    def cell_count(cls, board_size: Optional[int] = None) -> int:
        """Number of addressable cells on the board."""
        size = cls.resolve_board_size(board_size)
        return size * size

    @classmethod
    def cell_to_row_col(cls, cell_id: int, board_size: Optional[int] = None) -> Tuple[int, int]:
        """
        Convert a cell id to a board position.

        Args:
            cell_id: Cell index, row-major (0-8 on a 3x3 board).
            board_size: Side of the board (default: BOARD_SIZE).

        Returns:
            (row, col) tuple.
        """
        size = cls.resolve_board_size(board_size)
        return cell_id // size, cell_id % size

    @classmethod
    def row_col_to_cell(cls, row: int, col: int, board_size: Optional[int] = None) -> int:
        """Convert a (row, col) position back to its cell id."""
        size = cls.resolve_board_size(board_size)
        return row * size + col
