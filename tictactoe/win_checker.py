"""
Win checker for the TicTacToe engine.
Checks if a player has completed a line or if the board is full.
"""

from typing import List, Optional, Tuple

import numpy as np

from .config import EngineConfig
from .game_state import Cell
from .logging_config import get_logger

logger = get_logger(__name__)

Position = Tuple[int, int]


def build_lines(board_size: int) -> List[Tuple[str, List[Position]]]:
    """
    List every winning line on a square board, in scan order.

    Rows top to bottom, then columns left to right, then the back
    diagonal (top-left to bottom-right) and the forward diagonal
    (top-right to bottom-left).

    Args:
        board_size: Side of the board.

    Returns:
        List of (label, positions) where positions are (row, col) tuples.
    """
    lines = []
    for row in range(board_size):
        lines.append((f"row {row}", [(row, col) for col in range(board_size)]))
    for col in range(board_size):
        lines.append((f"column {col}", [(row, col) for row in range(board_size)]))
    lines.append(("back diagonal", [(i, i) for i in range(board_size)]))
    lines.append(("forward diagonal", [(i, board_size - 1 - i) for i in range(board_size)]))
    return lines


class WinChecker:
    """
    Checks for win conditions on a board.

    Win condition: every cell of a row, column or diagonal
    holds the same player's mark.
    """

    def __init__(self, board_size: Optional[int] = None):
        """
        Initialize the checker.

        Args:
            board_size: Side of the board (default: EngineConfig.BOARD_SIZE).
        """
        self.board_size = EngineConfig.resolve_board_size(board_size)
        self.lines = build_lines(self.board_size)

    @staticmethod
    def check_values(values) -> int:
        """
        Check a sequence of cell values for a winner.

        Only the first value is tested for emptiness: a run of equal
        values that starts with a mark cannot contain an empty cell.

        Args:
            values: Cell values along one line.

        Returns:
            The common player id, or Cell.EMPTY if the line is not won.
        """
        first = values[0]
        if first == Cell.EMPTY:
            return Cell.EMPTY
        if np.all(np.asarray(values) == first):
            return int(first)
        return Cell.EMPTY

    def check_line(self, board: np.ndarray, line: List[Position]) -> int:
        """
        Check one line of the board.

        Args:
            board: The game board.
            line: (row, col) positions to check.

        Returns:
            The winning player id, or Cell.EMPTY.
        """
        rows, cols = zip(*line)
        return self.check_values(board[list(rows), list(cols)])

    def check_winner(self, board: np.ndarray, game_id=None) -> Optional[int]:
        """
        Check if there's a winner.

        Lines are scanned rows first, then columns, then diagonals,
        and the first completed line decides.

        Args:
            board: The game board.
            game_id: Only used to tag log records.

        Returns:
            The winning player id, or None if no line is complete.
        """
        for label, line in self.lines:
            logger.debug("%s: checking %s for win...", game_id, label)
            winner = self.check_line(board, line)
            if winner != Cell.EMPTY:
                return winner
        return None

    def get_winning_line(self, board: np.ndarray) -> Optional[Tuple[int, ...]]:
        """
        Get the first winning line, if there is one.

        Returns:
            Cell ids of the line, or None.
        """
        for _, line in self.lines:
            if self.check_line(board, line) != Cell.EMPTY:
                return tuple(
                    EngineConfig.row_col_to_cell(row, col, self.board_size)
                    for row, col in line
                )
        return None

    @staticmethod
    def is_full(board: np.ndarray) -> bool:
        """True if no empty cell is left."""
        return bool(np.all(board != Cell.EMPTY))

    def check_draw(self, board: np.ndarray) -> bool:
        """
        Check if the board is a draw: full, and no line completed.
        """
        return self.is_full(board) and self.check_winner(board) is None
