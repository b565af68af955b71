"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm to choose the best move.
"""

from typing import List, Optional

import numpy as np

from .config import EngineConfig
from .engine import GameEngine
from .game_state import Cell, opponent_of
from .logging_config import get_logger
from .win_checker import WinChecker

logger = get_logger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    It only reads the engine; the caller decides whether to play the move.
    """

    def __init__(self, player_id: int = EngineConfig.PLAYER_TWO, depth: Optional[int] = None):
        """
        Initialize the AI player.

        Args:
            player_id: Which player the AI controls (default: 2)
            depth: Search depth in plies (default: EngineConfig.AI_SEARCH_DEPTH)
        """
        self.player_id = player_id
        self.depth = depth if depth is not None else EngineConfig.AI_SEARCH_DEPTH

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, engine: GameEngine) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            engine: The game to look at.

        Returns:
            Cell id of the best move, or None if it's not our turn.
        """
        self.moves_evaluated = 0

        # one locked copy, so every read below sees the same position
        snapshot = engine.copy()

        if snapshot.state().player_to_move != self.player_id:
            logger.warning("%s: not player %s's turn", snapshot.game_id, self.player_id)
            return None

        valid_moves = snapshot.available_cells()
        if not valid_moves:
            return None

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        board = snapshot.board_array()
        checker = WinChecker(snapshot.board_size)

        # Special case: open in the center
        center = EngineConfig.cell_count(snapshot.board_size) // 2
        if not snapshot.moves() and snapshot.board_size % 2 == 1 and center in valid_moves:
            return center

        best_score = float('-inf')
        best_move = valid_moves[0]

        for cell_id in valid_moves:
            new_board = self._play(board, cell_id, self.player_id)
            score = self._minimax(new_board, checker, self.depth - 1, is_maximizing=False)

            if score > best_score:
                best_score = score
                best_move = cell_id

        logger.debug(
            "%s: AI evaluated %d positions. Best move: %d (score: %s)",
            snapshot.game_id, self.moves_evaluated, best_move, best_score
        )
        return best_move

    @staticmethod
    def _play(board: np.ndarray, cell_id: int, player_id: int) -> np.ndarray:
        new_board = board.copy()
        new_board.flat[cell_id] = player_id
        return new_board

    @staticmethod
    def _empty_cells(board: np.ndarray) -> List[int]:
        return [int(cell_id) for cell_id in np.flatnonzero(board.ravel() == Cell.EMPTY)]

    def _minimax(
        self,
        board: np.ndarray,
        checker: WinChecker,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate.
            checker: Win checker sized for the board.
            depth: How many more plies to search.
            is_maximizing: True if it's the AI's move.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        winner = checker.check_winner(board)
        if winner == self.player_id:
            return 10 + depth  # Win (prefer faster wins)
        elif winner is not None:
            return -10 - depth  # Loss (prefer slower losses)

        valid_moves = self._empty_cells(board)
        if not valid_moves or depth <= 0:
            return 0  # Draw, or out of depth

        if is_maximizing:
            max_score = float('-inf')
            for cell_id in valid_moves:
                new_board = self._play(board, cell_id, self.player_id)
                score = self._minimax(new_board, checker, depth - 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            opponent = opponent_of(self.player_id)
            min_score = float('inf')
            for cell_id in valid_moves:
                new_board = self._play(board, cell_id, opponent)
                score = self._minimax(new_board, checker, depth - 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def get_move_suggestion(self, engine: GameEngine) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            engine: The game to look at.

        Returns:
            A string describing the suggested move.
        """
        cell_id = self.get_best_move(engine)

        if cell_id is None:
            return "No moves available!"

        row, col = EngineConfig.cell_to_row_col(cell_id, engine.board_size)
        return f"Player {self.player_id}: play cell {cell_id} at position ({row}, {col})"
