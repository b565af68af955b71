"""
TicTacToe game engine.
=====================
A two-player 3x3 game: player registration, alternating moves,
and win/stalemate detection behind a single GameEngine state machine.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .errors import (
    CellAlreadyPlayed,
    GameEngineError,
    GameRuleError,
    IllegalCellId,
    IllegalPlayerId,
    IllegalStateError,
    IllegalStateToAddPlayer,
    IllegalStateToExecuteMove,
    IncorrectPlayerTurn,
    InvalidBoardSize,
)
from .game_state import Cell, GameState, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .engine import GameEngine
from .ai_player import AIPlayer
