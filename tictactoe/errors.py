"""
Errors raised by the game engine.

Every failure has its own class so callers can branch on the cause.
GameRuleError covers misuse a caller can retry with corrected input;
IllegalStateError means the engine's own invariants were broken.
"""

from typing import Optional


class GameEngineError(Exception):
    """Base class for all engine failures."""

    def __init__(self, message: Optional[str] = None, game_id=None):
        self.game_id = game_id
        super().__init__(message or self.code)

    @property
    def code(self) -> str:
        """Stable name of the failure, e.g. "CellAlreadyPlayed"."""
        return type(self).__name__


class GameRuleError(GameEngineError):
    """A request that the rules of the game do not allow."""


class IllegalStateToAddPlayer(GameRuleError):
    """Both players have already joined."""


class IllegalStateToExecuteMove(GameRuleError):
    """The game is not in play (still waiting for players, or over)."""


class IllegalPlayerId(GameRuleError):
    """Player id is missing or not one of the joined players."""


class IllegalCellId(GameRuleError):
    """Cell id is missing or off the board."""


class IncorrectPlayerTurn(GameRuleError):
    """The other player is expected to move."""


class CellAlreadyPlayed(GameRuleError):
    """The target cell is already occupied."""


class IllegalStateError(GameEngineError):
    """The engine reached a state its invariants should rule out."""


class InvalidBoardSize(GameEngineError, ValueError):
    """Board size is not a positive integer."""
