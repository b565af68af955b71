"""
Game state definitions for the TicTacToe engine.
The lifecycle states a game moves through and the values a cell can hold.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .config import EngineConfig


class Cell(IntEnum):
    """Contents of a board cell. Occupied cells hold the player id."""
    EMPTY = 0
    PLAYER_ONE = EngineConfig.PLAYER_ONE
    PLAYER_TWO = EngineConfig.PLAYER_TWO


class GameState(Enum):
    """
    Lifecycle of a single game.

    NEW -> WAITING_FOR_PLAYER_TWO -> PLAYER_ONE_TO_MOVE <-> PLAYER_TWO_TO_MOVE
    and from either "to move" state into one of the three terminal states.
    """
    NEW = "STATE_NEW"
    WAITING_FOR_PLAYER_TWO = "STATE_WAITING_FOR_PLAYER_TWO"
    PLAYER_ONE_TO_MOVE = "PLAYER_ONE_MOVE"
    PLAYER_TWO_TO_MOVE = "PLAYER_TWO_MOVE"
    PLAYER_ONE_WINS = "PLAYER_ONE_WINS"
    PLAYER_TWO_WINS = "PLAYER_TWO_WINS"
    STALEMATE = "STALEMATE"

    @property
    def is_terminal(self) -> bool:
        """True once no further moves are accepted."""
        return self in TERMINAL_STATES

    @property
    def in_play(self) -> bool:
        """True while a player is expected to move."""
        return self in (GameState.PLAYER_ONE_TO_MOVE, GameState.PLAYER_TWO_TO_MOVE)

    @property
    def player_to_move(self) -> Optional[int]:
        """Id of the player whose move is expected, if any."""
        if self == GameState.PLAYER_ONE_TO_MOVE:
            return EngineConfig.PLAYER_ONE
        if self == GameState.PLAYER_TWO_TO_MOVE:
            return EngineConfig.PLAYER_TWO
        return None

    @property
    def winner(self) -> Optional[int]:
        """Id of the winning player, if the game was won."""
        if self == GameState.PLAYER_ONE_WINS:
            return EngineConfig.PLAYER_ONE
        if self == GameState.PLAYER_TWO_WINS:
            return EngineConfig.PLAYER_TWO
        return None

    @classmethod
    def to_move(cls, player_id: int) -> "GameState":
        """The "to move" state naming the given player."""
        return _TO_MOVE[player_id]

    @classmethod
    def wins(cls, player_id: int) -> "GameState":
        """The terminal state for a win by the given player."""
        return _WINS[player_id]


TERMINAL_STATES = frozenset({
    GameState.PLAYER_ONE_WINS,
    GameState.PLAYER_TWO_WINS,
    GameState.STALEMATE,
})

_TO_MOVE = {
    EngineConfig.PLAYER_ONE: GameState.PLAYER_ONE_TO_MOVE,
    EngineConfig.PLAYER_TWO: GameState.PLAYER_TWO_TO_MOVE,
}

_WINS = {
    EngineConfig.PLAYER_ONE: GameState.PLAYER_ONE_WINS,
    EngineConfig.PLAYER_TWO: GameState.PLAYER_TWO_WINS,
}


def opponent_of(player_id: int) -> int:
    """Get the id of the other player."""
    if player_id == EngineConfig.PLAYER_ONE:
        return EngineConfig.PLAYER_TWO
    return EngineConfig.PLAYER_ONE


@dataclass(frozen=True)
class Move:
    """
    A move that was applied to the board.
    """
    player_id: int      # Who made the move (1 or 2)
    cell_id: int        # Cell index, row-major
    move_number: int    # Position in the game's move history (0-based)
