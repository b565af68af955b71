"""Tests for MoveValidator."""

import numpy as np
import pytest

from tictactoe.errors import (
    CellAlreadyPlayed,
    IllegalCellId,
    IllegalPlayerId,
    IllegalStateToExecuteMove,
    IncorrectPlayerTurn,
)
from tictactoe.game_state import GameState
from tictactoe.move_validator import MoveValidator


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.fixture
def empty_board():
    return np.zeros((3, 3), dtype=np.int8)


def test_valid_move(validator, empty_board):
    result = validator.check_move(GameState.PLAYER_ONE_TO_MOVE, empty_board, 1, 4)

    assert result.is_valid
    assert result.error is None
    assert result.error_message is None


@pytest.mark.parametrize("state,player_id,cell_id,error_type", [
    (GameState.NEW, 1, 0, IllegalStateToExecuteMove),
    (GameState.WAITING_FOR_PLAYER_TWO, 1, 0, IllegalStateToExecuteMove),
    (GameState.STALEMATE, 1, 0, IllegalStateToExecuteMove),
    (GameState.PLAYER_ONE_TO_MOVE, 5, 0, IllegalPlayerId),
    (GameState.PLAYER_ONE_TO_MOVE, 1, 9, IllegalCellId),
    (GameState.PLAYER_ONE_TO_MOVE, 2, 0, IncorrectPlayerTurn),
    (GameState.PLAYER_TWO_TO_MOVE, 1, 0, IncorrectPlayerTurn),
])
def test_invalid_moves(validator, empty_board, state, player_id, cell_id, error_type):
    result = validator.check_move(state, empty_board, player_id, cell_id)

    assert not result.is_valid
    assert isinstance(result.error, error_type)
    assert result.error_message


def test_occupied_cell(validator, empty_board):
    empty_board[2, 0] = 1

    result = validator.check_move(GameState.PLAYER_TWO_TO_MOVE, empty_board, 2, 6)

    assert isinstance(result.error, CellAlreadyPlayed)
    assert "Cell 6" in result.error_message


def test_validate_move_raises(validator, empty_board):
    with pytest.raises(IncorrectPlayerTurn) as exc_info:
        validator.validate_move(GameState.PLAYER_ONE_TO_MOVE, empty_board, 2, 0, game_id="g")

    assert exc_info.value.game_id == "g"


def test_validate_move_passes(validator, empty_board):
    assert validator.validate_move(GameState.PLAYER_TWO_TO_MOVE, empty_board, 2, 0) is None


def test_id_checks(validator):
    assert validator.is_valid_player_id(1)
    assert validator.is_valid_player_id(np.int8(2))
    assert not validator.is_valid_player_id(False)
    assert validator.is_valid_cell_id(0)
    assert validator.is_valid_cell_id(8)
    assert not validator.is_valid_cell_id(9)
    assert not validator.is_valid_cell_id(None)


def test_get_valid_moves(validator, empty_board):
    empty_board[0, 0] = 1
    empty_board[1, 1] = 2

    moves = validator.get_valid_moves(GameState.PLAYER_ONE_TO_MOVE, empty_board)

    assert moves == [1, 2, 3, 5, 6, 7, 8]


def test_no_valid_moves_when_not_in_play(validator, empty_board):
    assert validator.get_valid_moves(GameState.PLAYER_ONE_WINS, empty_board) == []
