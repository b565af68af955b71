"""Tests for the minimax AIPlayer."""

from tictactoe import AIPlayer, GameEngine, GameState


def started_game():
    engine = GameEngine("ai-game")
    engine.add_player()
    engine.add_player()
    return engine


def test_opens_in_the_center():
    engine = started_game()
    assert AIPlayer(1).get_best_move(engine) == 4


def test_blocks_a_winning_move():
    # player 1 threatens row 0 at cell 2
    engine = started_game()
    for player_id, cell_id in [(1, 0), (2, 4), (1, 1)]:
        engine.execute_move(player_id, cell_id)

    assert AIPlayer(2).get_best_move(engine) == 2


def test_takes_a_winning_move():
    # player 2 can win row 1 at cell 5; player 1 also threatens cell 2
    engine = started_game()
    for player_id, cell_id in [(1, 0), (2, 3), (1, 8), (2, 4), (1, 1)]:
        engine.execute_move(player_id, cell_id)

    assert AIPlayer(2).get_best_move(engine) == 5


def test_waits_for_its_turn():
    engine = started_game()
    assert AIPlayer(2).get_best_move(engine) is None


def test_no_move_before_game_starts():
    assert AIPlayer(1).get_best_move(GameEngine("new")) is None


def test_does_not_touch_the_engine():
    engine = started_game()
    engine.execute_move(1, 0)
    before = engine.to_dict()

    AIPlayer(2).get_best_move(engine)

    assert engine.to_dict() == before


def test_self_play_ends_in_stalemate():
    engine = started_game()
    players = {1: AIPlayer(1), 2: AIPlayer(2)}

    while not engine.is_over():
        player_id = engine.state().player_to_move
        engine.execute_move(player_id, players[player_id].get_best_move(engine))

    assert engine.state() == GameState.STALEMATE


def test_move_suggestion():
    engine = started_game()

    assert AIPlayer(1).get_move_suggestion(engine) == "Player 1: play cell 4 at position (1, 1)"
    assert AIPlayer(2).get_move_suggestion(engine) == "No moves available!"


class MovesAfterCopy(GameEngine):
    """Engine that plays one more move right after handing out a copy."""

    def __init__(self, game_id, late_move):
        super().__init__(game_id)
        self.late_move = late_move

    def copy(self):
        snapshot = super().copy()
        if self.late_move is not None:
            self.execute_move(*self.late_move)
            self.late_move = None
        return snapshot


def test_reads_a_single_snapshot():
    # the live game moves on while the AI thinks; the answer still fits the copy
    engine = MovesAfterCopy("racing-game", late_move=(2, 8))
    engine.add_player()
    engine.add_player()
    for player_id, cell_id in [(1, 0), (2, 4), (1, 1)]:
        engine.execute_move(player_id, cell_id)

    assert AIPlayer(2).get_best_move(engine) == 2
    assert engine.state() == GameState.PLAYER_ONE_TO_MOVE
