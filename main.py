"""
Console driver for the TicTacToe game engine.

Plays a game in the terminal, either human vs AI or AI vs AI.
Cells are numbered 0-8, row by row:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

import argparse
import uuid
from typing import Dict, Optional

from tictactoe import AIPlayer, EngineConfig, GameEngine, GameRuleError
from tictactoe.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class TicTacToeConsole:
    """
    Runs one game against the engine from the console.

    Game flow:
    1. Both players join the engine
    2. The player to move is asked for a cell (human) or suggests one (AI)
    3. Repeat until someone wins or it's a stalemate
    """

    def __init__(self, game_id=None, human_player: Optional[int] = EngineConfig.PLAYER_ONE):
        """
        Initialize the console game.

        Args:
            game_id: Identifier for the game (default: random uuid).
            human_player: Which player the human controls, or None for self-play.
        """
        self.engine = GameEngine(game_id or str(uuid.uuid4()))
        self.human_player = human_player

        self.ai_players: Dict[int, AIPlayer] = {
            player_id: AIPlayer(player_id)
            for player_id in EngineConfig.PLAYER_IDS
            if player_id != human_player
        }

    def start(self):
        """Register both players and play until the game is over."""
        for _ in EngineConfig.PLAYER_IDS:
            self.engine.add_player()

        print(self.engine.render())

        while not self.engine.is_over():
            player_id = self.engine.state().player_to_move
            if player_id == self.human_player:
                self._human_move(player_id)
            else:
                self._ai_move(player_id)
            print(self.engine.render())

        self._show_game_result()

    def _human_move(self, player_id: int):
        """Ask the human for a cell until the engine accepts it."""
        while True:
            raw = input(f"\nPlayer {player_id}, choose a cell (0-8): ").strip()
            try:
                cell_id = int(raw)
            except ValueError:
                print(f"'{raw}' is not a cell number.")
                continue

            try:
                self.engine.execute_move(player_id, cell_id)
                return
            except GameRuleError as e:
                print(f"Move rejected ({e.code}): {e}")

    def _ai_move(self, player_id: int):
        """Play the AI's best move."""
        print(f"\n>>> Player {player_id} is thinking...")

        cell_id = self.ai_players[player_id].get_best_move(self.engine)
        print(f">>> Player {player_id} plays cell {cell_id}")
        self.engine.execute_move(player_id, cell_id)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        winner = self.engine.winner()
        if winner is None:
            print("\nIt's a stalemate!")
        elif winner == self.human_player:
            print(f"\nCongratulations! You won with cells {self.engine.winning_line()}")
        else:
            print(f"\nPlayer {winner} wins with cells {self.engine.winning_line()}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe game engine console")
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Let the AI play both sides"
    )
    parser.add_argument(
        "--human-player",
        type=int,
        choices=list(EngineConfig.PLAYER_IDS),
        default=EngineConfig.PLAYER_ONE,
        help="Which player the human controls (1 moves first)"
    )
    parser.add_argument(
        "--game-id",
        default=None,
        help="Identifier used to tag log records"
    )
    parser.add_argument(
        "--log-level",
        default=EngineConfig.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    parser.add_argument(
        "--log-format",
        choices=["simple", "detailed"],
        default=EngineConfig.LOG_FORMAT,
        help="Log record format"
    )

    args = parser.parse_args()

    setup_logging(level=args.log_level, format_style=args.log_format)

    console = TicTacToeConsole(
        game_id=args.game_id,
        human_player=None if args.self_play else args.human_player
    )

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    except EOFError:
        print("\n\nInput closed, game abandoned.")
    finally:
        logger.info("%s: console closed in state %s",
                    console.engine.game_id, console.engine.state().value)


if __name__ == "__main__":
    main()
