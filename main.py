"""
Main orchestration script for minimax TicTacToe.

This script ties together:
- Core (board state, rules, search engine)
- Players (human at the console, Minimax AI)

Run this script to play TicTacToe against the computer!
"""

import argparse
from typing import List, Optional, Tuple

from core.config import GameConfig
from core.board_state import BoardState, Cell, Move
from players import AIPlayer, HumanPlayer, MoveSource


class TicTacToeGame:
    """
    Main controller for a game of TicTacToe.

    Game flow:
    1. X picks a move (human or AI)
    2. The move is applied to the board; rejected moves are asked again
    3. The board is printed
    4. O takes its turn
    5. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        player_x: MoveSource,
        player_o: MoveSource,
        show_board: bool = True
    ):
        """
        Initialize the game.

        Args:
            player_x: Move source playing X.
            player_o: Move source playing O.
            show_board: If True, print the board after every move.
        """
        self.board = BoardState()
        self.players = {Cell.X: player_x, Cell.O: player_o}
        self.current_symbol = Cell(GameConfig.FIRST_PLAYER_MARK)
        self.show_board = show_board

        # Move history
        self.moves: List[Move] = []

    def play(self) -> Cell:
        """
        Run the game to the end.

        Returns:
            The winning symbol, or Cell.EMPTY for a draw.
        """
        while not self.board.is_terminal():
            self._take_turn()

            if self.show_board:
                self.board.print_board()

            self.current_symbol = self.current_symbol.opponent()

        return self._show_game_result()

    def _take_turn(self):
        """Ask the current player for moves until one is accepted."""
        player = self.players[self.current_symbol]

        while True:
            move = player.choose_move(self.board, self.current_symbol)
            if self.board.apply_move(move.row, move.col, self.current_symbol):
                break
            print(GameConfig.INVALID_MOVE_MESSAGE)

        self.moves.append(move)
        print(f">>> {self.current_symbol.value} plays {move}")

    def _show_game_result(self) -> Cell:
        """Print and return the final result."""
        winner = self.board.winner()

        if winner != Cell.EMPTY:
            print(f"Game Over! Winner: {winner.value}")
        else:
            print("Game Over! It's a draw.")

        return winner


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(description="Minimax TicTacToe")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--two-player",
        action="store_true",
        help="Human vs human on the same console"
    )
    mode.add_argument(
        "--bot-first",
        action="store_true",
        help="Let the bot play first (as X)"
    )
    mode.add_argument(
        "--watch",
        action="store_true",
        help="Watch the bot play against itself"
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide the bot's search statistics"
    )

    return parser.parse_args(argv)


def build_players(args: argparse.Namespace) -> Tuple[MoveSource, MoveSource]:
    """
    Pick the move sources for X and O.

    Args:
        args: Parsed command line.

    Returns:
        (player_x, player_o)
    """
    def bot():
        return AIPlayer(verbose=not args.quiet)

    def human():
        # Hints are computed silently, whatever --quiet says
        return HumanPlayer(hint_source=AIPlayer(verbose=False))

    if args.two_player:
        return human(), human()
    if args.watch:
        return bot(), bot()
    if args.bot_first:
        return bot(), human()
    return human(), bot()


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    player_x, player_o = build_players(args)

    game = TicTacToeGame(player_x, player_o)
    game.board.print_board()

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
