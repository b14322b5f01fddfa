"""
AI player for minimax TicTacToe.
Wraps the search engine and reports what it found.
"""

from typing import Optional

from core.board_state import BoardState, Cell, Move
from core.search_engine import SearchEngine


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, engine: Optional[SearchEngine] = None, verbose: bool = True):
        """
        Initialize the AI player.

        Args:
            engine: Search engine to use (default: a new SearchEngine).
            verbose: If True, print search statistics after each move.
        """
        self.engine = engine or SearchEngine()
        self.verbose = verbose

    def choose_move(self, board: BoardState, symbol: Cell) -> Move:
        """
        Get the best move for the current position.

        Args:
            board: Current board. Must not be terminal.
            symbol: The symbol the AI plays.

        Returns:
            The Move to play.
        """
        move = self.engine.choose_move(board, symbol)

        if self.verbose:
            print(f"AI evaluated {self.engine.positions_evaluated} positions. Best move: {move}")

        return move

    def describe_hint(self, board: BoardState, symbol: Cell) -> str:
        """Describe the move the AI would play for symbol, for a human asking for help."""
        if board.is_terminal():
            return "No moves available!"

        move = self.engine.choose_move(board, symbol)
        return f"Hint: {symbol.value} should play {move.row} {move.col}"
