"""
Search engine for minimax TicTacToe.
Uses an exhaustive Minimax search to choose the best move.
"""

from typing import List, Tuple

from .config import GameConfig
from .board_state import BoardState, Cell, Move


class SearchEngine:
    """
    Picks moves with a full Minimax search of the 3x3 game tree.

    There is no pruning and no caching: the tree is small enough to
    enumerate every turn, and plain Minimax keeps the tie-break stable
    (the first best move in row-major order wins).

    The board is shared with the caller, not copied. Every speculative
    move is undone before the search returns.
    """

    def __init__(self):
        # Number of positions visited by the last search (for debugging)
        self.positions_evaluated = 0

    def choose_move(self, state: BoardState, my_symbol: Cell) -> Move:
        """
        Get the best move for my_symbol.

        Args:
            state: Current board. Must not be terminal.
            my_symbol: Cell.X or Cell.O.

        Returns:
            The Move with the highest Minimax score.

        Raises:
            ValueError: if the board is already terminal or my_symbol is EMPTY.
        """
        best_move = None
        best_score = float('-inf')

        for move, score in self.score_moves(state, my_symbol):
            if score > best_score:
                best_score = score
                best_move = move

        return best_move

    def score_moves(self, state: BoardState, my_symbol: Cell) -> List[Tuple[Move, int]]:
        """
        Score every empty cell for my_symbol.

        Args:
            state: Current board. Must not be terminal.
            my_symbol: Cell.X or Cell.O.

        Returns:
            (move, score) pairs in row-major order.
        """
        if my_symbol == Cell.EMPTY:
            raise ValueError("Cannot search for the EMPTY symbol")
        if state.is_terminal():
            raise ValueError("Cannot choose a move on a finished board")

        self.positions_evaluated = 0
        scores = []

        for move in state.empty_cells():
            # Try this move
            state.apply_move(move.row, move.col, my_symbol)
            try:
                score = self._minimax(state, my_symbol, depth=0, is_maximizing=False)
            finally:
                state.undo_move(move.row, move.col)
            scores.append((move, score))

        return scores

    def _minimax(
        self,
        state: BoardState,
        my_symbol: Cell,
        depth: int,
        is_maximizing: bool
    ) -> int:
        """
        Minimax algorithm, no pruning.

        Args:
            state: Position to evaluate.
            my_symbol: The searching player's symbol.
            depth: Plies played since the candidate move.
            is_maximizing: True if it is my_symbol's turn.

        Returns:
            The score of the position from my_symbol's side.
        """
        self.positions_evaluated += 1

        # Check terminal states
        winner = state.winner()

        if winner == my_symbol:
            return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner != Cell.EMPTY:
            return depth - GameConfig.WIN_SCORE  # Loss (prefer slower losses)
        elif state.is_full():
            return GameConfig.DRAW_SCORE

        if is_maximizing:
            to_play = my_symbol
            best_score = float('-inf')
        else:
            to_play = my_symbol.opponent()
            best_score = float('inf')

        for move in state.empty_cells():
            state.apply_move(move.row, move.col, to_play)
            try:
                score = self._minimax(state, my_symbol, depth + 1, not is_maximizing)
            finally:
                state.undo_move(move.row, move.col)

            if is_maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)

        return best_score
