"""
The move source interface shared by human and AI players.
"""

from typing import Protocol

from core.board_state import BoardState, Cell, Move


class MoveSource(Protocol):
    """Anything that can pick a move for a symbol on a board."""

    def choose_move(self, board: BoardState, symbol: Cell) -> Move:
        ...
