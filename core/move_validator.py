"""
Move validator for minimax TicTacToe.
Explains why a move would be rejected by the board.
"""

from typing import Optional
from dataclasses import dataclass

from .board_state import BoardState, Cell, in_bounds


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be on the board (0-2)
    2. Can only place on empty cells
    3. Game must not be over

    BoardState.apply_move enforces rules 1 and 2 on its own; this class
    exists to tell a human player what went wrong.
    """

    def validate_move(
        self,
        board: BoardState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place on (0-2).
            col: Column to place on (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if board.is_terminal():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Out of bounds! ({row}, {col}) must be 0-2."
            )

        # Check if cell is empty
        occupant = board.get(row, col)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)
