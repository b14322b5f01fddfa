"""
Win checker for minimax TicTacToe.
Scans the rows, columns and diagonals for three equal marks.
"""

from typing import Any, List, Optional, Sequence, Tuple


# All possible winning lines (as list of (row, col) tuples)
# Scan order: rows, then columns, then diagonals
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


def is_line_complete(
    grid: Sequence[Sequence[Any]],
    line: List[Tuple[int, int]],
    empty: Any
) -> bool:
    """
    Check if a single line holds three equal, non-empty values.

    Args:
        grid: The board grid.
        line: List of (row, col) positions to check.
        empty: The value marking an empty cell.

    Returns:
        True if the line is owned by one player.
    """
    (r0, c0), (r1, c1), (r2, c2) = line
    first = grid[r0][c0]
    if first == empty:
        return False  # Empty cell, no winner on this line
    return first == grid[r1][c1] == grid[r2][c2]


def find_winning_line(
    grid: Sequence[Sequence[Any]],
    empty: Any
) -> Optional[List[Tuple[int, int]]]:
    """
    Find the first complete line on the grid.

    Args:
        grid: The board grid.
        empty: The value marking an empty cell.

    Returns:
        The winning line as list of (row, col), or None.
    """
    for line in WINNING_LINES:
        if is_line_complete(grid, line, empty):
            return line
    return None
