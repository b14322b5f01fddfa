"""
Board state for minimax TicTacToe.
Tracks which cells are occupied and answers the game-over questions.
"""

from enum import Enum
from typing import Optional, List, Sequence
from dataclasses import dataclass, field

from .config import GameConfig
from .win_checker import find_winning_line


class Cell(Enum):
    """The three values a board cell can hold."""
    EMPTY = GameConfig.EMPTY_MARK
    X = GameConfig.PLAYER_A_MARK
    O = GameConfig.PLAYER_B_MARK

    def opponent(self) -> "Cell":
        """Get the other player's symbol."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.O if self == Cell.X else Cell.X

    @classmethod
    def from_mark(cls, mark: str) -> "Cell":
        """Parse a single mark ('X', 'O' or '-'), case-insensitive."""
        return cls(mark.upper())


@dataclass(frozen=True)
class Move:
    """
    A move on the board.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def in_bounds(row: int, col: int) -> bool:
    """Check that (row, col) lies on the board."""
    size = GameConfig.BOARD_SIZE
    return 0 <= row < size and 0 <= col < size


@dataclass
class BoardState:
    """
    The 3x3 TicTacToe board.

    Cells are stored row-major. The board is mutated in place by
    apply_move; the search engine also mutates it speculatively and
    restores it with undo_move before returning.
    """

    # The 3x3 grid - Cell.EMPTY means nobody has played there
    grid: List[List[Cell]] = field(
        default_factory=lambda: [
            [Cell.EMPTY for _ in range(GameConfig.BOARD_SIZE)]
            for _ in range(GameConfig.BOARD_SIZE)
        ]
    )

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "BoardState":
        """
        Build a board from row strings.

        Args:
            rows: Three strings of three marks each, e.g. ["XX-", "OO-", "---"].
                Spaces are ignored.

        Returns:
            A new BoardState.
        """
        grid = []
        for row in rows:
            marks = row.replace(" ", "")
            if len(marks) != GameConfig.BOARD_SIZE:
                raise ValueError(f"Row {row!r} must have {GameConfig.BOARD_SIZE} cells")
            grid.append([Cell.from_mark(mark) for mark in marks])

        if len(grid) != GameConfig.BOARD_SIZE:
            raise ValueError(f"Board must have {GameConfig.BOARD_SIZE} rows, got {len(grid)}")

        return cls(grid=grid)

    def get(self, row: int, col: int) -> Cell:
        """Get the value of a single cell."""
        return self.grid[row][col]

    def apply_move(self, row: int, col: int, symbol: Cell) -> bool:
        """
        Place a symbol on the board.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            symbol: Cell.X or Cell.O.

        Returns:
            True if the symbol was placed, False if the position is off the
            board or already occupied. The board is untouched on False.
        """
        if symbol == Cell.EMPTY:
            return False

        if not in_bounds(row, col):
            return False

        if self.grid[row][col] != Cell.EMPTY:
            return False

        self.grid[row][col] = symbol
        return True

    def undo_move(self, row: int, col: int):
        """Clear a cell set by a speculative move."""
        self.grid[row][col] = Cell.EMPTY

    def is_full(self) -> bool:
        """Check whether every cell is occupied."""
        return all(cell != Cell.EMPTY for row in self.grid for cell in row)

    def winning_line(self) -> Optional[List[Move]]:
        """
        Get the completed line, if there is one.

        Returns:
            The three cells of the line as Moves, or None.
        """
        line = find_winning_line(self.grid, Cell.EMPTY)
        if line is None:
            return None
        return [Move(row, col) for row, col in line]

    def winner(self) -> Cell:
        """
        Get the symbol owning a complete row, column or diagonal.

        Returns:
            Cell.X or Cell.O, or Cell.EMPTY if nobody has won.
        """
        line = find_winning_line(self.grid, Cell.EMPTY)
        if line is None:
            return Cell.EMPTY
        row, col = line[0]
        return self.grid[row][col]

    def is_terminal(self) -> bool:
        """Check whether the game is over (win or full board)."""
        return self.winner() != Cell.EMPTY or self.is_full()

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells in row-major order.

        Returns:
            List of Moves.
        """
        empty = []
        for row in range(GameConfig.BOARD_SIZE):
            for col in range(GameConfig.BOARD_SIZE):
                if self.grid[row][col] == Cell.EMPTY:
                    empty.append(Move(row, col))
        return empty

    def copy(self) -> "BoardState":
        """Create an independent copy of the board."""
        return BoardState(grid=[[cell for cell in row] for row in self.grid])

    def render(self) -> str:
        """Render the board as text, one row per line."""
        lines = ["  0 1 2"]
        for row in range(GameConfig.BOARD_SIZE):
            marks = " ".join(cell.value for cell in self.grid[row])
            lines.append(f"{row} {marks}")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.render())
        print()
