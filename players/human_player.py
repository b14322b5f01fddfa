"""
Human player for minimax TicTacToe.
Reads moves from the console until a legal one is entered.
"""

import re
from typing import Callable, Optional

from core.config import GameConfig
from core.board_state import BoardState, Cell, Move
from core.move_validator import MoveValidator
from .ai_player import AIPlayer


def parse_move(text: str) -> Optional[Move]:
    """
    Parse a "row col" pair typed by a human.

    Args:
        text: Input such as "2 2" or "0,1".

    Returns:
        The Move, or None if the text is not two integers.
    """
    parts = [part for part in re.split(r"[\s,]+", text.strip()) if part]
    if len(parts) != 2:
        return None

    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None

    return Move(row, col)


class HumanPlayer:
    """
    A player that types moves at the console.

    The input source is injected so the driver's caller owns it
    (stdin by default, a scripted feed in tests). Typing "hint"
    prints the move the hint source would play.
    """

    def __init__(
        self,
        read_line: Optional[Callable[[str], str]] = None,
        hint_source: Optional[AIPlayer] = None
    ):
        """
        Initialize the human player.

        Args:
            read_line: Function that shows a prompt and returns one line.
                Raises EOFError when input runs out. Defaults to input().
            hint_source: AI consulted when the human types "hint".
        """
        self.read_line = read_line or input
        self.hint_source = hint_source
        self.validator = MoveValidator()

    def choose_move(self, board: BoardState, symbol: Cell) -> Move:
        """
        Prompt until the human enters a legal move.

        Args:
            board: Current board.
            symbol: The symbol the human plays.

        Returns:
            A Move targeting an empty cell.
        """
        while True:
            text = self.read_line(f"[{symbol.value}] {GameConfig.MOVE_PROMPT}")

            if self.hint_source is not None and text.strip().lower() == GameConfig.HINT_COMMAND:
                print(self.hint_source.describe_hint(board, symbol))
                continue

            move = parse_move(text)

            if move is None:
                print(GameConfig.INVALID_MOVE_MESSAGE)
                continue

            result = self.validator.validate_move(board, move.row, move.col)
            if not result.is_valid:
                print(result.error_message)
                print(GameConfig.INVALID_MOVE_MESSAGE)
                continue

            return move
