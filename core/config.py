"""
Game configuration for minimax TicTacToe.
All the constants for the board, scoring, and console prompts.
"""


class GameConfig:
    """
    Configuration class for the game.
    The board size is fixed; the rest can be tweaked.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Marks used for each cell value
    EMPTY_MARK = "-"
    PLAYER_A_MARK = "X"
    PLAYER_B_MARK = "O"

    # Mark of the player who moves first
    FIRST_PLAYER_MARK = PLAYER_A_MARK

    # ==================== SEARCH SETTINGS ====================
    # A win scores WIN_SCORE - depth, a loss depth - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== CONSOLE SETTINGS ====================
    MOVE_PROMPT = "Enter your move (row and column) - Example: 2 2 "
    INVALID_MOVE_MESSAGE = "Invalid move. Try again."

    # Typed instead of a move to ask the bot for a suggestion
    HINT_COMMAND = "hint"
