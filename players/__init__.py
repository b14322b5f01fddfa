"""
Players module for minimax TicTacToe.
Each player is a move source: given a board and a symbol, produce a move.
"""

from .move_source import MoveSource
from .human_player import HumanPlayer, parse_move
from .ai_player import AIPlayer
