"""
Core module for the minimax TicTacToe game.
Holds the board, its rules, and the search engine.
"""

from .config import GameConfig
from .board_state import BoardState, Cell, Move
from .move_validator import MoveValidator, ValidationResult
from .search_engine import SearchEngine

__version__ = "1.0.0"
