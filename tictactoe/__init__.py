"""
TicTacToe Minimax Project
=========================
Play TicTacToe against an engine that searches the whole game tree
with minimax (optionally alpha-beta pruned) and never loses.

Handles marks and outcomes, board state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .player import CellMark, Outcome, outcome_for_mark
from .move_validator import MoveValidator, PlaceError, ValidationResult
from .win_checker import WinChecker
from .game_state import Board, GameState, Move
from .ai_player import AIPlayer, SearchResult, alphabeta, minimax
