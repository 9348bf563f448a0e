"""Console tic-tac-toe against a minimax opponent that never loses."""

from .ai import MinimaxAI, evaluate, find_best_move
from .game import Board, PlayerMarks

__all__ = ["Board", "MinimaxAI", "PlayerMarks", "evaluate", "find_best_move"]
