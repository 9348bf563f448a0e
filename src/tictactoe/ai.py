"""Exhaustive minimax move selection for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import logging
import math

from .game import CELL_COUNT, Board, PlayerMarks

logger = logging.getLogger(__name__)

# (cells, ply, maximizing) -> score
Cache = Dict[Tuple[Tuple[str, ...], int, bool], int]


def evaluate(
    board: Board,
    marks: PlayerMarks,
    ply: int,
    maximizing: bool,
    cache: Optional[Cache] = None,
) -> int:
    """Score ``board`` for the computer with ``maximizing`` naming the side to move.

    A terminal board means the side that just moved completed a line, so it
    scores -1 when the maximizer is next and +1 when the minimizer is next.
    """
    if board.is_terminal():
        return -1 if maximizing else 1
    if ply >= CELL_COUNT:
        return 0

    key = (tuple(board.cells), ply, maximizing)
    if cache is not None and key in cache:
        return cache[key]

    mark = marks.maximizer if maximizing else marks.minimizer
    best: Optional[int] = None
    for move in board.free_cells():
        with board.placed(move, mark):
            score = evaluate(board, marks, ply + 1, not maximizing, cache)
        # Strict comparison: the first extremum in index order wins ties
        if best is None or (score > best if maximizing else score < best):
            best = score

    value = 0 if best is None else best
    if cache is not None:
        cache[key] = value
    return value


def find_best_move(
    board: Board,
    marks: PlayerMarks,
    ply: int,
    cache: Optional[Cache] = None,
) -> int:
    """Return the free cell with the best guaranteed outcome for the maximizer."""
    if board.is_terminal():
        raise ValueError("Game already finished")
    moves = board.free_cells()
    if not moves:
        raise RuntimeError("No valid moves available")

    best_score = -math.inf
    best_move = moves[0]
    for move in moves:
        with board.placed(move, marks.maximizer):
            score = evaluate(board, marks, ply + 1, False, cache)
        if score > best_score:
            best_score, best_move = score, move

    logger.debug(
        "%s picks cell %d (score %d) at ply %d",
        marks.maximizer,
        best_move,
        best_score,
        ply,
    )
    return best_move


@dataclass
class MinimaxAI:
    """Computer player that never loses.

    - MinimaxAI(marks=PlayerMarks.for_human("x"))
    - choose(board) -> cell_index
    """

    marks: PlayerMarks
    _cache: Cache = field(default_factory=dict, repr=False)

    @property
    def player(self) -> str:
        return self.marks.maximizer

    def choose(self, board: Board) -> int:
        return find_best_move(board, self.marks, board.moves_played(), self._cache)
