"""Board state and player marks for classic 3x3 tic-tac-toe."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

Mark = str  # "x", "o", or EMPTY

EMPTY: Mark = " "
MARKS: Tuple[Mark, Mark] = ("x", "o")
BOARD_SIDE = 3
CELL_COUNT = BOARD_SIDE * BOARD_SIDE

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

ROW_SEPARATOR = "-----------"


# ---------- Players ----------


@dataclass(frozen=True)
class PlayerMarks:
    """Which mark the search maximizes (computer) and minimizes (human)."""

    maximizer: Mark
    minimizer: Mark

    def __post_init__(self) -> None:
        if self.maximizer == self.minimizer:
            raise ValueError("Players must use distinct marks")
        if EMPTY in (self.maximizer, self.minimizer):
            raise ValueError("A player cannot use the empty mark")

    @classmethod
    def for_human(cls, human: Mark) -> "PlayerMarks":
        if human not in MARKS:
            raise ValueError(f"Unknown mark {human!r}")
        computer = "o" if human == "x" else "x"
        return cls(maximizer=computer, minimizer=human)

    def swapped(self) -> "PlayerMarks":
        return PlayerMarks(maximizer=self.minimizer, minimizer=self.maximizer)


# ---------- Board ----------


@dataclass
class Board:
    # Row-major, index = row * 3 + col
    cells: List[Mark] = field(default_factory=lambda: [EMPTY] * CELL_COUNT)

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"Board needs exactly {CELL_COUNT} cells")

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """Build a board from 9 characters, ``.`` or space meaning empty."""
        return cls(cells=[EMPTY if c == "." else c for c in layout])

    # ---- queries ----

    def is_terminal(self) -> bool:
        """True when any line is fully held by a single mark."""
        return self.winner() is not None

    def winner(self) -> Optional[Mark]:
        for a, b, c in WINNING_LINES:
            v = self.cells[a]
            if v != EMPTY and v == self.cells[b] == self.cells[c]:
                return v
        return None

    def free_cells(self) -> List[int]:
        """Empty indices in ascending order."""
        return [i for i, c in enumerate(self.cells) if c == EMPTY]

    def is_free(self, idx: int) -> bool:
        return self.cells[idx] == EMPTY

    def is_full(self) -> bool:
        return all(c != EMPTY for c in self.cells)

    def moves_played(self) -> int:
        return sum(1 for c in self.cells if c != EMPTY)

    # ---- mutation ----

    def place(self, idx: int, mark: Mark) -> None:
        if self.cells[idx] != EMPTY:
            raise ValueError("Cell already occupied")
        self.cells[idx] = mark

    def clear(self, idx: int) -> None:
        self.cells[idx] = EMPTY

    @contextmanager
    def placed(self, idx: int, mark: Mark) -> Iterator["Board"]:
        """Place ``mark`` for the duration of the block, then clear it."""
        self.place(idx, mark)
        try:
            yield self
        finally:
            self.clear(idx)

    # ---- rendering ----

    def render(self) -> str:
        rows: List[str] = []
        for r in range(BOARD_SIDE):
            a, b, c = self.cells[r * BOARD_SIDE : (r + 1) * BOARD_SIDE]
            rows.append(f" {a} | {b} | {c} ")
            if r < BOARD_SIDE - 1:
                rows.append(ROW_SEPARATOR)
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()
