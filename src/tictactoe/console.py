"""Line-oriented console front end: prompts, rendering and the turn loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from pydantic import BaseModel, Field, ValidationError, field_validator

from .ai import MinimaxAI
from .game import BOARD_SIDE, CELL_COUNT, MARKS, Board, Mark, PlayerMarks

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

CHOOSE_PROMPT = "Choose player x or o (x moves first): "
MOVE_PROMPT = "Enter x y: "
COORDINATES_HINT = "(0, 0) - left up (2, 2) - right down"
OCCUPIED_NOTICE = "This cell not empty"
COORDINATES_ERROR = "Coordinates must be two integers between 0 and 2"
PLAYER_ERROR = "Please choose x or o"


class PlayerChoice(BaseModel):
    """The mark the human decided to play."""

    mark: str

    @field_validator("mark")
    @classmethod
    def ensure_known_mark(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in MARKS:
            raise ValueError(PLAYER_ERROR)
        return normalized


class CellCoordinates(BaseModel):
    """Column/row pair typed by the human, both in [0, 2]."""

    x: int = Field(ge=0, le=BOARD_SIDE - 1, description="Column, 0 is left")
    y: int = Field(ge=0, le=BOARD_SIDE - 1, description="Row, 0 is top")

    @classmethod
    def parse(cls, line: str) -> "CellCoordinates":
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(COORDINATES_ERROR)
        try:
            return cls(x=parts[0], y=parts[1])
        except ValidationError as exc:
            raise ValueError(COORDINATES_ERROR) from exc

    @property
    def index(self) -> int:
        return self.x + self.y * BOARD_SIDE


@dataclass
class GameSession:
    """A running game: the board, the computer opponent and whose turn it is."""

    board: Board
    ai: MinimaxAI
    human: Mark
    ai_turn: bool
    moves_count: int = 0

    @property
    def over(self) -> bool:
        return self.board.is_terminal() or self.moves_count == CELL_COUNT


def new_session(human: Mark) -> GameSession:
    marks = PlayerMarks.for_human(human)
    # x always opens
    return GameSession(
        board=Board(),
        ai=MinimaxAI(marks=marks),
        human=human,
        ai_turn=human != "x",
    )


def choose_player(read: Reader, write: Writer) -> Mark:
    while True:
        try:
            return PlayerChoice(mark=read(CHOOSE_PROMPT)).mark
        except ValidationError:
            write(PLAYER_ERROR)


def _run_ai_turn(session: GameSession) -> None:
    if session.over:
        return
    cell = session.ai.choose(session.board)
    session.board.place(cell, session.ai.player)
    session.ai_turn = False
    session.moves_count += 1


def _apply_player_move(session: GameSession, cell: int) -> None:
    if session.over:
        raise ValueError("Game already finished")
    if not session.board.is_free(cell):
        raise ValueError(OCCUPIED_NOTICE)
    session.board.place(cell, session.human)
    session.ai_turn = True
    session.moves_count += 1


def play(session: GameSession, read: Reader = input, write: Writer = print) -> Optional[Mark]:
    """Run the turn loop until someone completes a line or the board fills.

    Returns the winning mark, or ``None`` for a draw.
    """
    write(session.board.render())
    write("")
    write(COORDINATES_HINT)

    while not session.over:
        if session.ai_turn:
            _run_ai_turn(session)
        else:
            try:
                coords = CellCoordinates.parse(read(MOVE_PROMPT))
                _apply_player_move(session, coords.index)
            except ValueError as exc:
                write(str(exc))
        write(session.board.render())
        write("")

    winner = session.board.winner()
    logger.info("Game over after %d moves, winner: %s", session.moves_count, winner)
    write(f"{winner} wins" if winner else "Draw")
    return winner


def run(read: Reader = input, write: Writer = print) -> int:
    human = choose_player(read, write)
    session = new_session(human)
    logger.info("Human plays %s, computer plays %s", human, session.ai.player)
    play(session, read, write)
    return 0
