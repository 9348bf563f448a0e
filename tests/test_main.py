"""Tests for the entry point, its configuration and logging."""

import io
import itertools
import logging

import pytest

from tictactoe import __main__ as entry
from tictactoe.ai import find_best_move
from tictactoe.console import new_session, play, run
from tictactoe.game import Board, PlayerMarks

ALL_COORDINATES = [f"{x} {y}" for y in range(3) for x in range(3)]


def test_end_of_input_exits_with_error(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as exc_info:
        entry.main()
    assert exc_info.value.code == 1


def test_unknown_log_level_still_starts(monkeypatch):
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "chatty")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as exc_info:
        entry.main()
    assert exc_info.value.code == 1


@pytest.mark.parametrize(
    "value, expected",
    [("debug", "DEBUG"), ("Info", "INFO"), ("chatty", "WARNING"), ("", "WARNING")],
)
def test_log_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", value)
    assert entry._log_level() == expected


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("TICTACTOE_LOG_LEVEL", raising=False)
    assert entry._log_level() == "WARNING"


def test_selector_logs_chosen_move(caplog):
    board = Board.from_string("xx.oo....")
    marks = PlayerMarks(maximizer="x", minimizer="o")
    with caplog.at_level(logging.DEBUG, logger="tictactoe.ai"):
        find_best_move(board, marks, 4)
    assert "x picks cell 2 (score 1) at ply 4" in caplog.messages


def test_console_logs_start_and_outcome(caplog):
    lines = itertools.chain(["o"], itertools.cycle(ALL_COORDINATES))
    with caplog.at_level(logging.INFO, logger="tictactoe.console"):
        run(lambda prompt: next(lines), lambda _: None)
    assert "Human plays o, computer plays x" in caplog.messages
    assert any(m.startswith("Game over after ") for m in caplog.messages)


def test_play_logs_winner(caplog):
    session = new_session("x")

    def read(prompt):
        cell = session.board.free_cells()[0]
        return f"{cell % 3} {cell // 3}"

    with caplog.at_level(logging.INFO, logger="tictactoe.console"):
        winner = play(session, read, lambda _: None)
    assert f"Game over after {session.moves_count} moves, winner: {winner}" in caplog.messages
