"""Entry point for running the game via ``python -m tictactoe``."""

from __future__ import annotations

import logging
import os
import sys

from .console import run

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level() -> str:
    level = os.environ.get("TICTACTOE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def main() -> None:
    """Play one console game against the computer."""

    logging.basicConfig(
        level=_log_level(), format="%(levelname)s %(name)s: %(message)s"
    )
    try:
        code = run()
    except (EOFError, KeyboardInterrupt):
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
