"""
Input loading helpers shared by the daily solvers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from schematic_types import PuzzleError

__all__ = ["InputNotFoundError", "input_path", "read_input", "skip_empty_start_lines"]

logger = logging.getLogger(__name__)

DEFAULT_INPUT_DIR = Path("inputs") / "2023"


class InputNotFoundError(PuzzleError):
    """The input file for a day does not exist."""

    pass


def skip_empty_start_lines(text: str) -> str:
    """Drop blank lines at the start of text, keeping everything after the first non-blank one."""
    lines = text.splitlines()
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    return "\n".join(lines[start:])


def input_path(day: int, input_dir: Path | str = DEFAULT_INPUT_DIR) -> Path:
    return Path(input_dir) / f"day{day}.txt"


def read_input(day: int, input_dir: Path | str = DEFAULT_INPUT_DIR) -> str:
    """
    Read the puzzle input for a day.

    Raises:
        InputNotFoundError: If inputs/<year>/day<N>.txt does not exist
    """
    path = input_path(day, input_dir)
    if not path.is_file():
        raise InputNotFoundError(f"File does not exist: {path}")
    logger.debug("read_input: %s", path)
    return skip_empty_start_lines(path.read_text(encoding="utf-8"))
