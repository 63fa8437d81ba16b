"""
Schematic parsing.

Turns the puzzle text into a Schematic:
- Contiguous digits form one number token, written into every column it spans
- Any other character except '.' is a single symbol token
- '.' is an empty cell
"""

from __future__ import annotations

import logging
import string
from itertools import groupby

from puzzle_input import skip_empty_start_lines
from schematic_types import Cell, Element, Empty, Number, ParseError, Schematic, ShapeError, Symbol

__all__ = ["parse_schematic", "tokenize_line"]

logger = logging.getLogger(__name__)

EMPTY_CHAR = "."
MAX_PART_NUMBER = 2**32 - 1


def is_ascii_digit(char: str) -> bool:
    """Only 0-9 start a number; other Unicode digits are symbols."""
    return char in string.digits


def tokenize_line(line: str, row: int) -> list[Element]:
    """
    Split a schematic line into number and symbol tokens.

    Example:
        tokenize_line("*744..4", 0) ->
            [Element((0, 0), Symbol("*")),
             Element((0, 1), Number(744), width=3),
             Element((0, 6), Number(4))]

    Raises:
        ParseError: If a digit run exceeds MAX_PART_NUMBER
    """
    elements: list[Element] = []
    col = 0

    for is_digit, group in groupby(line, key=is_ascii_digit):
        chars = list(group)
        if is_digit:
            token = "".join(chars)
            # int() rejects strings longer than sys.get_int_max_str_digits()
            too_long = len(token.lstrip("0")) > len(str(MAX_PART_NUMBER))
            if too_long or int(token) > MAX_PART_NUMBER:
                raise ParseError(
                    f"Couldn't parse '{token}' from the line '{line}'\n"
                    f"  Row {row}, column {col}\n"
                    f"  Part numbers must not exceed {MAX_PART_NUMBER}",
                    token=token,
                    line=line,
                )
            elements.append(Element((row, col), Number(int(token)), width=len(token)))
            col += len(token)
        else:
            for char in chars:
                if char != EMPTY_CHAR:
                    elements.append(Element((row, col), Symbol(char)))
                col += 1

    return elements


def parse_schematic(text: str) -> Schematic:
    """
    Parse puzzle text into a Schematic.

    Dimensions are (number of lines, length of the first line). Shorter
    lines leave their trailing cells empty.

    Raises:
        ShapeError: If the input is empty or a token falls outside the grid
        ParseError: If a numeric token is malformed
    """
    lines = skip_empty_start_lines(text).splitlines()
    if not lines or not lines[0]:
        raise ShapeError("Empty schematic: expected at least one non-empty line")

    rows, cols = len(lines), len(lines[0])
    cells: list[list[Cell]] = [[Empty() for _ in range(cols)] for _ in range(rows)]

    for row_idx, line in enumerate(lines):
        for element in tokenize_line(line, row_idx):
            _, col = element.pos
            if col + element.width > cols:
                raise ShapeError(
                    f"Token at row {row_idx}, column {col} spans {element.width} column(s)\n"
                    f"  Grid width: {cols} (from line 0)\n"
                    f"  Line: \"{line}\""
                )
            for offset in range(element.width):
                cells[row_idx][col + offset] = element.value

    logger.debug("parse_schematic: %dx%d grid", rows, cols)
    return Schematic(tuple(tuple(row) for row in cells))
