"""
Shared type definitions for the puzzle solvers.

The schematic grid uses tagged cells instead of signed integers:
Number cells carry the full value of the token they belong to (repeated
across every digit column), Symbol cells carry their character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

Pos = tuple[int, int]


# =============================================================================
# Errors
# =============================================================================


class PuzzleError(ValueError):
    """Base class for failures that abort a single puzzle run."""

    pass


class ParseError(PuzzleError):
    """A token in the input could not be parsed."""

    def __init__(self, message: str, token: str | None = None, line: str | None = None) -> None:
        super().__init__(message)
        self.token = token
        self.line = line


class ShapeError(PuzzleError):
    """The input is empty or does not fit the expected dimensions."""

    pass


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class Empty:
    """An empty cell ('.' in the schematic)."""

    pass


@dataclass(frozen=True)
class Number:
    """A cell that is part of a number token."""

    value: int


@dataclass(frozen=True)
class Symbol:
    """A cell holding a symbol character."""

    char: str


Cell = Empty | Number | Symbol


@dataclass(frozen=True)
class Element:
    """A parsed token: where it starts and what it is."""

    pos: Pos
    value: Number | Symbol
    width: int = 1  # columns spanned by the source token


@dataclass(frozen=True)
class Schematic:
    """A 2D grid of schematic cells."""

    cells: tuple[tuple[Cell, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell_at(self, pos: Pos) -> Cell:
        row, col = pos
        return self.cells[row][col]

    def neighborhood(self, row: int, col: int) -> Iterator[tuple[Pos, Cell]]:
        """Yield the cells of the 3x3 window around (row, col), clipped at the edges."""
        for r in range(max(0, row - 1), min(self.rows, row + 2)):
            for c in range(max(0, col - 1), min(self.cols, col + 2)):
                yield (r, c), self.cells[r][c]

    def symbol_cells(self) -> Iterator[tuple[Pos, Symbol]]:
        """Yield every symbol cell in row-major order."""
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if isinstance(cell, Symbol):
                    yield (r, c), cell

    def to_codes(self) -> list[list[int]]:
        """
        Return the signed-integer view of the grid.

        Numbers map to their value, symbols to the negated character code,
        empty cells to 0.
        """
        codes: list[list[int]] = []
        for row in self.cells:
            line: list[int] = []
            for cell in row:
                match cell:
                    case Number(value=value):
                        line.append(value)
                    case Symbol(char=char):
                        line.append(-ord(char))
                    case Empty():
                        line.append(0)
            codes.append(line)
        return codes


# (symbol char, symbol position) -> distinct numbers touching that symbol
AdjacencyKey = tuple[str, Pos]
AdjacencyMap = dict[AdjacencyKey, set[int]]
