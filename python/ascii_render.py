"""
ASCII rendering for engine schematics.

Provides two views:
1. The schematic itself, boxed, with part numbers and gears colored
2. A flat listing of each symbol occurrence and the numbers touching it
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from schematic import gears, sorted_adjacency, symbols_with_adjacent_part_numbers
from schematic_types import AdjacencyMap, Empty, Number, Pos, Schematic, Symbol

logger = logging.getLogger(__name__)


# =============================================================================
# Schematic Rendering
# =============================================================================


def part_positions(grid: Schematic, adjacency: AdjacencyMap) -> set[Pos]:
    """Positions of every number cell that lies in the window of some symbol in adjacency."""
    positions: set[Pos] = set()
    for (_, (row, col)), numbers in adjacency.items():
        for pos, cell in grid.neighborhood(row, col):
            if isinstance(cell, Number) and cell.value in numbers:
                positions.add(pos)

    # Spread to the whole token so every digit of a part number is colored
    for r, row in enumerate(grid.cells):
        for c in range(1, len(row)):
            if (r, c - 1) in positions and row[c] == row[c - 1]:
                positions.add((r, c))
        for c in range(len(row) - 2, -1, -1):
            if (r, c + 1) in positions and row[c] == row[c + 1]:
                positions.add((r, c))
    return positions


def render_schematic(
    grid: Schematic,
    source_lines: list[str] | None = None,
    highlight_pos: Pos | None = None,
) -> str:
    """
    Render a schematic as a boxed ASCII grid with colors.

    Part numbers are green, numbers touching no symbol red, gears yellow,
    other symbols cyan and empty cells blue.

    Args:
        grid: The schematic to render
        source_lines: Original text lines, used to recover individual digits;
            without them the value is zero-padded to the width of its token
        highlight_pos: Optional cell position to highlight in white

    Returns:
        Rendered ASCII string with ANSI color codes
    """
    adjacency = symbols_with_adjacent_part_numbers(grid)
    parts = part_positions(grid, adjacency)
    gear_positions = {pos for (_, pos) in gears(adjacency)}

    lines: list[str] = [chalk.white("┌" + "─" * grid.cols + "┐")]

    for r_idx, row in enumerate(grid.cells):
        line_parts = [chalk.white("│")]
        digit_idx = 0
        digits = ""

        for c_idx, cell in enumerate(row):
            colorize: Callable[[str], str]
            match cell:
                case Empty():
                    char = "."
                    colorize = chalk.blue
                    digit_idx = 0
                case Number(value=value):
                    if source_lines is not None:
                        char = source_lines[r_idx][c_idx]
                    else:
                        # A new token starts: pad the value to the width of its run
                        if c_idx == 0 or row[c_idx - 1] != cell:
                            width = next(
                                (w for w in range(1, len(row) - c_idx) if row[c_idx + w] != cell),
                                len(row) - c_idx,
                            )
                            digits = str(value).zfill(width)
                            digit_idx = 0
                        char = digits[digit_idx]
                        digit_idx += 1
                    colorize = chalk.green if (r_idx, c_idx) in parts else chalk.red
                case Symbol(char=symbol_char):
                    char = symbol_char
                    colorize = chalk.yellow if (r_idx, c_idx) in gear_positions else chalk.cyan
                    digit_idx = 0

            if highlight_pos == (r_idx, c_idx):
                line_parts.append(chalk.bgWhite.black(char))
            else:
                line_parts.append(colorize(char))

        line_parts.append(chalk.white("│"))
        lines.append("".join(line_parts))

    lines.append(chalk.white("└" + "─" * grid.cols + "┘"))
    logger.debug("render_schematic: %d part cells, %d gears", len(parts), len(gear_positions))
    return "\n".join(lines)


def render_adjacency(adjacency: AdjacencyMap) -> str:
    """List each symbol occurrence with its numbers, sorted by symbol then position."""
    out: list[str] = []
    for (char, (row, col)), numbers in sorted_adjacency(adjacency):
        out.append(f"'{char}' at [{row}, {col}]: {', '.join(str(n) for n in numbers)}")
    return "\n".join(out)
