"""
Gear ratios (2023 day 3): symbol adjacency over an engine schematic.
Two-phase algorithm: parse (builds Schematic) -> scan (builds AdjacencyMap).
"""

from __future__ import annotations

import logging
from math import prod

from schematic_parser import parse_schematic
from schematic_types import AdjacencyKey, AdjacencyMap, Number, Schematic

__all__ = [
    "GEAR_CHAR",
    "gear_ratio_sum",
    "gears",
    "part_number_sum",
    "solve",
    "sorted_adjacency",
    "symbols_with_adjacent_part_numbers",
]

logger = logging.getLogger(__name__)

GEAR_CHAR = "*"


# =============================================================================
# Adjacency Scan
# =============================================================================


def adjacent_numbers(grid: Schematic, row: int, col: int) -> set[int]:
    """
    Collect the distinct numbers in the clipped 3x3 window around (row, col).

    A multi-digit number touching the window through several of its cells
    appears once, since all of its cells share the same value.
    """
    return {
        cell.value
        for _, cell in grid.neighborhood(row, col)
        if isinstance(cell, Number) and cell.value > 0
    }


def symbols_with_adjacent_part_numbers(grid: Schematic) -> AdjacencyMap:
    """
    Map every symbol occurrence to the set of numbers touching it.

    Keys are (symbol char, (row, col)). Symbols with no adjacent numbers are
    left out. The grid is only read, so repeated calls return equal maps.
    """
    adjacency: AdjacencyMap = {}
    for (row, col), symbol in grid.symbol_cells():
        numbers = adjacent_numbers(grid, row, col)
        if numbers:
            adjacency[(symbol.char, (row, col))] = numbers

    logger.debug("symbols_with_adjacent_part_numbers: %d symbols with parts", len(adjacency))
    return adjacency


def sorted_adjacency(adjacency: AdjacencyMap) -> list[tuple[AdjacencyKey, list[int]]]:
    """Deterministic view of an adjacency map: keys sorted, numbers sorted."""
    return [(key, sorted(adjacency[key])) for key in sorted(adjacency)]


# =============================================================================
# Answers
# =============================================================================


def part_number_sum(adjacency: AdjacencyMap) -> int:
    """Sum of the numbers adjacent to each symbol, over all symbols."""
    return sum(sum(numbers) for numbers in adjacency.values())


def gears(adjacency: AdjacencyMap) -> dict[AdjacencyKey, set[int]]:
    """Gear symbols: '*' touching exactly two distinct numbers."""
    return {
        key: numbers
        for key, numbers in adjacency.items()
        if key[0] == GEAR_CHAR and len(numbers) == 2
    }


def gear_ratio_sum(adjacency: AdjacencyMap) -> int:
    """Sum over all gears of the product of their two numbers."""
    return sum(prod(numbers) for numbers in gears(adjacency).values())


def solve(text: str) -> tuple[int, int]:
    grid = parse_schematic(text)
    adjacency = symbols_with_adjacent_part_numbers(grid)
    part1 = part_number_sum(adjacency)
    part2 = gear_ratio_sum(adjacency)
    logger.info("schematic: %dx%d, %d symbols with parts", grid.rows, grid.cols, len(adjacency))
    return part1, part2
