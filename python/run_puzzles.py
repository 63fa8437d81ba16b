#!/usr/bin/env python3
"""
Run the daily puzzle solvers and report their answers.

Usage:
    python run_puzzles.py            # every registered day
    python run_puzzles.py 3 --render # day 3 plus the colored schematic
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

import almanac
import boat_race
import calibration
import cube_game
import schematic
import scratchcards
from ascii_render import render_adjacency, render_schematic
from puzzle_input import DEFAULT_INPUT_DIR, read_input
from schematic_parser import parse_schematic
from schematic_types import PuzzleError

logger = logging.getLogger(__name__)

INPUT_DIR_ENV = "AOC_INPUT_DIR"

Solver = Callable[[str], tuple[int, int]]

SOLVERS: dict[int, tuple[str, Solver]] = {
    1: ("Trebuchet calibration", calibration.solve),
    2: ("Cube conundrum", cube_game.solve),
    3: ("Gear ratios", schematic.solve),
    4: ("Scratchcards", scratchcards.solve),
    5: ("Seed almanac", almanac.solve),
    6: ("Boat races", boat_race.solve),
}


@dataclass(frozen=True)
class DayResult:
    """Outcome of one day: answers on success, the typed failure otherwise."""

    day: int
    answers: tuple[int, int] | None = None
    error: PuzzleError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_day(day: int, input_dir: Path | str = DEFAULT_INPUT_DIR) -> DayResult:
    """
    Load and solve one day.

    Puzzle failures (missing input, parse and shape errors) are returned in
    the result so the caller can report which day failed. Anything else
    propagates.
    """
    if day not in SOLVERS:
        raise KeyError(f"No solver registered for day {day}; available: {sorted(SOLVERS)}")
    _, solver = SOLVERS[day]
    try:
        answers = solver(read_input(day, input_dir))
    except PuzzleError as e:
        logger.warning("day %d failed: %s", day, e)
        return DayResult(day, error=e)
    return DayResult(day, answers=answers)


def results_table(results: list[DayResult]) -> Table:
    table = Table(title="2023")
    table.add_column("Day", justify="right", style="bold")
    table.add_column("Puzzle")
    table.add_column("Part 1", justify="right")
    table.add_column("Part 2", justify="right")

    for result in results:
        name, _ = SOLVERS[result.day]
        if result.answers is not None:
            part1, part2 = result.answers
            table.add_row(str(result.day), name, str(part1), str(part2))
        else:
            # First line only; parse errors carry multi-line details
            lines = str(result.error).splitlines() if result.error else []
            reason = (lines or ["unknown error"])[0]
            table.add_row(str(result.day), name, Text("FAILED", style="bold red"), Text(reason, style="red"))
    return table


def render_day3(input_dir: Path | str, console: Console) -> None:
    try:
        text = read_input(3, input_dir)
        grid = parse_schematic(text)
    except PuzzleError as e:
        console.print(Panel(Text(str(e), style="red"), title="Gear ratios - Error", border_style="red"))
        return

    body = Text.from_ansi(render_schematic(grid, source_lines=text.splitlines()))
    body.append("\n\n")
    body.append(render_adjacency(schematic.symbols_with_adjacent_part_numbers(grid)))
    console.print(Panel(body, title="Gear ratios", border_style="green"))


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("days", nargs="*", type=int, help="days to run (default: all)")
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path(os.environ.get(INPUT_DIR_ENV, DEFAULT_INPUT_DIR)),
        help=f"directory holding day<N>.txt files (default: ${INPUT_DIR_ENV} or {DEFAULT_INPUT_DIR})",
    )
    parser.add_argument("--render", action="store_true", help="print the colored day 3 schematic")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    unknown = [day for day in args.days if day not in SOLVERS]
    if unknown:
        parser.error(f"unknown day(s): {', '.join(map(str, unknown))}; available: {sorted(SOLVERS)}")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    console = Console()
    days = args.days or sorted(SOLVERS)
    results = [run_day(day, args.input_dir) for day in days]
    console.print(results_table(results))

    if args.render:
        render_day3(args.input_dir, console)

    return 0 if all(result.ok for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
