"""
Trebuchet calibration (2023 day 1).

Each line hides a two-digit calibration value: its first digit followed by
its last digit. Part 2 also counts digits spelled out as words, which may
overlap ("eightwo" starts with 8 and ends with 2).
"""

from __future__ import annotations

import logging

from schematic_types import ParseError

__all__ = ["find_indices", "parse_digits", "solve"]

logger = logging.getLogger(__name__)

DIGIT_WORDS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def find_indices(string: str, pattern: str) -> list[int]:
    """All start indices of pattern in string, overlapping matches included."""
    indices: list[int] = []
    start = string.find(pattern)
    while start != -1:
        indices.append(start)
        start = string.find(pattern, start + 1)
    return indices


def parse_digits(line: str) -> int:
    """
    Calibration value of a line with spelled-out digits allowed.

    Raises:
        ParseError: If the line contains no digit at all
    """
    found: list[tuple[int, int]] = []  # (index, digit)
    for word, digit in DIGIT_WORDS.items():
        for pattern in (word, str(digit)):
            found.extend((index, digit) for index in find_indices(line, pattern))

    if not found:
        raise ParseError(f"No digits found in line '{line}'", line=line)

    first = min(found)[1]
    last = max(found)[1]
    return first * 10 + last


def plain_value(line: str) -> int | None:
    digits = [c for c in line if c.isdecimal()]
    if not digits:
        return None
    return int(digits[0] + digits[-1])


def solve(text: str) -> tuple[int, int]:
    lines = [line for line in text.splitlines() if line.strip()]

    part1 = 0
    for line in lines:
        value = plain_value(line)
        if value is not None:
            part1 += value

    part2 = sum(parse_digits(line) for line in lines)
    logger.info("calibration: %d lines", len(lines))
    return part1, part2
