"""
Toy boat races (2023 day 6).

Holding the button for h ms of a t ms race travels h * (t - h) mm. The
number of winning hold times is the count of integers strictly between the
roots of h^2 - t*h + d = 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import isqrt, prod

from schematic_types import ParseError, ShapeError

__all__ = ["Race", "parse_races", "solve", "ways_to_win"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Race:
    time: int
    distance: int


def ways_to_win(race: Race) -> int:
    t, d = race.time, race.distance
    discriminant = t * t - 4 * d
    if discriminant < 0:
        return 0

    # Start from the integer root estimate, then nudge onto the exact boundary
    low = (t - isqrt(discriminant)) // 2
    while low * (t - low) <= d and low <= t:
        low += 1
    while low > 0 and (low - 1) * (t - low + 1) > d:
        low -= 1
    if low > t // 2:
        return 0
    # Winning holds are symmetric around t / 2
    return t - 2 * low + 1


def _parse_line(line: str, label: str, multiple_races: bool) -> list[int]:
    if not line.startswith(label):
        raise ParseError(f"Expected a line starting with '{label}', got '{line}'", line=line)
    body = line[len(label):]
    tokens = body.split() if multiple_races else ["".join(body.split())]
    values: list[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError as e:
            raise ParseError(f"Couldn't parse '{token}' from the line '{line}'", token=token, line=line) from e
    return values


def parse_races(text: str, multiple_races: bool = True) -> list[Race]:
    """
    Parse the Time/Distance table.

    With multiple_races=False the digits of each line are joined into one
    race (kerning ignored).
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) != 2:
        raise ShapeError(f"Expected 'Time:' and 'Distance:' lines, got {len(lines)} line(s)")
    times = _parse_line(lines[0], "Time:", multiple_races)
    distances = _parse_line(lines[1], "Distance:", multiple_races)
    if len(times) != len(distances):
        raise ShapeError(f"Got {len(times)} times but {len(distances)} distances")
    return [Race(t, d) for t, d in zip(times, distances)]


def solve(text: str) -> tuple[int, int]:
    part1 = prod(ways_to_win(race) for race in parse_races(text, multiple_races=True))
    part2 = prod(ways_to_win(race) for race in parse_races(text, multiple_races=False))
    logger.info("boat_race: part1=%d part2=%d", part1, part2)
    return part1, part2
