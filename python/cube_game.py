"""
Cube conundrum (2023 day 2).

Format:
    Game <id>: <n> <color>, <n> <color>; <n> <color>, ...

Each ';'-separated group is one draw from the bag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import prod

from schematic_types import ParseError

__all__ = ["BallSet", "Game", "parse_games", "solve"]

logger = logging.getLogger(__name__)

COLORS = ("red", "green", "blue")
BAG_LIMITS = {"red": 12, "green": 13, "blue": 14}


@dataclass
class BallSet:
    """Cubes revealed in one draw."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def fits(self, limits: dict[str, int]) -> bool:
        return all(getattr(self, color) <= limits[color] for color in COLORS)


@dataclass
class Game:
    id: int
    ball_sets: list[BallSet] = field(default_factory=list)

    def minimum_bag(self) -> BallSet:
        """Fewest cubes of each color that make every draw possible."""
        return BallSet(
            **{color: max((getattr(bs, color) for bs in self.ball_sets), default=0) for color in COLORS}
        )


def _parse_int(token: str, line: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise ParseError(f"Couldn't parse '{token}' from the line '{line}'", token=token, line=line) from e


def parse_game(line: str) -> Game:
    header, sep, body = line.partition(":")
    words = header.split()
    if not sep or len(words) != 2 or words[0] != "Game":
        raise ParseError(
            f"Invalid game line: '{line}'\n"
            f"  Expected format: 'Game <id>: <n> <color>, ...; ...'",
            line=line,
        )

    game = Game(_parse_int(words[1], line))
    for draw in body.split(";"):
        ball_set = BallSet()
        for entry in draw.split(","):
            parts = entry.split()
            if len(parts) != 2:
                raise ParseError(f"Invalid cube entry '{entry.strip()}' in line '{line}'", token=entry, line=line)
            count, color = parts
            if color not in COLORS:
                raise ParseError(
                    f"Unknown color '{color}' in line '{line}'\n"
                    f"  Valid colors: {', '.join(COLORS)}",
                    token=color,
                    line=line,
                )
            setattr(ball_set, color, _parse_int(count, line))
        game.ball_sets.append(ball_set)
    return game


def parse_games(text: str) -> list[Game]:
    return [parse_game(line) for line in text.splitlines() if line.strip()]


def solve(text: str) -> tuple[int, int]:
    games = parse_games(text)
    part1 = sum(game.id for game in games if all(bs.fits(BAG_LIMITS) for bs in game.ball_sets))
    part2 = sum(prod(getattr(game.minimum_bag(), color) for color in COLORS) for game in games)
    logger.info("cube_game: %d games", len(games))
    return part1, part2
