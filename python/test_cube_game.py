"""Tests for cube_game module."""

from textwrap import dedent

import pytest

from cube_game import BallSet, parse_game, parse_games, solve
from puzzle_input import skip_empty_start_lines
from schematic_types import ParseError


def program() -> str:
    return skip_empty_start_lines(dedent("""
        Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
        Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
        Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
        Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
        Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
    """))


class TestParseGame:
    """Tests for the game grammar."""

    def test_draws(self) -> None:
        game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        assert game.id == 1
        assert game.ball_sets == [
            BallSet(red=4, blue=3),
            BallSet(red=1, green=2, blue=6),
            BallSet(green=2),
        ]

    def test_all_games(self) -> None:
        games = parse_games(program())
        assert [g.id for g in games] == [1, 2, 3, 4, 5]

    def test_minimum_bag(self) -> None:
        game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        assert game.minimum_bag() == BallSet(red=4, green=2, blue=6)

    def test_unknown_color(self) -> None:
        with pytest.raises(ParseError, match="Unknown color 'purple'"):
            parse_game("Game 1: 3 purple")

    def test_bad_count(self) -> None:
        with pytest.raises(ParseError, match="Couldn't parse 'x'"):
            parse_game("Game 1: x red")

    def test_missing_header(self) -> None:
        with pytest.raises(ParseError, match="Invalid game line"):
            parse_game("3 red, 4 blue")


class TestSolve:
    """Tests for both parts."""

    def test_example(self) -> None:
        assert solve(program()) == (8, 2286)
