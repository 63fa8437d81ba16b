"""Tests for boat_race module."""

import pytest

from boat_race import Race, parse_races, solve, ways_to_win
from schematic_types import ParseError, ShapeError

EXAMPLE = "Time:      7  15   30\nDistance:  9  40  200"


class TestWaysToWin:
    """Tests for counting winning hold times."""

    @pytest.mark.parametrize("race,expected", [(Race(7, 9), 4), (Race(15, 40), 8), (Race(30, 200), 9)])
    def test_examples(self, race: Race, expected: int) -> None:
        assert ways_to_win(race) == expected

    @pytest.mark.parametrize("time,distance", [(7, 9), (15, 40), (30, 200), (10, 0), (11, 30), (8, 15)])
    def test_matches_brute_force(self, time: int, distance: int) -> None:
        brute = sum(1 for hold in range(time + 1) if hold * (time - hold) > distance)
        assert ways_to_win(Race(time, distance)) == brute

    def test_unbeatable_record(self) -> None:
        assert ways_to_win(Race(4, 4)) == 0
        assert ways_to_win(Race(3, 10)) == 0


class TestParseRaces:
    """Tests for the Time/Distance grammar."""

    def test_multiple_races(self) -> None:
        assert parse_races(EXAMPLE) == [Race(7, 9), Race(15, 40), Race(30, 200)]

    def test_single_race(self) -> None:
        """Without kerning the columns join into one race."""
        assert parse_races(EXAMPLE, multiple_races=False) == [Race(71530, 940200)]

    def test_wrong_label(self) -> None:
        with pytest.raises(ParseError, match="Distance:"):
            parse_races("Time: 7\nDist: 9")

    def test_bad_number(self) -> None:
        with pytest.raises(ParseError, match="Couldn't parse 'x'"):
            parse_races("Time: 7 x\nDistance: 9 40")

    def test_missing_line(self) -> None:
        with pytest.raises(ShapeError):
            parse_races("Time: 7")

    def test_column_mismatch(self) -> None:
        with pytest.raises(ShapeError, match="2 times but 1 distances"):
            parse_races("Time: 7 15\nDistance: 9")


class TestSolve:
    """Tests for both parts."""

    def test_example(self) -> None:
        assert solve(EXAMPLE) == (288, 71503)
