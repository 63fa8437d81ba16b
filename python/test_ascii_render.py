"""Tests for schematic rendering."""

import re

from ascii_render import part_positions, render_adjacency, render_schematic
from schematic import symbols_with_adjacent_part_numbers
from schematic_parser import parse_schematic

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

EXAMPLE = "467..114..\n...*......\n..35..633."


def strip_ansi(s: str) -> str:
    return ANSI_RE.sub("", s)


class TestPartPositions:
    """Tests for finding the cells of part numbers."""

    def test_whole_token_marked(self) -> None:
        """Every digit of a part number is marked, even far from the symbol."""
        grid = parse_schematic(EXAMPLE)
        positions = part_positions(grid, symbols_with_adjacent_part_numbers(grid))
        assert {(0, 0), (0, 1), (0, 2)} <= positions
        assert {(2, 2), (2, 3)} <= positions

    def test_unattached_number_not_marked(self) -> None:
        grid = parse_schematic(EXAMPLE)
        positions = part_positions(grid, symbols_with_adjacent_part_numbers(grid))
        assert (0, 5) not in positions
        assert (2, 7) not in positions


class TestRenderSchematic:
    """Tests for the boxed schematic view."""

    def test_plain_text_matches_source(self) -> None:
        """With colors stripped, the body reproduces the input."""
        grid = parse_schematic(EXAMPLE)
        lines = strip_ansi(render_schematic(grid)).split("\n")
        assert lines[0] == "┌" + "─" * 10 + "┐"
        assert lines[1:-1] == ["│" + line + "│" for line in EXAMPLE.split("\n")]
        assert lines[-1] == "└" + "─" * 10 + "┘"

    def test_source_lines_used_for_digits(self) -> None:
        """Leading zeros survive when the source lines are supplied."""
        text = "007*"
        grid = parse_schematic(text)
        assert strip_ansi(render_schematic(grid, source_lines=[text])).split("\n")[1] == "│007*│"

    def test_leading_zeros_without_source_lines(self) -> None:
        """Without source lines the value is zero-padded to its token width."""
        grid = parse_schematic("007*.12\n.05....")
        lines = strip_ansi(render_schematic(grid)).split("\n")
        assert lines[1:3] == ["│007*.12│", "│.05....│"]

    def test_highlight(self) -> None:
        """Highlighting keeps the character in place."""
        grid = parse_schematic(EXAMPLE)
        lines = strip_ansi(render_schematic(grid, highlight_pos=(1, 3))).split("\n")
        assert lines[2] == "│...*......│"


class TestRenderAdjacency:
    """Tests for the symbol listing."""

    def test_sorted_listing(self) -> None:
        grid = parse_schematic("467..\n...*.\n..35.\n#....\n6....")
        text = render_adjacency(symbols_with_adjacent_part_numbers(grid))
        assert text.split("\n") == [
            "'#' at [3, 0]: 6",
            "'*' at [1, 3]: 35, 467",
        ]

    def test_empty(self) -> None:
        assert render_adjacency({}) == ""
