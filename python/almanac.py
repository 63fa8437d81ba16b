"""
Seed almanac (2023 day 5).

A seed passes through seven category mappings (soil, fertilizer, water,
light, temperature, humidity, location). Each mapping is a list of
`destination source size` ranges; values outside every range map to
themselves.

Part 2 reads the seed list as (start, length) pairs. The ranges are
independent, so they are fanned out to a worker pool and the per-range
minima reduced with min().
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum

from schematic_types import ParseError, ShapeError

__all__ = ["Almanac", "Category", "Mapping", "MappingRange", "parse_almanac", "solve"]

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


class Category(Enum):
    """Destination category of each mapping, in application order."""

    SOIL = 0
    FERTILIZER = 1
    WATER = 2
    LIGHT = 3
    TEMPERATURE = 4
    HUMIDITY = 5
    LOCATION = 6


@dataclass(frozen=True)
class MappingRange:
    source: int
    destination: int
    size: int

    def contains(self, value: int) -> bool:
        return self.source <= value < self.source + self.size


@dataclass
class Mapping:
    ranges: list[MappingRange] = field(default_factory=list)

    def map(self, source: int) -> int:
        for r in self.ranges:
            if r.contains(source):
                return r.destination + (source - r.source)
        return source

    def map_interval(self, start: int, end: int) -> list[tuple[int, int]]:
        """
        Map the half-open interval [start, end) to destination intervals.

        Earlier ranges win where ranges overlap, matching map(). An empty
        interval maps to nothing.
        """
        if start >= end:
            return []
        pending = [(start, end)]
        mapped: list[tuple[int, int]] = []
        for r in self.ranges:
            r_end = r.source + r.size
            leftover: list[tuple[int, int]] = []
            for lo, hi in pending:
                inner_lo, inner_hi = max(lo, r.source), min(hi, r_end)
                if inner_lo >= inner_hi:
                    leftover.append((lo, hi))
                    continue
                offset = r.destination - r.source
                mapped.append((inner_lo + offset, inner_hi + offset))
                if lo < inner_lo:
                    leftover.append((lo, inner_lo))
                if inner_hi < hi:
                    leftover.append((inner_hi, hi))
            pending = leftover
        return mapped + pending


@dataclass
class Almanac:
    seeds: list[int]
    mappings: list[Mapping]

    def map_seed(self, seed: int) -> list[int]:
        """Value of the seed in every category, soil through location."""
        values: list[int] = []
        source = seed
        for mapping in self.mappings:
            source = mapping.map(source)
            values.append(source)
        return values

    def location(self, seed: int) -> int:
        return self.map_seed(seed)[Category.LOCATION.value]

    def seed_ranges(self) -> list[tuple[int, int]]:
        """The seed list read as (start, length) pairs."""
        if len(self.seeds) % 2:
            raise ShapeError(f"Seed ranges need an even number of values, got {len(self.seeds)}")
        return [(self.seeds[i], self.seeds[i + 1]) for i in range(0, len(self.seeds), 2)]

    def expanded_seeds(self) -> list[int]:
        return [seed for start, size in self.seed_ranges() for seed in range(start, start + size)]

    def min_location_in_range(self, start: int, size: int) -> int | None:
        """Lowest location reached by seeds start..start+size-1, None for an empty range."""
        if size <= 0:
            return None
        intervals = [(start, start + size)]
        for mapping in self.mappings:
            intervals = [out for lo, hi in intervals for out in mapping.map_interval(lo, hi)]
        return min(lo for lo, _ in intervals)


def _parse_ints(text: str, line: str) -> list[int]:
    values: list[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError as e:
            raise ParseError(f"Failed to parse element {token}\n  Line: '{line}'", token=token, line=line) from e
    return values


def parse_almanac(text: str) -> Almanac:
    """
    Parse the seed list and the seven mapping blocks.

    Raises:
        ParseError: If the seeds line or a range line is malformed
        ShapeError: If there are not exactly seven mapping blocks
    """
    blocks = [block.strip() for block in text.strip().split("\n\n") if block.strip()]
    if not blocks or not blocks[0].startswith("seeds:"):
        raise ParseError("Expected the almanac to start with 'seeds: ...'")

    seeds_line = blocks[0]
    seeds = _parse_ints(seeds_line[len("seeds:"):], seeds_line)

    map_blocks = blocks[1:]
    if len(map_blocks) != len(Category):
        raise ShapeError(
            f"Expected {len(Category)} mapping blocks, found {len(map_blocks)}"
        )

    mappings: list[Mapping] = []
    for block in map_blocks:
        header, *range_lines = block.splitlines()
        if not header.endswith("map:"):
            raise ParseError(f"Invalid mapping header: '{header}'", line=header)
        mapping = Mapping()
        for line in range_lines:
            values = _parse_ints(line, line)
            if len(values) != 3:
                raise ParseError(
                    f"Invalid range line: '{line}'\n"
                    f"  Expected format: '<destination> <source> <size>'",
                    line=line,
                )
            destination, source, size = values
            mapping.ranges.append(MappingRange(source, destination, size))
        mappings.append(mapping)

    return Almanac(seeds, mappings)


def min_location_parallel(almanac: Almanac, max_workers: int = DEFAULT_WORKERS) -> int:
    """Minimum location over all seed ranges, one task per range, reduced with min()."""
    ranges = almanac.seed_ranges()
    if not ranges:
        raise ShapeError("No seed ranges to map")
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        minima = [m for m in pool.map(lambda r: almanac.min_location_in_range(*r), ranges) if m is not None]
    if not minima:
        raise ShapeError("Every seed range is empty")
    return min(minima)


def solve(text: str) -> tuple[int, int]:
    almanac = parse_almanac(text)
    if not almanac.seeds:
        raise ShapeError("Almanac lists no seeds")
    part1 = min(almanac.location(seed) for seed in almanac.seeds)
    part2 = min_location_parallel(almanac)
    logger.info("almanac: %d seeds, %d seed ranges", len(almanac.seeds), len(almanac.seeds) // 2)
    return part1, part2
