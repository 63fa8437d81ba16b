"""
Scratchcards (2023 day 4).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from schematic_types import ParseError

__all__ = ["Card", "parse_cards", "solve"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    winners: frozenset[int]
    numbers: frozenset[int]

    @property
    def matches(self) -> int:
        return len(self.winners & self.numbers)


def _parse_numbers(entries: list[str], line: str) -> frozenset[int]:
    values: set[int] = set()
    for entry in entries:
        try:
            values.add(int(entry))
        except ValueError as e:
            raise ParseError(f"Entry: {entry}\n  Line: '{line}'", token=entry, line=line) from e
    return frozenset(values)


def parse_cards(text: str) -> list[Card]:
    cards: list[Card] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        _, sep, body = line.partition(":")
        winners, bar, numbers = body.partition("|")
        if not sep or not bar:
            raise ParseError(
                f"Invalid card line: '{line}'\n"
                f"  Expected format: 'Card <id>: <winners> | <numbers>'",
                line=line,
            )
        cards.append(Card(_parse_numbers(winners.split(), line), _parse_numbers(numbers.split(), line)))
    return cards


def count_copies(cards: list[Card]) -> int:
    """Total cards held once every win has handed out its copies."""
    copies = [1] * len(cards)
    for idx, card in enumerate(cards):
        # Wins never reach past the last card
        for won in range(idx + 1, min(idx + 1 + card.matches, len(cards))):
            copies[won] += copies[idx]
    return sum(copies)


def solve(text: str) -> tuple[int, int]:
    cards = parse_cards(text)
    part1 = sum(2 ** (card.matches - 1) for card in cards if card.matches > 0)
    part2 = count_copies(cards)
    logger.info("scratchcards: %d cards", len(cards))
    return part1, part2
