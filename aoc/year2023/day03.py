"""Day 3: Gear Ratios."""

import re
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from aoc.core.errors import InvalidInputError

NUMBER = re.compile(r"\d+")


def parse(text: str) -> List[str]:
    rows = text.split()
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise InvalidInputError("Schematic must be a non-empty rectangle")
    return rows


def adjacent_symbols(rows: List[str]) -> Iterator[Tuple[int, Tuple[int, int], str]]:
    """Yields (number, symbol position, symbol) for every number touching a symbol."""
    for r, row in enumerate(rows):
        for match in NUMBER.finditer(row):
            for nr in range(max(r - 1, 0), min(r + 2, len(rows))):
                for nc in range(max(match.start() - 1, 0), min(match.end() + 1, len(row))):
                    ch = rows[nr][nc]
                    if ch != "." and not ch.isdigit():
                        yield int(match.group()), (nr, nc), ch


def part1(text: str) -> int:
    rows = parse(text)
    total = 0
    for r, row in enumerate(rows):
        for match in NUMBER.finditer(row):
            neighborhood = "".join(
                rows[nr][max(match.start() - 1, 0) : match.end() + 1]
                for nr in range(max(r - 1, 0), min(r + 2, len(rows)))
            )
            if any(ch != "." and not ch.isdigit() for ch in neighborhood):
                total += int(match.group())
    return total


def part2(text: str) -> int:
    gears: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for number, position, symbol in adjacent_symbols(parse(text)):
        if symbol == "*":
            gears[position].append(number)
    return sum(parts[0] * parts[1] for parts in gears.values() if len(parts) == 2)
