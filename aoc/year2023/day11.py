"""Day 11: Cosmic Expansion."""

import bisect
from typing import List, Tuple

from aoc.core.errors import InvalidInputError


def parse(text: str) -> List[Tuple[int, int]]:
    rows = text.split()
    galaxies = []
    for r, row in enumerate(rows):
        if set(row) - {".", "#"}:
            raise InvalidInputError(f"Bad image row {row!r}")
        galaxies.extend((r, c) for c, ch in enumerate(row) if ch == "#")
    return galaxies


def expanded(coords: List[int], factor: int) -> List[int]:
    """Shifts each coordinate by the number of empty lines before it."""
    occupied = sorted(set(coords))
    result = []
    for x in coords:
        empty_before = x - bisect.bisect_left(occupied, x)
        result.append(x + empty_before * (factor - 1))
    return result


def pairwise_sum(values: List[int]) -> int:
    """Sum of |a - b| over all pairs, in O(n log n)."""
    ordered = sorted(values)
    prefix = 0
    total = 0
    for i, value in enumerate(ordered):
        total += value * i - prefix
        prefix += value
    return total


def distance_sum(text: str, factor: int) -> int:
    galaxies = parse(text)
    rows = expanded([r for r, _ in galaxies], factor)
    cols = expanded([c for _, c in galaxies], factor)
    return pairwise_sum(rows) + pairwise_sum(cols)


def part1(text: str, factor: int = 2) -> int:
    return distance_sum(text, factor)


def part2(text: str, factor: int = 1_000_000) -> int:
    return distance_sum(text, factor)
