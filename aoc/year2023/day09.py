"""Day 9: Mirage Maintenance."""

from typing import List

from aoc.core.errors import InvalidInputError


def parse(text: str) -> List[List[int]]:
    try:
        return [[int(n) for n in line.split()] for line in text.splitlines() if line.strip()]
    except ValueError as e:
        raise InvalidInputError(f"Bad history value: {e}") from e


def extrapolate(values: List[int]) -> int:
    """Next value, found by summing the last entry of every difference row."""
    total = 0
    while any(values):
        total += values[-1]
        values = [b - a for a, b in zip(values, values[1:])]
        if not values:
            raise InvalidInputError("History never reaches all zeroes")
    return total


def part1(text: str) -> int:
    return sum(extrapolate(history) for history in parse(text))


def part2(text: str) -> int:
    return sum(extrapolate(history[::-1]) for history in parse(text))
