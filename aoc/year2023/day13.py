"""Day 13: Point of Incidence."""

from typing import List

from aoc.core.errors import InvalidInputError


def parse(text: str) -> List[List[str]]:
    patterns = []
    for block in text.strip().split("\n\n"):
        rows = block.split()
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidInputError("Patterns must be rectangles")
        patterns.append(rows)
    return patterns


def reflection_row(rows: List[str], smudges: int) -> int:
    """Rows above a horizontal mirror that differs from a perfect one in exactly `smudges` cells."""
    for mirror in range(1, len(rows)):
        differences = sum(
            a != b
            for top, bottom in zip(reversed(rows[:mirror]), rows[mirror:])
            for a, b in zip(top, bottom)
        )
        if differences == smudges:
            return mirror
    return 0


def summarize(rows: List[str], smudges: int) -> int:
    row = reflection_row(rows, smudges)
    if row:
        return 100 * row
    col = reflection_row(["".join(column) for column in zip(*rows)], smudges)
    if not col:
        raise InvalidInputError("Pattern has no line of reflection")
    return col


def part1(text: str) -> int:
    return sum(summarize(rows, 0) for rows in parse(text))


def part2(text: str) -> int:
    return sum(summarize(rows, 1) for rows in parse(text))
