"""Day 14: Parabolic Reflector Dish."""

from typing import Dict, List, Tuple

from aoc.core.errors import InvalidInputError

Grid = Tuple[str, ...]


def parse(text: str) -> Grid:
    rows = tuple(text.split())
    if not rows or any(len(row) != len(rows[0]) or set(row) - set(".#O") for row in rows):
        raise InvalidInputError("Platform must be a rectangle of '.', '#' and 'O'")
    return rows


def tilt_west(rows: Grid) -> Grid:
    # Rocks roll to the left end of each run between cube rocks
    return tuple(
        "#".join("".join(sorted(run, reverse=True)) for run in row.split("#"))
        for row in rows
    )


def rotate_clockwise(rows: Grid) -> Grid:
    return tuple("".join(column) for column in zip(*reversed(rows)))


def rotate_counterclockwise(rows: Grid) -> Grid:
    return tuple("".join(column) for column in zip(*rows))[::-1]


def tilt_north(rows: Grid) -> Grid:
    return rotate_clockwise(tilt_west(rotate_counterclockwise(rows)))


def spin_cycle(rows: Grid) -> Grid:
    # With north turned west, each clockwise turn brings the next direction
    # (west, south, east) round to the west side
    rows = rotate_counterclockwise(rows)
    for _ in range(4):
        rows = rotate_clockwise(tilt_west(rows))
    return rotate_clockwise(rows)


def north_load(rows: Grid) -> int:
    return sum(row.count("O") * (len(rows) - r) for r, row in enumerate(rows))


def part1(text: str) -> int:
    return north_load(tilt_north(parse(text)))


def part2(text: str, cycles: int = 1_000_000_000) -> int:
    rows = parse(text)
    seen: Dict[Grid, int] = {}
    history: List[Grid] = []
    for n in range(cycles):
        if rows in seen:
            start = seen[rows]
            return north_load(history[start + (cycles - start) % (n - start)])
        seen[rows] = n
        history.append(rows)
        rows = spin_cycle(rows)
    return north_load(rows)
