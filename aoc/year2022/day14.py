"""Day 14: Regolith Reservoir."""

from typing import Set, Tuple

from aoc.core.errors import InvalidInputError

SOURCE = (500, 0)


def parse(text: str) -> Set[Tuple[int, int]]:
    rock = set()
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            points = [
                tuple(int(n) for n in point.split(","))
                for point in line.split(" -> ")
            ]
        except ValueError as e:
            raise InvalidInputError(f"Bad rock path: {line!r}") from e
        if any(len(point) != 2 for point in points):
            raise InvalidInputError(f"Rock path points need two coordinates: {line!r}")
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            if x1 != x2 and y1 != y2:
                raise InvalidInputError(f"Diagonal rock segment in {line!r}")
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rock.add((x, y))
    if not rock:
        raise InvalidInputError("No rock paths")
    return rock


def pour(rock: Set[Tuple[int, int]], floor: bool) -> int:
    """Drops sand until it falls into the abyss or blocks the source."""
    blocked = set(rock)
    lowest = max(y for _, y in rock)
    resting = 0
    # Path of the previous grain; the next grain follows it until it diverges
    path = [SOURCE]
    while path:
        x, y = path[-1]
        if y == lowest + 1:
            if not floor:
                return resting
            blocked.add((x, y))
            resting += 1
            path.pop()
            continue
        for nx in (x, x - 1, x + 1):
            if (nx, y + 1) not in blocked:
                path.append((nx, y + 1))
                break
        else:
            blocked.add((x, y))
            resting += 1
            path.pop()
    return resting


def part1(text: str) -> int:
    return pour(parse(text), floor=False)


def part2(text: str) -> int:
    return pour(parse(text), floor=True)
