"""Day 18: Boiling Boulders."""

from collections import deque
from typing import Iterator, Set, Tuple

from aoc.core.errors import InvalidInputError

Cube = Tuple[int, int, int]


def parse(text: str) -> Set[Cube]:
    cubes = set()
    for line in text.split():
        try:
            x, y, z = (int(n) for n in line.split(","))
        except ValueError as e:
            raise InvalidInputError(f"Bad cube: {line!r}") from e
        cubes.add((x, y, z))
    return cubes


def neighbors(cube: Cube) -> Iterator[Cube]:
    x, y, z = cube
    yield from (
        (x - 1, y, z), (x + 1, y, z),
        (x, y - 1, z), (x, y + 1, z),
        (x, y, z - 1), (x, y, z + 1),
    )


def part1(text: str) -> int:
    cubes = parse(text)
    return sum(n not in cubes for cube in cubes for n in neighbors(cube))


def part2(text: str) -> int:
    cubes = parse(text)
    if not cubes:
        return 0
    lo = [min(c[axis] for c in cubes) - 1 for axis in range(3)]
    hi = [max(c[axis] for c in cubes) + 1 for axis in range(3)]

    # Flood the steam in from a corner of the padded bounding box
    start = tuple(lo)
    outside = {start}
    queue = deque([start])
    faces = 0
    while queue:
        for n in neighbors(queue.popleft()):
            if not all(lo[i] <= n[i] <= hi[i] for i in range(3)):
                continue
            if n in cubes:
                faces += 1
            elif n not in outside:
                outside.add(n)
                queue.append(n)
    return faces
