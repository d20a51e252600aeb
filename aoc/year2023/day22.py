"""Day 22: Sand Slabs."""

from collections import deque
from typing import Dict, List, Set, Tuple

from aoc.core.errors import InvalidInputError

Brick = Tuple[int, int, int, int, int, int]


def parse(text: str) -> List[Brick]:
    bricks = []
    for line in text.split():
        try:
            ends = [int(n) for n in line.replace("~", ",").split(",")]
        except ValueError as e:
            raise InvalidInputError(f"Bad brick: {line!r}") from e
        if len(ends) != 6:
            raise InvalidInputError(f"Bad brick: {line!r}")
        x1, y1, z1, x2, y2, z2 = ends
        bricks.append((min(x1, x2), min(y1, y2), min(z1, z2), max(x1, x2), max(y1, y2), max(z1, z2)))
    return bricks


def settle(bricks: List[Brick]) -> Tuple[Dict[int, Set[int]], Dict[int, Set[int]]]:
    """
    Drops every brick as far as it goes.

    Returns, for each brick index, the bricks it rests on and the bricks
    resting on it.
    """
    order = sorted(range(len(bricks)), key=lambda i: bricks[i][2])
    # Highest settled (z, brick) for every (x, y) column
    top: Dict[Tuple[int, int], Tuple[int, int]] = {}
    below: Dict[int, Set[int]] = {i: set() for i in order}
    above: Dict[int, Set[int]] = {i: set() for i in order}
    for i in order:
        x1, y1, z1, x2, y2, z2 = bricks[i]
        cells = [(x, y) for x in range(x1, x2 + 1) for y in range(y1, y2 + 1)]
        floor = max((top[cell][0] for cell in cells if cell in top), default=0)
        for cell in cells:
            if cell in top and top[cell][0] == floor:
                below[i].add(top[cell][1])
        for j in below[i]:
            above[j].add(i)
        new_top = floor + 1 + (z2 - z1)
        for cell in cells:
            top[cell] = (new_top, i)
    return below, above


def part1(text: str) -> int:
    below, above = settle(parse(text))
    return sum(all(len(below[j]) > 1 for j in above[i]) for i in below)


def part2(text: str) -> int:
    below, above = settle(parse(text))
    total = 0
    for i in below:
        fallen = {i}
        queue = deque([i])
        while queue:
            for j in above[queue.popleft()]:
                if j not in fallen and below[j] <= fallen:
                    fallen.add(j)
                    queue.append(j)
        total += len(fallen) - 1
    return total
