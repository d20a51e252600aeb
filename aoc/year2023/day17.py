"""Day 17: Clumsy Crucible."""

import heapq
from typing import List

from aoc.core.errors import InvalidInputError


def parse(text: str) -> List[List[int]]:
    rows = text.split()
    if not rows or any(len(row) != len(rows[0]) or not row.isdigit() for row in rows):
        raise InvalidInputError("Map must be a rectangle of digits")
    return [[int(ch) for ch in row] for row in rows]


def least_heat_loss(grid: List[List[int]], min_run: int, max_run: int) -> int:
    """
    Dijkstra over (position, axis) states.

    Every move goes between `min_run` and `max_run` blocks in a straight line
    and then has to turn, so the state only needs the axis of the last run.
    """
    height, width = len(grid), len(grid[0])
    goal = (height - 1, width - 1)
    # axis 0: last run was vertical, 1: horizontal
    queue = [(0, 0, 0, 0), (0, 0, 0, 1)]
    best = {(0, 0, 0): 0, (0, 0, 1): 0}
    while queue:
        loss, r, c, axis = heapq.heappop(queue)
        if (r, c) == goal:
            return loss
        if loss > best.get((r, c, axis), loss):
            continue
        turns = ((0, 1), (0, -1)) if axis == 0 else ((1, 0), (-1, 0))
        for dr, dc in turns:
            total = loss
            for step in range(1, max_run + 1):
                nr, nc = r + dr * step, c + dc * step
                if not (0 <= nr < height and 0 <= nc < width):
                    break
                total += grid[nr][nc]
                if step < min_run:
                    continue
                state = (nr, nc, 1 - axis)
                if total < best.get(state, total + 1):
                    best[state] = total
                    heapq.heappush(queue, (total, nr, nc, 1 - axis))
    raise InvalidInputError("The factory cannot be reached")


def part1(text: str) -> int:
    return least_heat_loss(parse(text), 1, 3)


def part2(text: str) -> int:
    return least_heat_loss(parse(text), 4, 10)
