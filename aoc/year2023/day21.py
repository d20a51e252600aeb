"""Day 21: Step Counter."""

from collections import deque
from typing import List, Tuple

from aoc.core.errors import InvalidInputError


def parse(text: str) -> Tuple[List[str], Tuple[int, int]]:
    rows = text.split()
    start = None
    for r, row in enumerate(rows):
        if len(row) != len(rows[0]) or set(row) - set(".#S"):
            raise InvalidInputError(f"Bad garden row {row!r}")
        if "S" in row:
            start = (r, row.index("S"))
    if start is None:
        raise InvalidInputError("Garden has no starting position")
    return rows, start


def reachable_counts(rows: List[str], start: Tuple[int, int], targets: List[int], infinite: bool) -> List[int]:
    """
    Garden plots reachable in exactly each of `targets` steps.

    A plot reached in d steps can be revisited every two steps after that,
    so it counts for every target t >= d with the same parity.
    """
    height, width = len(rows), len(rows[0])
    limit = max(targets)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        d = distances[(r, c)]
        if d == limit:
            continue
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if (nr, nc) in distances:
                continue
            if not infinite and not (0 <= nr < height and 0 <= nc < width):
                continue
            if rows[nr % height][nc % width] == "#":
                continue
            distances[(nr, nc)] = d + 1
            queue.append((nr, nc))
    return [
        sum(1 for d in distances.values() if d <= t and d % 2 == t % 2)
        for t in targets
    ]


def repeats_cleanly(rows: List[str], start: Tuple[int, int]) -> bool:
    """Square garden, start in the middle, with clear paths along its row and column."""
    size = len(rows)
    r, c = start
    return (
        size == len(rows[0])
        and r == c == size // 2
        and "#" not in rows[r]
        and all(row[c] != "#" for row in rows)
    )


def part1(text: str, steps: int = 64) -> int:
    rows, start = parse(text)
    return reachable_counts(rows, start, [steps], infinite=False)[0]


def part2(text: str, steps: int = 26_501_365) -> int:
    rows, start = parse(text)
    size = len(rows)
    if not repeats_cleanly(rows, start) or steps < 3 * size:
        return reachable_counts(rows, start, [steps], infinite=True)[0]

    # With clear lanes out of the start the count grows quadratically in the
    # number of whole gardens crossed; fit it from three samples.
    offset = steps % size
    y0, y1, y2 = reachable_counts(
        rows, start, [offset, offset + size, offset + 2 * size], infinite=True
    )
    n = steps // size
    return y0 + n * (y1 - y0) + n * (n - 1) // 2 * (y2 - 2 * y1 + y0)
