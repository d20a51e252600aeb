"""Day 12: Hill Climbing Algorithm."""

from collections import deque
from typing import Dict, Iterable, Tuple

from aoc.core.errors import InvalidInputError

Position = Tuple[int, int]


def parse(text: str) -> Tuple[Dict[Position, int], Position, Position]:
    heights: Dict[Position, int] = {}
    start = end = None
    for r, line in enumerate(text.split()):
        for c, ch in enumerate(line):
            if ch == "S":
                start, ch = (r, c), "a"
            elif ch == "E":
                end, ch = (r, c), "z"
            if not "a" <= ch <= "z":
                raise InvalidInputError(f"Bad height {ch!r} at {(r, c)}")
            heights[(r, c)] = ord(ch) - ord("a")
    if start is None or end is None:
        raise InvalidInputError("Map needs both a start and an end")
    return heights, start, end


def steps_from_end(heights: Dict[Position, int], end: Position) -> Dict[Position, int]:
    """Reverse BFS: a step a -> b is allowed when b is at most one higher than a."""
    distances = {end: 0}
    queue = deque([end])
    while queue:
        r, c = queue.popleft()
        for neighbor in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if neighbor in heights and neighbor not in distances:
                if heights[(r, c)] - heights[neighbor] <= 1:
                    distances[neighbor] = distances[(r, c)] + 1
                    queue.append(neighbor)
    return distances


def fewest_steps(distances: Dict[Position, int], starts: Iterable[Position]) -> int:
    reachable = [distances[s] for s in starts if s in distances]
    if not reachable:
        raise InvalidInputError("The end cannot be reached")
    return min(reachable)


def part1(text: str) -> int:
    heights, start, end = parse(text)
    return fewest_steps(steps_from_end(heights, end), [start])


def part2(text: str) -> int:
    heights, _, end = parse(text)
    lowest = [pos for pos, height in heights.items() if height == 0]
    return fewest_steps(steps_from_end(heights, end), lowest)
