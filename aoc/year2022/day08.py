"""Day 8: Treetop Tree House."""

from typing import Iterator, List

from aoc.core.errors import InvalidInputError


def parse(text: str) -> List[List[int]]:
    rows = text.split()
    if any(not row.isdigit() for row in rows):
        raise InvalidInputError("Tree heights must be digits")
    grid = [[int(ch) for ch in row] for row in rows]
    if not grid or any(len(row) != len(grid[0]) for row in grid):
        raise InvalidInputError("Tree map must be a non-empty rectangle")
    return grid


def sight_lines(grid: List[List[int]], row: int, col: int) -> Iterator[List[int]]:
    """Tree heights looking up, down, left and right, nearest first."""
    yield [grid[r][col] for r in range(row - 1, -1, -1)]
    yield [grid[r][col] for r in range(row + 1, len(grid))]
    yield grid[row][col - 1 :: -1] if col else []
    yield grid[row][col + 1 :]


def part1(text: str) -> int:
    grid = parse(text)
    visible = 0
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            if any(all(h < height for h in line) for line in sight_lines(grid, r, c)):
                visible += 1
    return visible


def part2(text: str) -> int:
    grid = parse(text)
    best = 0
    for r, row in enumerate(grid):
        for c, height in enumerate(row):
            score = 1
            for line in sight_lines(grid, r, c):
                distance = 0
                for h in line:
                    distance += 1
                    if h >= height:
                        break
                score *= distance
            best = max(best, score)
    return best
