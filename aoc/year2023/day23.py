"""Day 23: A Long Walk."""

from typing import Dict, List, Tuple

from aoc.core.errors import InvalidInputError

Position = Tuple[int, int]
SLOPES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}


def parse(text: str) -> List[str]:
    rows = text.split()
    if len(rows) < 2 or any(len(row) != len(rows[0]) or set(row) - set(".#") - set(SLOPES) for row in rows):
        raise InvalidInputError("Trail map must be a rectangle of paths, forest and slopes")
    if rows[0].count(".") != 1 or rows[-1].count(".") != 1:
        raise InvalidInputError("Trail map needs one entrance and one exit")
    return rows


def moves(rows: List[str], position: Position, slippery: bool) -> List[Position]:
    r, c = position
    tile = rows[r][c]
    if slippery and tile in SLOPES:
        headings = [SLOPES[tile]]
    else:
        headings = list(SLOPES.values())
    result = []
    for dr, dc in headings:
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(rows) and 0 <= nc < len(rows[0]) and rows[nr][nc] != "#":
            result.append((nr, nc))
    return result


def compress(rows: List[str], start: Position, end: Position, slippery: bool) -> Dict[Position, Dict[Position, int]]:
    """Collapses corridors into weighted edges between junctions."""
    junctions = {start, end}
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch != "#" and len(moves(rows, (r, c), slippery=False)) > 2:
                junctions.add((r, c))

    graph: Dict[Position, Dict[Position, int]] = {j: {} for j in junctions}
    for junction in junctions:
        for first in moves(rows, junction, slippery):
            previous, current, length = junction, first, 1
            while current not in junctions:
                following = [p for p in moves(rows, current, slippery) if p != previous]
                if not following:
                    break
                previous, current = current, following[0]
                length += 1
            else:
                graph[junction][current] = max(graph[junction].get(current, 0), length)
    return graph


def longest_hike(text: str, slippery: bool) -> int:
    rows = parse(text)
    start = (0, rows[0].index("."))
    end = (len(rows) - 1, rows[-1].index("."))
    graph = compress(rows, start, end, slippery)
    index = {junction: i for i, junction in enumerate(graph)}
    edges = [
        [(index[target], length) for target, length in graph[junction].items()]
        for junction in graph
    ]
    goal = index[end]
    best = -1

    def search(node: int, visited: int, length: int) -> None:
        nonlocal best
        if node == goal:
            best = max(best, length)
            return
        for target, step in edges[node]:
            if not visited & (1 << target):
                search(target, visited | (1 << target), length + step)

    search(index[start], 1 << index[start], 0)
    if best < 0:
        raise InvalidInputError("No path to the exit")
    return best


def part1(text: str) -> int:
    return longest_hike(text, slippery=True)


def part2(text: str) -> int:
    return longest_hike(text, slippery=False)
