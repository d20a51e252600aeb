"""Day 16: The Floor Will Be Lava."""

from typing import List, Set, Tuple

from aoc.core.errors import InvalidInputError

Beam = Tuple[int, int, int, int]  # row, col, d_row, d_col


def parse(text: str) -> List[str]:
    rows = text.split()
    if not rows or any(len(row) != len(rows[0]) or set(row) - set(".|-/\\") for row in rows):
        raise InvalidInputError("Contraption must be a rectangle of mirrors and splitters")
    return rows


def next_headings(tile: str, dr: int, dc: int) -> List[Tuple[int, int]]:
    if tile == "/":
        return [(-dc, -dr)]
    if tile == "\\":
        return [(dc, dr)]
    if tile == "|" and dc:
        return [(-1, 0), (1, 0)]
    if tile == "-" and dr:
        return [(0, -1), (0, 1)]
    return [(dr, dc)]


def energized(rows: List[str], start: Beam) -> int:
    seen: Set[Beam] = set()
    stack = [start]
    while stack:
        beam = stack.pop()
        r, c, dr, dc = beam
        if not (0 <= r < len(rows) and 0 <= c < len(rows[0])) or beam in seen:
            continue
        seen.add(beam)
        for ndr, ndc in next_headings(rows[r][c], dr, dc):
            stack.append((r + ndr, c + ndc, ndr, ndc))
    return len({(r, c) for r, c, _, _ in seen})


def part1(text: str) -> int:
    return energized(parse(text), (0, 0, 0, 1))


def part2(text: str) -> int:
    rows = parse(text)
    height, width = len(rows), len(rows[0])
    starts = (
        [(r, 0, 0, 1) for r in range(height)]
        + [(r, width - 1, 0, -1) for r in range(height)]
        + [(0, c, 1, 0) for c in range(width)]
        + [(height - 1, c, -1, 0) for c in range(width)]
    )
    return max(energized(rows, start) for start in starts)
