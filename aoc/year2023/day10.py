"""Day 10: Pipe Maze."""

from typing import List, Set, Tuple

from aoc.core.errors import InvalidInputError

Position = Tuple[int, int]

NORTH, SOUTH, WEST, EAST = (-1, 0), (1, 0), (0, -1), (0, 1)

PIPES = {
    "|": (NORTH, SOUTH),
    "-": (WEST, EAST),
    "L": (NORTH, EAST),
    "J": (NORTH, WEST),
    "7": (SOUTH, WEST),
    "F": (SOUTH, EAST),
}


def parse(text: str) -> Tuple[List[str], Position]:
    rows = text.split()
    start = None
    for r, row in enumerate(rows):
        if len(row) != len(rows[0]) or set(row) - set(PIPES) - {".", "S"}:
            raise InvalidInputError(f"Bad maze row {row!r}")
        if "S" in row:
            start = (r, row.index("S"))
    if start is None:
        raise InvalidInputError("Maze has no starting position")
    return rows, start


def start_connections(rows: List[str], start: Position) -> Tuple[Position, ...]:
    """Directions from S whose neighbouring pipe connects back to it."""
    r, c = start
    connections = []
    for dr, dc in (NORTH, SOUTH, WEST, EAST):
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(rows) and 0 <= nc < len(rows[0]):
            pipe = PIPES.get(rows[nr][nc], ())
            if (-dr, -dc) in pipe:
                connections.append((dr, dc))
    if len(connections) != 2:
        raise InvalidInputError("Start does not connect to exactly two pipes")
    return tuple(connections)


def find_loop(rows: List[str], start: Position) -> Tuple[List[Position], str]:
    """The loop's tiles in order, and the pipe hidden under S."""
    first, second = start_connections(rows, start)
    start_pipe = next(
        pipe for pipe, ends in PIPES.items() if set(ends) == {first, second}
    )
    loop = [start]
    heading = first
    r, c = start
    while True:
        r, c = r + heading[0], c + heading[1]
        if (r, c) == start:
            return loop, start_pipe
        ends = PIPES.get(rows[r][c], ())
        back = (-heading[0], -heading[1])
        if back not in ends:
            raise InvalidInputError(f"Pipe at {(r, c)} does not continue the loop")
        heading = ends[0] if ends[1] == back else ends[1]
        loop.append((r, c))


def part1(text: str) -> int:
    rows, start = parse(text)
    loop, _ = find_loop(rows, start)
    return len(loop) // 2


def part2(text: str) -> int:
    rows, start = parse(text)
    loop, start_pipe = find_loop(rows, start)
    on_loop: Set[Position] = set(loop)
    enclosed = 0
    for r, row in enumerate(rows):
        inside = False
        for c, ch in enumerate(row):
            if (r, c) in on_loop:
                if ch == "S":
                    ch = start_pipe
                # Count crossings using the pipes that reach north
                if NORTH in PIPES[ch]:
                    inside = not inside
            elif inside:
                enclosed += 1
    return enclosed
