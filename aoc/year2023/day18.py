"""Day 18: Lavaduct Lagoon."""

import re
from typing import Iterable, List, Tuple

from aoc.core.errors import InvalidInputError

PLAN = re.compile(r"([UDLR]) (\d+) \(#([0-9a-f]{5})([0-3])\)")
HEADINGS = {"R": (0, 1), "D": (1, 0), "L": (0, -1), "U": (-1, 0)}


def parse(text: str) -> List[Tuple[str, int, int, str]]:
    plan = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = PLAN.fullmatch(line.strip())
        if not match:
            raise InvalidInputError(f"Bad dig instruction: {line!r}")
        direction, length, hex_length, hex_direction = match.groups()
        plan.append((direction, int(length), int(hex_length, 16), "RDLU"[int(hex_direction)]))
    return plan


def lagoon_size(steps: Iterable[Tuple[str, int]]) -> int:
    """
    Area enclosed by the trench, trench included.

    The shoelace formula gives the area of the polygon through the centres of
    the dug cubes; Pick's theorem then adds the outer half of the boundary.
    """
    r = c = 0
    twice_area = 0
    boundary = 0
    for direction, length in steps:
        dr, dc = HEADINGS[direction]
        nr, nc = r + dr * length, c + dc * length
        twice_area += c * nr - nc * r
        boundary += length
        r, c = nr, nc
    if (r, c) != (0, 0):
        raise InvalidInputError("The dig plan does not return to its start")
    return abs(twice_area) // 2 + boundary // 2 + 1


def part1(text: str) -> int:
    return lagoon_size((direction, length) for direction, length, _, _ in parse(text))


def part2(text: str) -> int:
    return lagoon_size((direction, length) for _, _, length, direction in parse(text))
