"""Day 4: Camp Cleanup."""

import re
from typing import List, Tuple

from aoc.core.errors import InvalidInputError

PAIR = re.compile(r"^(\d+)-(\d+),(\d+)-(\d+)$")


def parse(text: str) -> List[Tuple[int, int, int, int]]:
    pairs = []
    for line in text.split():
        match = PAIR.match(line)
        if not match:
            raise InvalidInputError(f"Bad assignment pair: {line!r}")
        pairs.append(tuple(int(g) for g in match.groups()))
    return pairs


def part1(text: str) -> int:
    return sum(
        (a <= c and d <= b) or (c <= a and b <= d) for a, b, c, d in parse(text)
    )


def part2(text: str) -> int:
    return sum(a <= d and c <= b for a, b, c, d in parse(text))
