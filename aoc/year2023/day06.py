"""Day 6: Wait For It."""

import math
from typing import List, Tuple

from aoc.core.errors import InvalidInputError


def parse(text: str) -> Tuple[List[str], List[str]]:
    lines = text.strip().splitlines()
    if len(lines) != 2 or not lines[0].startswith("Time:") or not lines[1].startswith("Distance:"):
        raise InvalidInputError("Expected a Time line and a Distance line")
    times = lines[0].split(":")[1].split()
    distances = lines[1].split(":")[1].split()
    if len(times) != len(distances) or not all(n.isdigit() for n in times + distances):
        raise InvalidInputError("Times and distances do not line up")
    return times, distances


def ways_to_win(time: int, record: int) -> int:
    """
    Count of hold times h with h * (time - h) > record.

    The roots of h^2 - time*h + record = 0 bound the winning range; the
    integer bounds are then nudged to be strict.
    """
    discriminant = time * time - 4 * record
    if discriminant < 0:
        return 0
    root = math.isqrt(discriminant)
    low = (time - root) // 2
    high = (time + root) // 2 + 1
    while low * (time - low) <= record and low <= time:
        low += 1
    while high * (time - high) <= record and high >= 0:
        high -= 1
    return max(high - low + 1, 0)


def part1(text: str) -> int:
    times, distances = parse(text)
    return math.prod(ways_to_win(int(t), int(d)) for t, d in zip(times, distances))


def part2(text: str) -> int:
    times, distances = parse(text)
    return ways_to_win(int("".join(times)), int("".join(distances)))
