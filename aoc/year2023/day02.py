"""Day 2: Cube Conundrum."""

import math
import re
from typing import Dict, List, Tuple

from aoc.core.errors import InvalidInputError

GAME = re.compile(r"Game (\d+): (.*)")
BAG = {"red": 12, "green": 13, "blue": 14}


def parse(text: str) -> List[Tuple[int, Dict[str, int]]]:
    """Each game with the largest count seen of every colour."""
    games = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = GAME.fullmatch(line.strip())
        if not match:
            raise InvalidInputError(f"Bad game record: {line!r}")
        maxima = {colour: 0 for colour in BAG}
        for handful in match.group(2).split(";"):
            for cubes in handful.split(","):
                count, _, colour = cubes.strip().partition(" ")
                if colour not in maxima or not count.isdigit():
                    raise InvalidInputError(f"Bad cube count {cubes!r}")
                maxima[colour] = max(maxima[colour], int(count))
        games.append((int(match.group(1)), maxima))
    return games


def part1(text: str) -> int:
    return sum(
        number
        for number, maxima in parse(text)
        if all(maxima[colour] <= BAG[colour] for colour in BAG)
    )


def part2(text: str) -> int:
    return sum(math.prod(maxima.values()) for _, maxima in parse(text))
