"""Day 2: Rock Paper Scissors."""

from typing import List, Tuple

from aoc.core.errors import InvalidInputError

# Shapes are 0 = rock, 1 = paper, 2 = scissors
OPPONENT = {"A": 0, "B": 1, "C": 2}
ME = {"X": 0, "Y": 1, "Z": 2}


def parse(text: str) -> List[Tuple[int, int]]:
    rounds = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2 or parts[0] not in OPPONENT or parts[1] not in ME:
            raise InvalidInputError(f"Bad strategy line: {line!r}")
        rounds.append((OPPONENT[parts[0]], ME[parts[1]]))
    return rounds


def score(opponent: int, me: int) -> int:
    # (me - opponent) % 3: 0 draw, 1 win, 2 loss
    outcome = (me - opponent + 1) % 3
    return me + 1 + outcome * 3


def part1(text: str) -> int:
    return sum(score(opponent, me) for opponent, me in parse(text))


def part2(text: str) -> int:
    # X lose, Y draw, Z win
    return sum(
        score(opponent, (opponent + result - 1) % 3) for opponent, result in parse(text)
    )
