"""Day 9: Rope Bridge."""

from typing import List, Tuple

from aoc.core.errors import InvalidInputError

STEPS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def sign(n: int) -> int:
    return (n > 0) - (n < 0)


def parse(text: str) -> List[Tuple[str, int]]:
    moves = []
    for line in text.splitlines():
        if not line.strip():
            continue
        direction, _, count = line.partition(" ")
        if direction not in STEPS or not count.strip().isdigit():
            raise InvalidInputError(f"Bad motion: {line!r}")
        moves.append((direction, int(count)))
    return moves


def tail_visits(text: str, knots: int) -> int:
    rope = [(0, 0)] * knots
    visited = {rope[-1]}
    for direction, count in parse(text):
        dx, dy = STEPS[direction]
        for _ in range(count):
            rope[0] = (rope[0][0] + dx, rope[0][1] + dy)
            for i in range(1, knots):
                (hx, hy), (tx, ty) = rope[i - 1], rope[i]
                if abs(hx - tx) > 1 or abs(hy - ty) > 1:
                    rope[i] = (tx + sign(hx - tx), ty + sign(hy - ty))
            visited.add(rope[-1])
    return len(visited)


def part1(text: str) -> int:
    return tail_visits(text, 2)


def part2(text: str) -> int:
    return tail_visits(text, 10)
