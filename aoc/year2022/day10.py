"""Day 10: Cathode-Ray Tube."""

from typing import List

from aoc.core.errors import InvalidInputError

SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6


def register_values(text: str) -> List[int]:
    """Value of X during each cycle; index 0 is cycle 1."""
    x = 1
    values = []
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        if words == ["noop"]:
            values.append(x)
        elif words[0] == "addx" and len(words) == 2:
            try:
                delta = int(words[1])
            except ValueError as e:
                raise InvalidInputError(f"Bad addx argument: {line!r}") from e
            values.extend((x, x))
            x += delta
        else:
            raise InvalidInputError(f"Unknown instruction: {line!r}")
    values.append(x)
    return values


def part1(text: str) -> int:
    values = register_values(text)
    cycles = range(20, 221, 40)
    if len(values) < cycles[-1]:
        raise InvalidInputError("Not enough cycles in input")
    return sum(cycle * values[cycle - 1] for cycle in cycles)


def part2(text: str) -> str:
    values = register_values(text)
    if len(values) < SCREEN_WIDTH * SCREEN_HEIGHT:
        raise InvalidInputError("Not enough cycles to draw the screen")
    rows = []
    for row in range(SCREEN_HEIGHT):
        pixels = []
        for col in range(SCREEN_WIDTH):
            sprite = values[row * SCREEN_WIDTH + col]
            pixels.append("#" if abs(sprite - col) <= 1 else ".")
        rows.append("".join(pixels))
    return "\n".join(rows)
