"""Day 17: Pyroclastic Flow."""

from typing import Dict, List, Set, Tuple

from aoc.core.errors import InvalidInputError

WIDTH = 7

# Cells of each rock shape relative to its bottom-left corner, y pointing up
ROCKS = [
    [(0, 0), (1, 0), (2, 0), (3, 0)],
    [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)],
    [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)],
    [(0, 0), (0, 1), (0, 2), (0, 3)],
    [(0, 0), (1, 0), (0, 1), (1, 1)],
]


def parse(text: str) -> List[int]:
    pattern = text.strip()
    if not pattern or set(pattern) - {"<", ">"}:
        raise InvalidInputError("Jet pattern must be made of '<' and '>'")
    return [1 if ch == ">" else -1 for ch in pattern]


def tower_height(text: str, rocks: int) -> int:
    jets = parse(text)
    occupied: Set[Tuple[int, int]] = set()
    column_tops = [0] * WIDTH
    height = 0
    jet = 0
    seen: Dict[tuple, Tuple[int, int]] = {}
    skipped_height = 0
    dropped = 0

    def fits(shape, x: int, y: int) -> bool:
        for dx, dy in shape:
            cx, cy = x + dx, y + dy
            if not 0 <= cx < WIDTH or cy < 0 or (cx, cy) in occupied:
                return False
        return True

    while dropped < rocks:
        shape = ROCKS[dropped % len(ROCKS)]
        x, y = 2, height + 3
        while True:
            push = jets[jet]
            jet = (jet + 1) % len(jets)
            if fits(shape, x + push, y):
                x += push
            if not fits(shape, x, y - 1):
                break
            y -= 1
        for dx, dy in shape:
            occupied.add((x + dx, y + dy))
            column_tops[x + dx] = max(column_tops[x + dx], y + dy + 1)
        height = max(column_tops)
        dropped += 1

        if skipped_height:
            continue
        state = (dropped % len(ROCKS), jet, tuple(height - top for top in column_tops))
        if state in seen:
            previous_dropped, previous_height = seen[state]
            period = dropped - previous_dropped
            repeats = (rocks - dropped) // period
            skipped_height = repeats * (height - previous_height)
            dropped += repeats * period
        else:
            seen[state] = (dropped, height)

    return height + skipped_height


def part1(text: str) -> int:
    return tower_height(text, 2022)


def part2(text: str) -> int:
    return tower_height(text, 1_000_000_000_000)
