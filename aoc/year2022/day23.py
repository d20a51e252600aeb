"""Day 23: Unstable Diffusion."""

from collections import Counter
from typing import Set, Tuple

from aoc.core.errors import InvalidInputError

Elf = Tuple[int, int]

# Each proposal: the three cells that must be empty, and the move itself
PROPOSALS = [
    (((-1, -1), (-1, 0), (-1, 1)), (-1, 0)),  # north
    (((1, -1), (1, 0), (1, 1)), (1, 0)),  # south
    (((-1, -1), (0, -1), (1, -1)), (0, -1)),  # west
    (((-1, 1), (0, 1), (1, 1)), (0, 1)),  # east
]

AROUND = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc]


def parse(text: str) -> Set[Elf]:
    elves = set()
    for r, line in enumerate(text.split()):
        for c, ch in enumerate(line):
            if ch == "#":
                elves.add((r, c))
            elif ch != ".":
                raise InvalidInputError(f"Bad ground tile {ch!r}")
    return elves


def play_round(elves: Set[Elf], round_number: int) -> Tuple[Set[Elf], bool]:
    """Runs one round and returns the new positions and whether any elf moved."""
    proposals = {}
    for r, c in elves:
        if not any((r + dr, c + dc) in elves for dr, dc in AROUND):
            continue
        for i in range(4):
            checks, (dr, dc) = PROPOSALS[(round_number + i) % 4]
            if not any((r + cr, c + cc) in elves for cr, cc in checks):
                proposals[(r, c)] = (r + dr, c + dc)
                break
    counts = Counter(proposals.values())
    moved = False
    result = set()
    for elf in elves:
        target = proposals.get(elf)
        if target is not None and counts[target] == 1:
            result.add(target)
            moved = True
        else:
            result.add(elf)
    return result, moved


def part1(text: str) -> int:
    elves = parse(text)
    for round_number in range(10):
        elves, _ = play_round(elves, round_number)
    rows = [r for r, _ in elves]
    cols = [c for _, c in elves]
    return (max(rows) - min(rows) + 1) * (max(cols) - min(cols) + 1) - len(elves)


def part2(text: str) -> int:
    elves = parse(text)
    round_number = 0
    while True:
        elves, moved = play_round(elves, round_number)
        round_number += 1
        if not moved:
            return round_number
