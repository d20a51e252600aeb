"""Day 1: Calorie Counting."""

import heapq
from typing import List

from aoc.core.errors import InvalidInputError


def elf_totals(text: str) -> List[int]:
    totals = []
    for block in text.strip().split("\n\n"):
        try:
            totals.append(sum(int(line) for line in block.split()))
        except ValueError as e:
            raise InvalidInputError(f"Bad calorie count: {e}") from e
    return totals


def part1(text: str) -> int:
    return max(elf_totals(text))


def part2(text: str) -> int:
    return sum(heapq.nlargest(3, elf_totals(text)))
