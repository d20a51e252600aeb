"""Day 4: Scratchcards."""

import re
from typing import List

from aoc.core.errors import InvalidInputError

CARD = re.compile(r"Card\s+(\d+):([\d ]+)\|([\d ]+)")


def matches(text: str) -> List[int]:
    """Number of winning numbers on each card, in card order."""
    counts = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = CARD.fullmatch(line.strip())
        if not match:
            raise InvalidInputError(f"Bad scratchcard: {line!r}")
        winning = set(match.group(2).split())
        counts.append(sum(n in winning for n in match.group(3).split()))
    return counts


def part1(text: str) -> int:
    return sum(2 ** (count - 1) for count in matches(text) if count)


def part2(text: str) -> int:
    counts = matches(text)
    copies = [1] * len(counts)
    for i, count in enumerate(counts):
        for j in range(i + 1, min(i + 1 + count, len(counts))):
            copies[j] += copies[i]
    return sum(copies)
