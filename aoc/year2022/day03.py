"""Day 3: Rucksack Reorganization."""

from typing import List

from aoc.core.errors import InvalidInputError


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise InvalidInputError(f"Bad item: {item!r}")


def rucksacks(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def only_common(*groups: str) -> str:
    common = set(groups[0]).intersection(*groups[1:])
    if len(common) != 1:
        raise InvalidInputError(f"Expected one common item, found {sorted(common)}")
    return common.pop()


def part1(text: str) -> int:
    total = 0
    for sack in rucksacks(text):
        if len(sack) % 2:
            raise InvalidInputError(f"Odd rucksack length: {sack!r}")
        half = len(sack) // 2
        total += priority(only_common(sack[:half], sack[half:]))
    return total


def part2(text: str) -> int:
    sacks = rucksacks(text)
    if len(sacks) % 3:
        raise InvalidInputError("Number of rucksacks is not a multiple of 3")
    return sum(
        priority(only_common(*sacks[i : i + 3])) for i in range(0, len(sacks), 3)
    )
