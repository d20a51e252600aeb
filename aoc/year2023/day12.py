"""Day 12: Hot Springs."""

from functools import lru_cache
from typing import List, Tuple

from aoc.core.errors import InvalidInputError


def parse(text: str) -> List[Tuple[str, Tuple[int, ...]]]:
    records = []
    for line in text.splitlines():
        if not line.strip():
            continue
        springs, _, groups = line.strip().partition(" ")
        if set(springs) - set(".#?"):
            raise InvalidInputError(f"Bad spring row: {line!r}")
        try:
            records.append((springs, tuple(int(n) for n in groups.split(","))))
        except ValueError as e:
            raise InvalidInputError(f"Bad damaged groups: {line!r}") from e
    return records


def arrangements(springs: str, groups: Tuple[int, ...]) -> int:
    @lru_cache(maxsize=None)
    def count(i: int, g: int) -> int:
        # i: next spring to place, g: next group to place
        if g == len(groups):
            return 0 if "#" in springs[i:] else 1
        size = groups[g]
        total = 0
        if i < len(springs) and springs[i] != "#":
            total += count(i + 1, g)
        end = i + size
        if (
            end <= len(springs)
            and "." not in springs[i:end]
            and (end == len(springs) or springs[end] != "#")
        ):
            total += count(min(end + 1, len(springs)), g + 1)
        return total

    return count(0, 0)


def part1(text: str) -> int:
    return sum(arrangements(springs, groups) for springs, groups in parse(text))


def part2(text: str) -> int:
    return sum(
        arrangements("?".join([springs] * 5), groups * 5)
        for springs, groups in parse(text)
    )
