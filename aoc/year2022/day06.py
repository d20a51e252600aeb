"""Day 6: Tuning Trouble."""

from aoc.core.errors import InvalidInputError


def first_marker(stream: str, length: int) -> int:
    """Number of characters processed when the last `length` are all distinct."""
    for end in range(length, len(stream) + 1):
        if len(set(stream[end - length : end])) == length:
            return end
    raise InvalidInputError(f"No marker of length {length} found")


def part1(text: str) -> int:
    return first_marker(text.strip(), 4)


def part2(text: str) -> int:
    return first_marker(text.strip(), 14)
