"""Day 20: Grove Positioning System."""

from typing import List

from aoc.core.errors import InvalidInputError

DECRYPTION_KEY = 811_589_153


def parse(text: str) -> List[int]:
    try:
        numbers = [int(line) for line in text.split()]
    except ValueError as e:
        raise InvalidInputError(f"Bad number: {e}") from e
    if numbers.count(0) != 1:
        raise InvalidInputError("The file must contain exactly one 0")
    if len(numbers) < 2:
        raise InvalidInputError("Mixing needs at least two numbers")
    return numbers


def grove_coordinates(numbers: List[int], rounds: int) -> int:
    # Entries are (original index, value) so duplicate values stay distinct
    order = list(enumerate(numbers))
    mixed = order[:]
    size = len(numbers)
    for _ in range(rounds):
        for entry in order:
            index = mixed.index(entry)
            mixed.pop(index)
            mixed.insert((index + entry[1]) % (size - 1), entry)
    values = [value for _, value in mixed]
    zero = values.index(0)
    return sum(values[(zero + offset) % size] for offset in (1000, 2000, 3000))


def part1(text: str) -> int:
    return grove_coordinates(parse(text), 1)


def part2(text: str) -> int:
    return grove_coordinates([n * DECRYPTION_KEY for n in parse(text)], 10)
