"""Day 1: Trebuchet?!"""

from typing import Dict

from aoc.core.errors import InvalidInputError

DIGITS = {str(d): d for d in range(10)}
SPELLED = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9,
}


def calibration_value(line: str, words: Dict[str, int]) -> int:
    # Spelled digits may overlap ("eightwo"), so scan every offset
    found = [
        value
        for i in range(len(line))
        for word, value in words.items()
        if line.startswith(word, i)
    ]
    if not found:
        raise InvalidInputError(f"No digit in line {line!r}")
    return 10 * found[0] + found[-1]


def calibration_sum(text: str, words: Dict[str, int]) -> int:
    return sum(calibration_value(line, words) for line in text.split())


def part1(text: str) -> int:
    return calibration_sum(text, DIGITS)


def part2(text: str) -> int:
    return calibration_sum(text, {**DIGITS, **SPELLED})
