"""Day 25: Full of Hot Air."""

from aoc.core.errors import InvalidInputError

DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
SYMBOLS = "012=-"


def from_snafu(number: str) -> int:
    value = 0
    for ch in number:
        if ch not in DIGITS:
            raise InvalidInputError(f"Bad SNAFU number: {number!r}")
        value = value * 5 + DIGITS[ch]
    return value


def to_snafu(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 5)
        digits.append(SYMBOLS[remainder])
        # 3 and 4 become -2 and -1 with a carry
        if remainder > 2:
            value += 1
    return "".join(reversed(digits))


def part1(text: str) -> str:
    return to_snafu(sum(from_snafu(line) for line in text.split()))


def part2(text: str) -> str:
    return "Merry Christmas!"
