import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day25

EXAMPLE = """\
1=-0-2
12111
2=0=
21
2=01
111
20012
112
1=-1=
1-12
12
1=
122
"""


def test_part1_example():
    assert day25.part1(EXAMPLE) == "2=-1=0"


def test_part2_message():
    assert day25.part2(EXAMPLE) == "Merry Christmas!"


@pytest.mark.parametrize(
    "value, snafu",
    [(0, "0"), (3, "1="), (2022, "1=11-2"), (12345, "1-0---0"), (314159265, "1121-1110-1=0")],
)
def test_to_snafu(value, snafu):
    assert day25.to_snafu(value) == snafu
    assert day25.from_snafu(snafu) == value


def test_bad_digit():
    with pytest.raises(InvalidInputError):
        day25.part1("12x\n")
