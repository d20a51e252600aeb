import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day01

EXAMPLE = """\
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test_part1_example():
    assert day01.part1(EXAMPLE) == 24000


def test_part2_example():
    assert day01.part2(EXAMPLE) == 45000


def test_single_elf():
    assert day01.part1("7\n8\n") == 15


def test_bad_calories():
    with pytest.raises(InvalidInputError):
        day01.part1("100\nlots\n")
