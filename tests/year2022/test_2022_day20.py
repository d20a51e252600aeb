import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day20

EXAMPLE = "1\n2\n-3\n3\n-2\n0\n4\n"


def test_part1_example():
    assert day20.part1(EXAMPLE) == 3


def test_part2_example():
    assert day20.part2(EXAMPLE) == 1623178306


def test_requires_single_zero():
    with pytest.raises(InvalidInputError):
        day20.part1("1\n2\n3\n")


def test_single_number():
    with pytest.raises(InvalidInputError):
        day20.part1("0\n")
