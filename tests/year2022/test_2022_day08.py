import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day08

EXAMPLE = """\
30373
25512
65332
33549
35390
"""


def test_part1_example():
    assert day08.part1(EXAMPLE) == 21


def test_part2_example():
    assert day08.part2(EXAMPLE) == 8


def test_non_digit_tree():
    with pytest.raises(InvalidInputError):
        day08.part1("123\n4x6\n789\n")
