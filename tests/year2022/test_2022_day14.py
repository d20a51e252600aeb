import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day14

EXAMPLE = """\
498,4 -> 498,6 -> 496,6
503,4 -> 502,4 -> 502,9 -> 494,9
"""


def test_part1_example():
    assert day14.part1(EXAMPLE) == 24


def test_part2_example():
    assert day14.part2(EXAMPLE) == 93


def test_point_with_three_coordinates():
    with pytest.raises(InvalidInputError):
        day14.part1("1,2,3 -> 4,5\n")
