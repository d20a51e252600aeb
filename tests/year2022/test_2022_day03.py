import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day03

EXAMPLE = """\
vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_part1_example():
    assert day03.part1(EXAMPLE) == 157


def test_part2_example():
    assert day03.part2(EXAMPLE) == 70


def test_priorities():
    assert day03.priority("a") == 1
    assert day03.priority("z") == 26
    assert day03.priority("A") == 27
    assert day03.priority("Z") == 52


def test_incomplete_group():
    with pytest.raises(InvalidInputError):
        day03.part2("abca\nbcdb\n")
