import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day02

EXAMPLE = "A Y\nB X\nC Z\n"


def test_part1_example():
    assert day02.part1(EXAMPLE) == 15


def test_part2_example():
    assert day02.part2(EXAMPLE) == 12


@pytest.mark.parametrize(
    "line, score",
    [("A X", 4), ("A Y", 8), ("A Z", 3), ("C X", 7), ("B Z", 9)],
)
def test_round_scores(line, score):
    assert day02.part1(line) == score


def test_unknown_shape():
    with pytest.raises(InvalidInputError):
        day02.part1("A W\n")
