import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day22

EXAMPLE = (
    "        ...#\n"
    "        .#..\n"
    "        #...\n"
    "        ....\n"
    "...#.......#\n"
    "........#...\n"
    "..#....#....\n"
    "..........#.\n"
    "        ...#....\n"
    "        .....#..\n"
    "        .#......\n"
    "        ......#.\n"
    "\n"
    "10R5L5R10L4R5L5\n"
)


def test_part1_example():
    assert day22.part1(EXAMPLE) == 6032


def test_part2_example():
    assert day22.part2(EXAMPLE) == 5031


def test_parse_instructions():
    _, instructions = day22.parse(EXAMPLE)
    assert instructions[:4] == [10, "R", 5, "L"]


def test_missing_path():
    with pytest.raises(InvalidInputError):
        day22.parse("...\n...\n")
