from aoc.year2022 import day09

EXAMPLE = """\
R 4
U 4
L 3
D 1
R 4
D 1
L 5
R 2
"""

LARGER_EXAMPLE = """\
R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20
"""


def test_part1_example():
    assert day09.part1(EXAMPLE) == 13


def test_part2_example():
    assert day09.part2(EXAMPLE) == 1


def test_part2_larger_example():
    assert day09.part2(LARGER_EXAMPLE) == 36
