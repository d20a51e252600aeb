from aoc.year2023 import day09

EXAMPLE = """\
0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45
"""


def test_part1_example():
    assert day09.part1(EXAMPLE) == 114


def test_part2_example():
    assert day09.part2(EXAMPLE) == 2


def test_extrapolate():
    assert day09.extrapolate([0, 3, 6, 9, 12, 15]) == 18
    assert day09.extrapolate([10, 13, 16, 21, 30, 45]) == 68
