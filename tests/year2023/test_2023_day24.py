from fractions import Fraction

from aoc.year2023 import day24

EXAMPLE = """\
19, 13, 30 @ -2,  1, -2
18, 19, 22 @ -1, -1, -2
20, 25, 34 @ -2, -2, -4
12, 31, 28 @ -1, -2, -1
20, 19, 15 @  1, -5, -3
"""


def test_part1_example():
    assert day24.part1(EXAMPLE, low=7, high=27) == 2


def test_part2_example():
    assert day24.part2(EXAMPLE) == 47


def test_crossing_in_the_past():
    a, _, _, _, e = day24.parse(EXAMPLE)
    assert day24.future_crossing(a, e) is None


def test_crossing_inside_area():
    a, b, *_ = day24.parse(EXAMPLE)
    x, y = day24.future_crossing(a, b)
    assert (x, y) == (Fraction(43, 3), Fraction(46, 3))
