from aoc.year2022 import day23

EXAMPLE = """\
....#..
..###.#
#...##.
.#...##
#.###..
##.#.##
.#..#..
"""


def test_part1_example():
    assert day23.part1(EXAMPLE) == 110


def test_part2_example():
    assert day23.part2(EXAMPLE) == 20
