from aoc.year2023 import day11

EXAMPLE = """\
...#......
.......#..
#.........
..........
......#...
.#........
.........#
..........
.......#..
#...#.....
"""


def test_part1_example():
    assert day11.part1(EXAMPLE) == 374


def test_larger_expansion():
    assert day11.part2(EXAMPLE, factor=10) == 1030
    assert day11.part2(EXAMPLE, factor=100) == 8410


def test_pairwise_sum():
    assert day11.pairwise_sum([3, 1, 7]) == 2 + 4 + 6
