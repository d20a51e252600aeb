from aoc.year2023 import day16

EXAMPLE = r"""
.|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|....
"""


def test_part1_example():
    assert day16.part1(EXAMPLE) == 46


def test_part2_example():
    assert day16.part2(EXAMPLE) == 51


def test_mirrors_turn_beams():
    assert day16.next_headings("/", 0, 1) == [(-1, 0)]
    assert day16.next_headings("\\", 0, 1) == [(1, 0)]
    assert day16.next_headings("|", 1, 0) == [(1, 0)]
