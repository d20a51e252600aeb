import pytest

from aoc.year2023 import day21

EXAMPLE = """\
...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
"""


def test_part1_example():
    assert day21.part1(EXAMPLE, steps=6) == 16


@pytest.mark.parametrize("steps, plots", [(6, 16), (10, 50), (50, 1594), (100, 6536)])
def test_infinite_garden(steps, plots):
    assert day21.part2(EXAMPLE, steps=steps) == plots


def test_quadratic_fit_on_open_garden():
    # Without rocks the reachable plots form a full diamond: (steps + 1) ** 2
    garden = ".....\n.....\n..S..\n.....\n.....\n"
    rows, start = day21.parse(garden)
    assert day21.repeats_cleanly(rows, start)
    assert day21.part2(garden, steps=32) == 33 ** 2
