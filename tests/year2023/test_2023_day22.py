from aoc.year2023 import day22

EXAMPLE = """\
1,0,1~1,2,1
0,0,2~2,0,2
0,2,3~2,2,3
0,0,4~0,2,4
2,0,5~2,2,5
0,1,6~2,1,6
1,1,8~1,1,9
"""


def test_part1_example():
    assert day22.part1(EXAMPLE) == 5


def test_part2_example():
    assert day22.part2(EXAMPLE) == 7
