import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day13

EXAMPLE = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


def test_part1_example():
    assert day13.part1(EXAMPLE) == 13


def test_part2_example():
    assert day13.part2(EXAMPLE) == 140


def test_compare_mixed_types():
    assert day13.compare([[1], [2, 3, 4]], [[1], 4]) < 0
    assert day13.compare([9], [[8, 7, 6]]) > 0
    assert day13.compare([[]], [[]]) == 0


def test_bad_packet():
    with pytest.raises(InvalidInputError):
        day13.part1("[1,2\n[3]\n")


def test_packet_with_string():
    with pytest.raises(InvalidInputError):
        day13.part1('["a"]\n[1]\n')
