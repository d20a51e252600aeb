import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day21

EXAMPLE = """\
root: pppw + sjmn
dbpl: 5
cczh: sllz + lgvd
zczc: 2
ptdq: humn - dvpt
dvpt: 3
lfqf: 4
humn: 5
ljgn: 2
sjmn: drzm * dbpl
sllz: 4
pppw: cczh / lfqf
lgvd: ljgn * ptdq
drzm: hmdt - zczc
hmdt: 32
"""


def test_part1_example():
    assert day21.part1(EXAMPLE) == 152


def test_part2_example():
    assert day21.part2(EXAMPLE) == 301


def test_human_on_right_side():
    text = "root: aaaa + humn\naaaa: bbbb - cccc\nbbbb: 10\ncccc: 4\nhumn: 1\n"
    assert day21.part2(text) == 6


def test_human_as_divisor():
    text = "root: aaaa + bbbb\naaaa: cccc / humn\ncccc: 20\nbbbb: 4\nhumn: 1\n"
    assert day21.part2(text) == 5


def test_unknown_monkey():
    with pytest.raises(InvalidInputError):
        day21.part1("root: aaaa + bbbb\naaaa: 1\n")
