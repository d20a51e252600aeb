import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2023 import day15

EXAMPLE = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7\n"


def test_hash():
    assert day15.hash_string("HASH") == 52
    assert day15.hash_string("rn=1") == 30


def test_part1_example():
    assert day15.part1(EXAMPLE) == 1320


def test_part2_example():
    assert day15.part2(EXAMPLE) == 145


def test_bad_step():
    with pytest.raises(InvalidInputError):
        day15.part2("rn+1\n")
