import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2023 import day20

EXAMPLE = """\
broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a
"""

INTERESTING_EXAMPLE = """\
broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output
"""


def test_part1_example():
    assert day20.part1(EXAMPLE) == 32000000


def test_part1_interesting_example():
    assert day20.part1(INTERESTING_EXAMPLE) == 11687500


def test_first_press():
    pulses = day20.press(day20.parse(EXAMPLE))
    assert len(pulses) == 12
    assert sum(high for _, _, high in pulses) == 4


def test_missing_broadcaster():
    with pytest.raises(InvalidInputError):
        day20.parse("%a -> b\n")
