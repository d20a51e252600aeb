import pytest

from aoc.core.errors import InvalidInputError
from aoc.year2022 import day10


def test_register_values_small_program():
    values = day10.register_values("noop\naddx 3\naddx -5\n")
    # X during cycles 1 to 5, then the final value
    assert values == [1, 1, 1, 4, 4, -1]


def test_part1_constant_register():
    # X stays at 1, so the strength is just the sum of the sampled cycles
    assert day10.part1("noop\n" * 220) == 20 + 60 + 100 + 140 + 180 + 220


def test_part1_after_add():
    program = "addx 1\n" + "noop\n" * 218
    assert day10.part1(program) == 2 * (20 + 60 + 100 + 140 + 180 + 220)


def test_part1_not_enough_cycles():
    with pytest.raises(InvalidInputError):
        day10.part1("noop\n" * 10)


def test_part2_draws_sprite():
    # Each "addx 3, noop" pair takes three cycles and moves the sprite three
    # pixels right, so it lines up with two of the three pixels drawn
    program = "addx 3\nnoop\n" * 13 + "noop\n" * 201
    screen = day10.part2(program).splitlines()
    assert len(screen) == 6
    assert all(len(row) == 40 for row in screen)
    assert screen[0] == "##." * 13 + "#"
    assert screen[1] == "." * 39 + "#"


def test_unknown_instruction():
    with pytest.raises(InvalidInputError):
        day10.part1("jmp 4\n")
