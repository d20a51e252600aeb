from aoc.year2022 import day11

EXAMPLE = """\
Monkey 0:
  Starting items: 79, 98
  Operation: new = old * 19
  Test: divisible by 23
    If true: throw to monkey 2
    If false: throw to monkey 3

Monkey 1:
  Starting items: 54, 65, 75, 74
  Operation: new = old + 6
  Test: divisible by 19
    If true: throw to monkey 2
    If false: throw to monkey 0

Monkey 2:
  Starting items: 79, 60, 97
  Operation: new = old * old
  Test: divisible by 13
    If true: throw to monkey 1
    If false: throw to monkey 3

Monkey 3:
  Starting items: 74
  Operation: new = old + 3
  Test: divisible by 17
    If true: throw to monkey 0
    If false: throw to monkey 1
"""


def test_part1_example():
    assert day11.part1(EXAMPLE) == 10605


def test_part2_example():
    assert day11.part2(EXAMPLE) == 2713310158


def test_parse():
    monkeys = day11.parse(EXAMPLE)
    assert len(monkeys) == 4
    assert monkeys[1].items == [54, 65, 75, 74]
    assert monkeys[2].inspect(3) == 9
    assert monkeys[0].target(23 * 5) == 2
