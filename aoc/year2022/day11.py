"""Day 11: Monkey in the Middle."""

import math
import re
from dataclasses import dataclass
from typing import Callable, List

from aoc.core.errors import InvalidInputError

MONKEY = re.compile(
    r"Monkey (\d+):\s*"
    r"Starting items:([\d, ]*)\s*"
    r"Operation: new = old ([*+]) (old|\d+)\s*"
    r"Test: divisible by (\d+)\s*"
    r"If true: throw to monkey (\d+)\s*"
    r"If false: throw to monkey (\d+)"
)


@dataclass
class Monkey:
    items: List[int]
    operator: str
    operand: str
    divisor: int
    if_true: int
    if_false: int
    inspected: int = 0

    def inspect(self, old: int) -> int:
        value = old if self.operand == "old" else int(self.operand)
        return old * value if self.operator == "*" else old + value

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def parse(text: str) -> List[Monkey]:
    monkeys = []
    for block in text.strip().split("\n\n"):
        match = MONKEY.search(block)
        if not match:
            raise InvalidInputError(f"Bad monkey description: {block!r}")
        number, items, operator, operand, divisor, if_true, if_false = match.groups()
        if int(number) != len(monkeys):
            raise InvalidInputError(f"Monkeys out of order at monkey {number}")
        monkeys.append(
            Monkey(
                items=[int(item) for item in items.split(",") if item.strip()],
                operator=operator,
                operand=operand,
                divisor=int(divisor),
                if_true=int(if_true),
                if_false=int(if_false),
            )
        )
    for monkey in monkeys:
        if max(monkey.if_true, monkey.if_false) >= len(monkeys):
            raise InvalidInputError("Monkey throws to a monkey that does not exist")
    return monkeys


def monkey_business(monkeys: List[Monkey], rounds: int, relief: Callable[[int], int]) -> int:
    for _ in range(rounds):
        for monkey in monkeys:
            for item in monkey.items:
                worry = relief(monkey.inspect(item))
                monkeys[monkey.target(worry)].items.append(worry)
            monkey.inspected += len(monkey.items)
            monkey.items = []
    busiest = sorted(monkey.inspected for monkey in monkeys)
    return busiest[-1] * busiest[-2]


def part1(text: str) -> int:
    return monkey_business(parse(text), 20, lambda worry: worry // 3)


def part2(text: str) -> int:
    monkeys = parse(text)
    modulus = math.lcm(*(monkey.divisor for monkey in monkeys))
    return monkey_business(monkeys, 10_000, lambda worry: worry % modulus)
