"""Day 21: Monkey Math."""

import operator
from fractions import Fraction
from typing import Dict, List, Tuple, Union

from aoc.core.errors import InvalidInputError

ROOT = "root"
HUMAN = "humn"

OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

Job = Union[int, Tuple[str, str, str]]


def parse(text: str) -> Dict[str, Job]:
    jobs: Dict[str, Job] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, job = line.partition(": ")
        words = job.split()
        if not sep:
            raise InvalidInputError(f"Bad monkey job: {line!r}")
        if len(words) == 1 and words[0].lstrip("-").isdigit():
            jobs[name] = int(words[0])
        elif len(words) == 3 and words[1] in OPERATIONS:
            jobs[name] = (words[0], words[1], words[2])
        else:
            raise InvalidInputError(f"Bad monkey job: {line!r}")
    if ROOT not in jobs:
        raise InvalidInputError("No root monkey")
    return jobs


def evaluate(jobs: Dict[str, Job], name: str) -> Fraction:
    job = jobs.get(name)
    if job is None:
        raise InvalidInputError(f"Unknown monkey {name}")
    if isinstance(job, int):
        return Fraction(job)
    left, op, right = job
    return OPERATIONS[op](evaluate(jobs, left), evaluate(jobs, right))


def path_to(jobs: Dict[str, Job], name: str, target: str) -> List[str]:
    """Monkeys from `name` down to `target`, or an empty list if unreachable."""
    if name == target:
        return [name]
    job = jobs.get(name)
    if job is None or isinstance(job, int):
        return []
    for child in (job[0], job[2]):
        path = path_to(jobs, child, target)
        if path:
            return [name] + path
    return []


def as_int(value: Fraction) -> int:
    if value.denominator != 1:
        raise InvalidInputError(f"Result {value} is not an integer")
    return value.numerator


def part1(text: str) -> int:
    jobs = parse(text)
    return as_int(evaluate(jobs, ROOT))


def part2(text: str) -> int:
    jobs = parse(text)
    path = path_to(jobs, ROOT, HUMAN)
    if len(path) < 2 or isinstance(jobs[ROOT], int):
        raise InvalidInputError("The human does not feed into the root monkey")

    # Root checks equality: whatever side holds the human must match the other
    left, _, right = jobs[ROOT]
    target = evaluate(jobs, right if path[1] == left else left)

    # Walk down towards the human, undoing one operation at a time
    for name, child in zip(path[1:], path[2:]):
        left, op, right = jobs[name]
        if child == left:
            target = solve_left(op, target, evaluate(jobs, right))
        else:
            target = solve_right(op, target, evaluate(jobs, left))
    return as_int(target)


def solve_left(op: str, result: Fraction, right: Fraction) -> Fraction:
    """x such that `x op right == result`."""
    if op == "+":
        return result - right
    if op == "-":
        return result + right
    if op == "*":
        return result / right
    return result * right


def solve_right(op: str, result: Fraction, left: Fraction) -> Fraction:
    """x such that `left op x == result`."""
    if op == "+":
        return result - left
    if op == "-":
        return left - result
    if op == "*":
        return result / left
    return left / result
