"""Day 19: Aplenty."""

import math
import re
from typing import Dict, List, Optional, Tuple

from aoc.core.errors import InvalidInputError

WORKFLOW = re.compile(r"(\w+)\{(.*)\}")
RULE = re.compile(r"([xmas])([<>])(\d+):(\w+)")
PART = re.compile(r"\{x=(\d+),m=(\d+),a=(\d+),s=(\d+)\}")

# (category, comparison, value, target); the last rule of a workflow has no condition
Rule = Tuple[Optional[str], Optional[str], int, str]
Ranges = Dict[str, Tuple[int, int]]  # inclusive bounds per category


def parse(text: str) -> Tuple[Dict[str, List[Rule]], List[Dict[str, int]]]:
    workflow_block, _, part_block = text.strip().partition("\n\n")
    workflows = {}
    for line in workflow_block.split():
        match = WORKFLOW.fullmatch(line)
        if not match:
            raise InvalidInputError(f"Bad workflow: {line!r}")
        rules: List[Rule] = []
        *conditions, fallback = match.group(2).split(",")
        for condition in conditions:
            rule = RULE.fullmatch(condition)
            if not rule:
                raise InvalidInputError(f"Bad rule: {condition!r}")
            category, comparison, value, target = rule.groups()
            rules.append((category, comparison, int(value), target))
        rules.append((None, None, 0, fallback))
        workflows[match.group(1)] = rules
    if "in" not in workflows:
        raise InvalidInputError("No workflow named 'in'")

    parts = []
    for line in part_block.split():
        match = PART.fullmatch(line)
        if not match:
            raise InvalidInputError(f"Bad part rating: {line!r}")
        parts.append(dict(zip("xmas", map(int, match.groups()))))
    return workflows, parts


def accepted(workflows: Dict[str, List[Rule]], part: Dict[str, int]) -> bool:
    name = "in"
    while name not in ("A", "R"):
        for category, comparison, value, target in workflows[name]:
            if category is None:
                name = target
                break
            rating = part[category]
            if (rating < value) if comparison == "<" else (rating > value):
                name = target
                break
    return name == "A"


def count_accepted(workflows: Dict[str, List[Rule]], name: str, ranges: Ranges) -> int:
    """Number of rating combinations within `ranges` that `name` ends up accepting."""
    if name == "R":
        return 0
    if name == "A":
        return math.prod(hi - lo + 1 for lo, hi in ranges.values())
    total = 0
    for category, comparison, value, target in workflows[name]:
        if category is None:
            total += count_accepted(workflows, target, ranges)
            break
        lo, hi = ranges[category]
        if comparison == "<":
            matching, rest = (lo, min(hi, value - 1)), (max(lo, value), hi)
        else:
            matching, rest = (max(lo, value + 1), hi), (lo, min(hi, value))
        if matching[0] <= matching[1]:
            total += count_accepted(workflows, target, {**ranges, category: matching})
        if rest[0] > rest[1]:
            break
        ranges = {**ranges, category: rest}
    return total


def part1(text: str) -> int:
    workflows, parts = parse(text)
    return sum(sum(part.values()) for part in parts if accepted(workflows, part))


def part2(text: str) -> int:
    workflows, _ = parse(text)
    return count_accepted(workflows, "in", {category: (1, 4000) for category in "xmas"})
