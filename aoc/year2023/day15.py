"""Day 15: Lens Library."""

import re
from typing import Dict, List

from aoc.core.errors import InvalidInputError

STEP = re.compile(r"([a-z]+)(=(\d)|-)")


def hash_string(string: str) -> int:
    value = 0
    for ch in string:
        value = (value + ord(ch)) * 17 % 256
    return value


def steps(text: str) -> List[str]:
    return [step for step in text.replace("\n", "").split(",") if step]


def part1(text: str) -> int:
    return sum(hash_string(step) for step in steps(text))


def part2(text: str) -> int:
    # Dicts keep insertion order, which is exactly the lens order in a box
    boxes: List[Dict[str, int]] = [{} for _ in range(256)]
    for step in steps(text):
        match = STEP.fullmatch(step)
        if not match:
            raise InvalidInputError(f"Bad initialization step: {step!r}")
        label, _, focal_length = match.groups()
        box = boxes[hash_string(label)]
        if focal_length is None:
            box.pop(label, None)
        else:
            box[label] = int(focal_length)
    return sum(
        b * slot * focal_length
        for b, box in enumerate(boxes, 1)
        for slot, focal_length in enumerate(box.values(), 1)
    )
