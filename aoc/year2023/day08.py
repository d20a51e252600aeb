"""Day 8: Haunted Wasteland."""

import math
import re
from typing import Callable, Dict, Tuple

from aoc.core.errors import InvalidInputError

NODE = re.compile(r"(\w+) = \((\w+), (\w+)\)")


def parse(text: str) -> Tuple[str, Dict[str, Tuple[str, str]]]:
    instructions, _, body = text.strip().partition("\n\n")
    instructions = instructions.strip()
    if not instructions or set(instructions) - {"L", "R"}:
        raise InvalidInputError("Instructions must be a string of L and R")
    network = {}
    for line in body.splitlines():
        match = NODE.fullmatch(line.strip())
        if not match:
            raise InvalidInputError(f"Bad node: {line!r}")
        network[match.group(1)] = (match.group(2), match.group(3))
    for name, targets in network.items():
        missing = [t for t in targets if t not in network]
        if missing:
            raise InvalidInputError(f"Node {name} leads to unknown node {missing[0]}")
    return instructions, network


def steps_until(
    instructions: str,
    network: Dict[str, Tuple[str, str]],
    start: str,
    done: Callable[[str], bool],
) -> int:
    node = start
    steps = 0
    # A full pass over the instructions per node is enough to detect a cycle
    limit = len(instructions) * (len(network) + 1)
    while not done(node):
        if steps > limit:
            raise InvalidInputError(f"No end reachable from {start}")
        left, right = network[node]
        node = left if instructions[steps % len(instructions)] == "L" else right
        steps += 1
    return steps


def part1(text: str) -> int:
    instructions, network = parse(text)
    if "AAA" not in network:
        raise InvalidInputError("No node AAA")
    return steps_until(instructions, network, "AAA", lambda node: node == "ZZZ")


def part2(text: str) -> int:
    instructions, network = parse(text)
    # Every ghost loops back to its exit on a fixed period, so the answer is
    # the least common multiple of the first arrivals
    return math.lcm(
        *(
            steps_until(instructions, network, node, lambda n: n.endswith("Z"))
            for node in network
            if node.endswith("A")
        )
    )
