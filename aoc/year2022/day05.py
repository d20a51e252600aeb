"""Day 5: Supply Stacks."""

import re
from typing import List, Tuple

from aoc.core.errors import InvalidInputError

MOVE = re.compile(r"^move (\d+) from (\d+) to (\d+)$")


def parse(text: str) -> Tuple[List[List[str]], List[Tuple[int, int, int]]]:
    drawing, sep, procedure = text.rstrip("\n").partition("\n\n")
    if not sep:
        raise InvalidInputError("Missing blank line between drawing and moves")

    lines = drawing.splitlines()
    labels = lines[-1].split()
    stacks: List[List[str]] = [[] for _ in labels]
    for line in reversed(lines[:-1]):
        for i in range(len(stacks)):
            col = 1 + 4 * i
            if col < len(line) and line[col] != " ":
                stacks[i].append(line[col])

    moves = []
    for line in procedure.splitlines():
        match = MOVE.match(line.strip())
        if not match:
            raise InvalidInputError(f"Bad move: {line!r}")
        count, src, dst = (int(g) for g in match.groups())
        if not (1 <= src <= len(stacks) and 1 <= dst <= len(stacks)):
            raise InvalidInputError(f"No such stack in {line!r}")
        moves.append((count, src - 1, dst - 1))
    return stacks, moves


def rearrange(text: str, keep_order: bool) -> str:
    stacks, moves = parse(text)
    for count, src, dst in moves:
        if count > len(stacks[src]):
            raise InvalidInputError(f"Stack {src + 1} has fewer than {count} crates")
        crates = stacks[src][len(stacks[src]) - count :]
        del stacks[src][len(stacks[src]) - count :]
        stacks[dst].extend(crates if keep_order else reversed(crates))
    return "".join(stack[-1] for stack in stacks if stack)


def part1(text: str) -> str:
    return rearrange(text, keep_order=False)


def part2(text: str) -> str:
    return rearrange(text, keep_order=True)
