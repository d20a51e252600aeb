"""Day 13: Distress Signal."""

import functools
import json
from typing import List, Union

from aoc.core.errors import InvalidInputError

Packet = Union[int, List["Packet"]]

DIVIDERS = ([[2]], [[6]])


def compare(left: Packet, right: Packet) -> int:
    """Negative if left is in the right order before right, positive if not."""
    if isinstance(left, int) and isinstance(right, int):
        return left - right
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return len(left) - len(right)


def well_formed(packet) -> bool:
    if isinstance(packet, list):
        return all(well_formed(item) for item in packet)
    return type(packet) is int


def parse_packet(line: str) -> Packet:
    try:
        packet = json.loads(line)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Bad packet: {line!r}") from e
    if not isinstance(packet, list):
        raise InvalidInputError(f"Packet must be a list: {line!r}")
    if not well_formed(packet):
        raise InvalidInputError(f"Packets hold only integers and lists: {line!r}")
    return packet


def packets(text: str) -> List[Packet]:
    return [parse_packet(line) for line in text.splitlines() if line.strip()]


def part1(text: str) -> int:
    all_packets = packets(text)
    if len(all_packets) % 2:
        raise InvalidInputError("Packets must come in pairs")
    pairs = zip(all_packets[::2], all_packets[1::2])
    return sum(i for i, (left, right) in enumerate(pairs, 1) if compare(left, right) < 0)


def part2(text: str) -> int:
    ordered = sorted(packets(text) + list(DIVIDERS), key=functools.cmp_to_key(compare))
    return (ordered.index(DIVIDERS[0]) + 1) * (ordered.index(DIVIDERS[1]) + 1)
