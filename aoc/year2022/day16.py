"""Day 16: Proboscidea Volcanium."""

import re
from collections import deque
from typing import Dict, List, Tuple

from aoc.core.errors import InvalidInputError

VALVE = re.compile(r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? (.+)")
START = "AA"


def parse(text: str) -> Tuple[Dict[str, int], Dict[str, List[str]]]:
    flows, tunnels = {}, {}
    for line in text.splitlines():
        if not line.strip():
            continue
        match = VALVE.fullmatch(line.strip())
        if not match:
            raise InvalidInputError(f"Bad valve report: {line!r}")
        name, rate, targets = match.groups()
        flows[name] = int(rate)
        tunnels[name] = [t.strip() for t in targets.split(",")]
    if START not in flows:
        raise InvalidInputError(f"No valve named {START}")
    for targets in tunnels.values():
        for target in targets:
            if target not in flows:
                raise InvalidInputError(f"Tunnel to unknown valve {target}")
    return flows, tunnels


def distances_from(source: str, tunnels: Dict[str, List[str]]) -> Dict[str, int]:
    distances = {source: 0}
    queue = deque([source])
    while queue:
        valve = queue.popleft()
        for neighbor in tunnels[valve]:
            if neighbor not in distances:
                distances[neighbor] = distances[valve] + 1
                queue.append(neighbor)
    return distances


def best_pressure_by_valve_set(text: str, minutes: int) -> Dict[int, int]:
    """
    Maximum pressure released for every set of valves that can be opened in time.

    Only valves with a positive flow rate matter, so the search jumps straight
    between them using precomputed shortest distances. Sets are bitmasks over
    those valves.
    """
    flows, tunnels = parse(text)
    useful = [name for name, rate in flows.items() if rate > 0]
    distances = {name: distances_from(name, tunnels) for name in useful + [START]}

    best: Dict[int, int] = {}

    def visit(valve: str, time_left: int, opened: int, pressure: int) -> None:
        if best.get(opened, -1) < pressure:
            best[opened] = pressure
        for i, target in enumerate(useful):
            bit = 1 << i
            if opened & bit or target not in distances[valve]:
                continue
            remaining = time_left - distances[valve][target] - 1
            if remaining > 0:
                visit(target, remaining, opened | bit, pressure + flows[target] * remaining)

    visit(START, minutes, 0, 0)
    return best


def part1(text: str) -> int:
    return max(best_pressure_by_valve_set(text, 30).values())


def part2(text: str) -> int:
    # You and the elephant open disjoint sets of valves
    ranked = sorted(best_pressure_by_valve_set(text, 26).items(), key=lambda kv: -kv[1])
    answer = 0
    for i, (mine, my_pressure) in enumerate(ranked):
        if my_pressure * 2 < answer:
            break
        for theirs, their_pressure in ranked[i:]:
            if my_pressure + their_pressure <= answer:
                break
            if not mine & theirs:
                answer = my_pressure + their_pressure
    return answer
