"""Day 19: Not Enough Minerals."""

import math
import re
from dataclasses import dataclass
from typing import List, Optional

from aoc.core.errors import InvalidInputError

BLUEPRINT = re.compile(
    r"Blueprint (\d+):\s*"
    r"Each ore robot costs (\d+) ore.\s*"
    r"Each clay robot costs (\d+) ore.\s*"
    r"Each obsidian robot costs (\d+) ore and (\d+) clay.\s*"
    r"Each geode robot costs (\d+) ore and (\d+) obsidian."
)


@dataclass(frozen=True)
class Blueprint:
    number: int
    ore_robot_ore: int
    clay_robot_ore: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int


def parse(text: str) -> List[Blueprint]:
    blueprints = [Blueprint(*map(int, m.groups())) for m in BLUEPRINT.finditer(text)]
    if not blueprints:
        raise InvalidInputError("No blueprints found")
    return blueprints


def wait_time(cost: int, stock: int, rate: int) -> Optional[int]:
    """Minutes until `cost` is affordable, or None if it never will be."""
    if stock >= cost:
        return 0
    if rate == 0:
        return None
    return -(-(cost - stock) // rate)


def max_geodes(bp: Blueprint, minutes: int) -> int:
    """
    Depth-first search over which robot to build next.

    Rather than simulating each minute the search skips ahead to the minute the
    next chosen robot can be built. Geodes are credited for the whole remaining
    time as soon as a geode robot is built.
    """
    max_ore_spend = max(
        bp.ore_robot_ore, bp.clay_robot_ore, bp.obsidian_robot_ore, bp.geode_robot_ore
    )
    best = 0

    def optimistic_geodes(time_left, obsidian_bots, obsidian, geodes):
        # Relaxed rules: ore is free and an obsidian robot can be built
        # alongside a geode robot every minute
        for remaining in range(time_left, 0, -1):
            if obsidian >= bp.geode_robot_obsidian:
                obsidian -= bp.geode_robot_obsidian
                geodes += remaining - 1
            obsidian += obsidian_bots
            obsidian_bots += 1
        return geodes

    def search(time_left, ore_bots, clay_bots, obsidian_bots, ore, clay, obsidian, geodes):
        nonlocal best
        best = max(best, geodes)
        if optimistic_geodes(time_left, obsidian_bots, obsidian, geodes) <= best:
            return

        wait = wait_time(bp.geode_robot_ore, ore, ore_bots)
        wait_obsidian = wait_time(bp.geode_robot_obsidian, obsidian, obsidian_bots)
        if wait is not None and wait_obsidian is not None:
            wait = max(wait, wait_obsidian)
            left = time_left - wait - 1
            if left > 0:
                search(
                    left, ore_bots, clay_bots, obsidian_bots,
                    ore + ore_bots * (wait + 1) - bp.geode_robot_ore,
                    clay + clay_bots * (wait + 1),
                    obsidian + obsidian_bots * (wait + 1) - bp.geode_robot_obsidian,
                    geodes + left,
                )
        if obsidian_bots < bp.geode_robot_obsidian:
            wait = wait_time(bp.obsidian_robot_ore, ore, ore_bots)
            wait_clay = wait_time(bp.obsidian_robot_clay, clay, clay_bots)
            if wait is not None and wait_clay is not None:
                wait = max(wait, wait_clay)
                left = time_left - wait - 1
                if left > 1:
                    search(
                        left, ore_bots, clay_bots, obsidian_bots + 1,
                        ore + ore_bots * (wait + 1) - bp.obsidian_robot_ore,
                        clay + clay_bots * (wait + 1) - bp.obsidian_robot_clay,
                        obsidian + obsidian_bots * (wait + 1),
                        geodes,
                    )

        if clay_bots < bp.obsidian_robot_clay:
            wait = wait_time(bp.clay_robot_ore, ore, ore_bots)
            left = time_left - wait - 1
            if left > 2:
                search(
                    left, ore_bots, clay_bots + 1, obsidian_bots,
                    ore + ore_bots * (wait + 1) - bp.clay_robot_ore,
                    clay + clay_bots * (wait + 1),
                    obsidian + obsidian_bots * (wait + 1),
                    geodes,
                )

        if ore_bots < max_ore_spend:
            wait = wait_time(bp.ore_robot_ore, ore, ore_bots)
            left = time_left - wait - 1
            if left > 1:
                search(
                    left, ore_bots + 1, clay_bots, obsidian_bots,
                    ore + ore_bots * (wait + 1) - bp.ore_robot_ore,
                    clay + clay_bots * (wait + 1),
                    obsidian + obsidian_bots * (wait + 1),
                    geodes,
                )

    search(minutes, 1, 0, 0, 0, 0, 0, 0)
    return best


def part1(text: str) -> int:
    return sum(bp.number * max_geodes(bp, 24) for bp in parse(text))


def part2(text: str) -> int:
    return math.prod(max_geodes(bp, 32) for bp in parse(text)[:3])
