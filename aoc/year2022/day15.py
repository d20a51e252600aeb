"""Day 15: Beacon Exclusion Zone."""

import re
from typing import List, Optional, Tuple

from aoc.core.errors import InvalidInputError

SENSOR = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)

Sensor = Tuple[int, int, int, int, int]  # sx, sy, bx, by, radius


def parse(text: str) -> List[Sensor]:
    sensors = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = SENSOR.fullmatch(line.strip())
        if not match:
            raise InvalidInputError(f"Bad sensor report: {line!r}")
        sx, sy, bx, by = (int(g) for g in match.groups())
        sensors.append((sx, sy, bx, by, abs(sx - bx) + abs(sy - by)))
    return sensors


def covered_intervals(
    sensors: List[Sensor], row: int, clamp: Optional[Tuple[int, int]] = None
) -> List[Tuple[int, int]]:
    """Merged, inclusive x-intervals on `row` that lie within some sensor's range."""
    intervals = []
    for sx, sy, _, _, radius in sensors:
        half = radius - abs(sy - row)
        if half < 0:
            continue
        lo, hi = sx - half, sx + half
        if clamp is not None:
            lo, hi = max(lo, clamp[0]), min(hi, clamp[1])
            if lo > hi:
                continue
        intervals.append((lo, hi))
    intervals.sort()
    merged: List[Tuple[int, int]] = []
    for lo, hi in intervals:
        if merged and lo <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


def part1(text: str, row: int = 2_000_000) -> int:
    sensors = parse(text)
    intervals = covered_intervals(sensors, row)
    covered = sum(hi - lo + 1 for lo, hi in intervals)
    beacons = {bx for _, _, bx, by, _ in sensors if by == row}
    covered -= sum(any(lo <= bx <= hi for lo, hi in intervals) for bx in beacons)
    return covered


def tuning_frequency(x: int, y: int) -> int:
    return x * 4_000_000 + y


def part2(text: str, limit: int = 4_000_000) -> int:
    sensors = parse(text)

    def uncovered(x: int, y: int) -> bool:
        return 0 <= x <= limit and 0 <= y <= limit and all(
            abs(sx - x) + abs(sy - y) > radius for sx, sy, _, _, radius in sensors
        )

    # A single uncovered point is pinned just outside the edges of the sensor
    # diamonds, so it sits where an x + y = a edge meets an x - y = b edge.
    sums, differences = set(), set()
    for sx, sy, _, _, radius in sensors:
        for offset in (radius + 1, -radius - 1):
            sums.add(sx + sy + offset)
            differences.add(sx - sy + offset)
    for a in sums:
        for b in differences:
            if (a + b) % 2 == 0 and uncovered((a + b) // 2, (a - b) // 2):
                return tuning_frequency((a + b) // 2, (a - b) // 2)

    # Points on the border of the search area need not sit on an intersection
    for row in range(limit + 1):
        intervals = covered_intervals(sensors, row, clamp=(0, limit))
        if intervals == [(0, limit)]:
            continue
        x = 0 if not intervals or intervals[0][0] > 0 else intervals[0][1] + 1
        return tuning_frequency(x, row)
    raise InvalidInputError("No position for the distress beacon")
