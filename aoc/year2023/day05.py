"""Day 5: If You Give A Seed A Fertilizer."""

from typing import List, Tuple

from aoc.core.errors import InvalidInputError

# (destination start, source start, length)
Mapping = List[Tuple[int, int, int]]
Interval = Tuple[int, int]  # half-open [start, end)


def parse(text: str) -> Tuple[List[int], List[Mapping]]:
    blocks = text.strip().split("\n\n")
    header, _, seeds = blocks[0].partition(":")
    if header.strip() != "seeds":
        raise InvalidInputError("Almanac must start with the seeds")
    try:
        seed_numbers = [int(n) for n in seeds.split()]
        mappings = []
        for block in blocks[1:]:
            lines = block.splitlines()
            if not lines[0].endswith("map:"):
                raise InvalidInputError(f"Bad map header: {lines[0]!r}")
            mapping = []
            for line in lines[1:]:
                destination, source, length = (int(n) for n in line.split())
                mapping.append((destination, source, length))
            mappings.append(mapping)
    except ValueError as e:
        raise InvalidInputError(f"Bad almanac numbers: {e}") from e
    return seed_numbers, mappings


def map_intervals(intervals: List[Interval], mapping: Mapping) -> List[Interval]:
    """Sends each interval through one map, splitting it where map ranges begin and end."""
    result = []
    pending = list(intervals)
    while pending:
        start, end = pending.pop()
        for destination, source, length in mapping:
            lo, hi = max(start, source), min(end, source + length)
            if lo >= hi:
                continue
            result.append((lo - source + destination, hi - source + destination))
            # Parts that fall outside this range go round again
            if start < lo:
                pending.append((start, lo))
            if hi < end:
                pending.append((hi, end))
            break
        else:
            # Unmapped numbers map to themselves
            result.append((start, end))
    return result


def lowest_location(intervals: List[Interval], mappings: List[Mapping]) -> int:
    for mapping in mappings:
        intervals = map_intervals(intervals, mapping)
    return min(start for start, _ in intervals)


def part1(text: str) -> int:
    seeds, mappings = parse(text)
    return lowest_location([(seed, seed + 1) for seed in seeds], mappings)


def part2(text: str) -> int:
    seeds, mappings = parse(text)
    if len(seeds) % 2:
        raise InvalidInputError("Seed ranges must come in pairs")
    ranges = [(start, start + length) for start, length in zip(seeds[::2], seeds[1::2])]
    return lowest_location(ranges, mappings)
