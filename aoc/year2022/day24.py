"""Day 24: Blizzard Basin."""

from typing import Set, Tuple

from aoc.core.errors import InvalidInputError


class Valley:
    """The valley interior, with blizzards tracked by their starting cells."""

    def __init__(self, text: str):
        lines = [line for line in text.split() if line]
        if len(lines) < 3:
            raise InvalidInputError("Valley map is too small")
        self.height = len(lines) - 2
        self.width = len(lines[0]) - 2
        self.blizzards = {ch: set() for ch in "<>^v"}
        for r, line in enumerate(lines[1:-1]):
            if len(line) != self.width + 2:
                raise InvalidInputError("Valley map is not rectangular")
            for c, ch in enumerate(line[1:-1]):
                if ch in self.blizzards:
                    self.blizzards[ch].add((r, c))
                elif ch != ".":
                    raise InvalidInputError(f"Bad valley tile {ch!r}")
        # The entrance sits above row 0 and the exit below the last row
        self.start = (-1, lines[0].index(".") - 1)
        self.goal = (self.height, lines[-1].index(".") - 1)

    def open_at(self, position: Tuple[int, int], minute: int) -> bool:
        r, c = position
        if position in (self.start, self.goal):
            return True
        if not (0 <= r < self.height and 0 <= c < self.width):
            return False
        h, w = self.height, self.width
        return not (
            (r, (c - minute) % w) in self.blizzards[">"]
            or (r, (c + minute) % w) in self.blizzards["<"]
            or ((r - minute) % h, c) in self.blizzards["v"]
            or ((r + minute) % h, c) in self.blizzards["^"]
        )

    def crossing_time(self, source, target, minute: int) -> int:
        """First minute at which `target` is reached when leaving `source` at `minute`."""
        frontier: Set[Tuple[int, int]] = {source}
        limit = minute + 4 * (self.height * self.width + 1) * max(self.height, self.width)
        while minute < limit:
            minute += 1
            frontier = {
                (r + dr, c + dc)
                for r, c in frontier
                for dr, dc in ((0, 0), (1, 0), (-1, 0), (0, 1), (0, -1))
                if self.open_at((r + dr, c + dc), minute)
            }
            if target in frontier:
                return minute
        raise InvalidInputError("The goal cannot be reached")


def part1(text: str) -> int:
    valley = Valley(text)
    return valley.crossing_time(valley.start, valley.goal, 0)


def part2(text: str) -> int:
    valley = Valley(text)
    there = valley.crossing_time(valley.start, valley.goal, 0)
    back = valley.crossing_time(valley.goal, valley.start, there)
    return valley.crossing_time(valley.start, valley.goal, back)
