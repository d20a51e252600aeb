"""Day 7: No Space Left On Device."""

from typing import Dict, Tuple

from aoc.core.errors import InvalidInputError

DISK_SIZE = 70_000_000
NEEDED_SPACE = 30_000_000


def directory_sizes(text: str) -> Dict[Tuple[str, ...], int]:
    """Replays the terminal session and returns the total size of each directory."""
    sizes: Dict[Tuple[str, ...], int] = {(): 0}
    cwd: Tuple[str, ...] = ()
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "$":
            if len(parts) < 2:
                raise InvalidInputError("Empty command line")
            if parts[1] == "cd":
                if len(parts) != 3:
                    raise InvalidInputError(f"Bad cd command: {line!r}")
                target = parts[2]
                if target == "/":
                    cwd = ()
                elif target == "..":
                    if not cwd:
                        raise InvalidInputError("cd .. from the root directory")
                    cwd = cwd[:-1]
                else:
                    cwd = cwd + (target,)
                    sizes.setdefault(cwd, 0)
            elif parts[1] != "ls":
                raise InvalidInputError(f"Unknown command: {line!r}")
        elif parts[0] == "dir":
            sizes.setdefault(cwd + (parts[1],), 0)
        else:
            try:
                size = int(parts[0])
            except ValueError as e:
                raise InvalidInputError(f"Bad listing line: {line!r}") from e
            # A file counts towards every enclosing directory
            for depth in range(len(cwd) + 1):
                sizes[cwd[:depth]] += size
    return sizes


def part1(text: str) -> int:
    return sum(size for size in directory_sizes(text).values() if size <= 100_000)


def part2(text: str) -> int:
    sizes = directory_sizes(text)
    to_free = NEEDED_SPACE - (DISK_SIZE - sizes[()])
    return min(size for size in sizes.values() if size >= to_free)
