"""
Dispatch from (year, day, part) to a day's solution.
"""

import time
from typing import List, Optional, Tuple, Union

import structlog

from aoc import year2022, year2023
from aoc.core.error_handler import log_exception
from aoc.core.errors import InvalidInputError, PuzzleNotFoundError

logger = structlog.get_logger(__name__)

Answer = Union[int, str]

YEARS = {
    2022: year2022.DAYS,
    2023: year2023.DAYS,
}


def available_days(year: Optional[int] = None) -> List[Tuple[int, int]]:
    """Returns the sorted (year, day) pairs that have a solution."""
    if year is not None and year not in YEARS:
        raise PuzzleNotFoundError(f"Invalid year: {year}")
    years = [year] if year is not None else sorted(YEARS)
    return [(y, d) for y in years for d in sorted(YEARS[y])]


def _solver(year: int, day: int, part: int):
    days = YEARS.get(year)
    if days is None:
        raise PuzzleNotFoundError(f"Invalid year: {year}")
    module = days.get(day)
    if module is None:
        raise PuzzleNotFoundError(f"Invalid day: {day}")
    if part == 1:
        return module.part1
    if part == 2:
        return module.part2
    raise PuzzleNotFoundError(f"Invalid part: {part}")


@log_exception
def solve(year: int, day: int, part: int, text: str) -> Answer:
    """Solves one part of one day's puzzle for the given input text."""
    solver = _solver(year, day, part)
    start = time.perf_counter()
    answer = solver(text)
    logger.info(
        "Puzzle solved",
        year=year,
        day=day,
        part=part,
        elapsed_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return answer


def solve_file(year: int, day: int, part: int, path: str) -> Answer:
    """Reads the puzzle input at `path` and solves it."""
    # Fail on a bad year/day/part before touching the file system
    _solver(year, day, part)
    logger.debug("Reading puzzle input", path=path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"{path} is not UTF-8 text") from e
    return solve(year, day, part, text)