"""Day 24: Never Tell Me The Odds."""

import itertools
from fractions import Fraction
from typing import List, Optional, Tuple

from aoc.core.errors import InvalidInputError

Vector = Tuple[int, int, int]
Hailstone = Tuple[Vector, Vector]


def parse(text: str) -> List[Hailstone]:
    hailstones = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            position, velocity = (
                tuple(int(n) for n in half.split(",")) for half in line.split("@")
            )
        except ValueError as e:
            raise InvalidInputError(f"Bad hailstone: {line!r}") from e
        if len(position) != 3 or len(velocity) != 3:
            raise InvalidInputError(f"Bad hailstone: {line!r}")
        hailstones.append((position, velocity))
    return hailstones


def future_crossing(a: Hailstone, b: Hailstone) -> Optional[Tuple[Fraction, Fraction]]:
    """Where the XY paths of two hailstones cross, if both get there in the future."""
    (px, py, _), (vx, vy, _) = a
    (qx, qy, _), (wx, wy, _) = b
    determinant = vx * wy - vy * wx
    if determinant == 0:
        return None
    # Solve p + t*v = q + s*w
    dx, dy = qx - px, qy - py
    t = Fraction(dx * wy - dy * wx, determinant)
    s = Fraction(dx * vy - dy * vx, determinant)
    if t < 0 or s < 0:
        return None
    return px + t * vx, py + t * vy


def part1(text: str, low: int = 200_000_000_000_000, high: int = 400_000_000_000_000) -> int:
    count = 0
    for a, b in itertools.combinations(parse(text), 2):
        crossing = future_crossing(a, b)
        if crossing and all(low <= coord <= high for coord in crossing):
            count += 1
    return count


def solve_linear(matrix: List[List[Fraction]], values: List[Fraction]) -> Optional[List[Fraction]]:
    """Gauss-Jordan elimination with exact fractions; None if the system is singular."""
    size = len(values)
    rows = [row[:] + [value] for row, value in zip(matrix, values)]
    for col in range(size):
        pivot = next((r for r in range(col, size) if rows[r][col] != 0), None)
        if pivot is None:
            return None
        rows[col], rows[pivot] = rows[pivot], rows[col]
        for r in range(size):
            if r != col and rows[r][col] != 0:
                factor = rows[r][col] / rows[col][col]
                rows[r] = [x - factor * y for x, y in zip(rows[r], rows[col])]
    return [rows[i][size] / rows[i][i] for i in range(size)]


def cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def pair_equations(a: Hailstone, b: Hailstone) -> Tuple[List[List[Fraction]], List[Fraction]]:
    """
    Three linear equations in the rock's position P and velocity V.

    A rock hitting hailstone i satisfies (P - p_i) x (V - v_i) = 0. The
    non-linear P x V term cancels when two of these are subtracted, leaving
    P x (v_a - v_b) + (p_a - p_b) x V = p_a x v_a - p_b x v_b.
    """
    (pa, va), (pb, vb) = a, b
    dvx, dvy, dvz = (va[k] - vb[k] for k in range(3))
    dpx, dpy, dpz = (pa[k] - pb[k] for k in range(3))
    rhs = [x - y for x, y in zip(cross(pa, va), cross(pb, vb))]
    matrix = [
        [0, dvz, -dvy, 0, -dpz, dpy],
        [-dvz, 0, dvx, dpz, 0, -dpx],
        [dvy, -dvx, 0, -dpy, dpx, 0],
    ]
    return [[Fraction(x) for x in row] for row in matrix], [Fraction(x) for x in rhs]


def part2(text: str) -> int:
    hailstones = parse(text)
    for first, second, third in itertools.combinations(hailstones, 3):
        m1, v1 = pair_equations(first, second)
        m2, v2 = pair_equations(first, third)
        solution = solve_linear(m1 + m2, v1 + v2)
        if solution is None:
            continue
        position = solution[:3]
        if any(value.denominator != 1 for value in position):
            raise InvalidInputError("The rock does not start at integer coordinates")
        return int(sum(position))
    raise InvalidInputError("Not enough independent hailstones to place the rock")
