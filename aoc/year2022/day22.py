"""Day 22: Monkey Map."""

import math
import re
from typing import Dict, List, Tuple, Union

from aoc.core.errors import InvalidInputError

# Facings in password order: right, down, left, up
STEPS = [(0, 1), (1, 0), (0, -1), (-1, 0)]

Vector = Tuple[int, int, int]
State = Tuple[int, int, int]  # row, col, facing
Instruction = Union[int, str]


def parse(text: str) -> Tuple[List[str], List[Instruction]]:
    board, sep, path = text.rstrip("\n").partition("\n\n")
    if not sep:
        raise InvalidInputError("Missing blank line before the path")
    rows = board.split("\n")
    width = max(len(row) for row in rows)
    rows = [row.ljust(width) for row in rows]
    if set("".join(rows)) - {" ", ".", "#"}:
        raise InvalidInputError("Unexpected tile character")
    path = path.strip()
    instructions: List[Instruction] = [
        int(token) if token.isdigit() else token for token in re.findall(r"\d+|[LR]", path)
    ]
    if "".join(str(i) for i in instructions) != path:
        raise InvalidInputError(f"Bad path: {path!r}")
    return rows, instructions


def follow(rows: List[str], instructions: List[Instruction], wrap) -> int:
    row, col, facing = 0, rows[0].index("."), 0
    for instruction in instructions:
        if instruction == "R":
            facing = (facing + 1) % 4
        elif instruction == "L":
            facing = (facing - 1) % 4
        else:
            for _ in range(instruction):
                dr, dc = STEPS[facing]
                nr, nc, nf = row + dr, col + dc, facing
                if not (0 <= nr < len(rows) and 0 <= nc < len(rows[0])) or rows[nr][nc] == " ":
                    nr, nc, nf = wrap(row, col, facing)
                if rows[nr][nc] == "#":
                    break
                row, col, facing = nr, nc, nf
    return 1000 * (row + 1) + 4 * (col + 1) + facing


def flat_wrap(rows: List[str]):
    def wrap(row: int, col: int, facing: int) -> State:
        dr, dc = STEPS[facing]
        # Walk backwards to the far edge of the board
        while 0 <= row - dr < len(rows) and 0 <= col - dc < len(rows[0]) and rows[row - dr][col - dc] != " ":
            row, col = row - dr, col - dc
        return row, col, facing

    return wrap


def cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def neg(a: Vector) -> Vector:
    return (-a[0], -a[1], -a[2])


def dot(a: Vector, b: Vector) -> int:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cube_wrap(rows: List[str]):
    """
    Folds the board into a cube and returns a wrap function for walking off a face.

    Each face gets a 3D frame: `right` and `down` are the directions of
    increasing column and row, `normal` points out of the cube. Positions are
    cell centres scaled by two, so the cube spans [-n, n] on every axis and all
    coordinates stay integral.
    """
    tiles = sum(ch != " " for row in rows for ch in row)
    n = math.isqrt(tiles // 6)
    if 6 * n * n != tiles:
        raise InvalidInputError("The board is not the net of a cube")

    faces = {
        (r // n, c // n)
        for r in range(0, len(rows), n)
        for c in range(0, len(rows[0]), n)
        if rows[r][c] != " "
    }
    if len(faces) != 6:
        raise InvalidInputError("The board is not the net of a cube")

    # Fold the net outwards from the first face
    first = min(faces)
    frames: Dict[Tuple[int, int], Tuple[Vector, Vector, Vector]] = {
        first: ((1, 0, 0), (0, 1, 0), (0, 0, -1))
    }
    pending = [first]
    while pending:
        face = pending.pop()
        right, down, normal = frames[face]
        fr, fc = face
        for neighbor, frame in (
            ((fr, fc + 1), (neg(normal), down, right)),
            ((fr + 1, fc), (right, neg(normal), down)),
            ((fr, fc - 1), (normal, down, neg(right))),
            ((fr - 1, fc), (right, normal, neg(down))),
        ):
            if neighbor in faces and neighbor not in frames:
                frames[neighbor] = frame
                pending.append(neighbor)
    by_normal = {frame[2]: face for face, frame in frames.items()}
    if len(by_normal) != 6:
        raise InvalidInputError("The board does not fold into a cube")

    def travel(frame, facing: int) -> Vector:
        right, down, _ = frame
        return [right, down, neg(right), neg(down)][facing]

    def wrap(row: int, col: int, facing: int) -> State:
        face = (row // n, col // n)
        right, down, normal = frames[face]
        i, j = row % n, col % n
        position = tuple(
            n * normal[k] + (2 * j - (n - 1)) * right[k] + (2 * i - (n - 1)) * down[k]
            for k in range(3)
        )
        heading = travel(frames[face], facing)

        # Over the edge: onto the face whose normal is the old heading, now
        # heading into the cube along the old face
        new_face = by_normal[heading]
        new_right, new_down, new_normal = frames[new_face]
        position = tuple(position[k] + heading[k] - normal[k] for k in range(3))
        new_heading = neg(normal)
        offset = tuple(position[k] - n * new_normal[k] for k in range(3))
        new_j = (dot(offset, new_right) + n - 1) // 2
        new_i = (dot(offset, new_down) + n - 1) // 2
        new_facing = [travel(frames[new_face], f) for f in range(4)].index(new_heading)
        return new_face[0] * n + new_i, new_face[1] * n + new_j, new_facing

    return wrap


def part1(text: str) -> int:
    rows, instructions = parse(text)
    return follow(rows, instructions, flat_wrap(rows))


def part2(text: str) -> int:
    rows, instructions = parse(text)
    return follow(rows, instructions, cube_wrap(rows))
