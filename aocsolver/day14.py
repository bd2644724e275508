"""Robots moving on a wrapping grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .c2d import Coord
from .common import to_int

_STEPS = 100
_MAX_SECONDS = 100_000_000
_TREE_THRESHOLD = 460


@dataclass(frozen=True)
class _Robot:
    position: Coord
    velocity: Coord


def _parse_pair(text: str) -> Coord:
    x_text, y_text = text.split(",")[:2]
    return Coord(to_int(x_text), to_int(y_text))


def _parse(text: str) -> list[_Robot]:
    robots = []
    for row in text.split("\n"):
        position_text, velocity_text = row.removeprefix("p=").split(" v=")[:2]
        robots.append(_Robot(_parse_pair(position_text), _parse_pair(velocity_text)))
    return robots


def _move(position: Coord, velocity: Coord, steps: int, len_x: int, len_y: int) -> Coord:
    return Coord(
        (position.x + steps * velocity.x) % len_x,
        (position.y + steps * velocity.y) % len_y,
    )


def part1(text: str, len_x: int = 101, len_y: int = 103) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    mid_x, mid_y = (len_x - 1) // 2, (len_y - 1) // 2
    ul = ur = dl = dr = 0
    for robot in _parse(text):
        pos = _move(robot.position, robot.velocity, _STEPS, len_x, len_y)
        if pos.x < mid_x:
            if pos.y < mid_y:
                ul += 1
            elif pos.y > mid_y:
                dl += 1
        elif pos.x > mid_x:
            if pos.y < mid_y:
                ur += 1
            elif pos.y > mid_y:
                dr += 1
    return ul * ur * dl * dr


def _render(second: int, positions: list[Coord], len_x: int, len_y: int) -> str:
    occupied = set(positions)
    rows = [
        "".join("*" if Coord(x, y) in occupied else "." for x in range(len_x))
        for y in range(len_y)
    ]
    return "\n".join([f"Iteration {second}", *rows])


def part2(text: str, len_x: int = 101, len_y: int = 103) -> int:
    """First second at which most robots gather in a tree shape, or 0."""
    robots = _parse(text)
    bottom_middle = Coord((len_x - 1) // 2, len_y - 1)
    # Positions repeat after lcm(len_x, len_y) seconds, so searching longer is futile.
    limit = min(_MAX_SECONDS, math.lcm(len_x, len_y))
    positions = [r.position for r in robots]
    for second in range(1, limit + 1):
        positions = [
            _move(pos, r.velocity, 1, len_x, len_y) for pos, r in zip(positions, robots)
        ]
        in_tree = sum(
            1 for pos in positions if bottom_middle.manhattan_distance(pos) < len_y + 2
        )
        if in_tree > _TREE_THRESHOLD:
            print(_render(second, positions, len_x, len_y))
            return second
    return 0