"""Hiking trails climbing from height 0 to height 9."""

from __future__ import annotations

from .c2d import Coord
from .parse import parse_digit_grid


def _trail_ends(text: str, distinct: bool) -> int:
    heights = parse_digit_grid(text)
    len_x, len_y = len(heights[0]), len(heights)
    trailheads = [
        Coord(x, y)
        for y, row in enumerate(heights)
        for x, height in enumerate(row)
        if height == 0
    ]
    total = 0
    for head in trailheads:
        current = [head]
        for level in range(1, 10):
            reached = [
                n
                for pos in current
                for n in pos.neighbours(len_x, len_y)
                if heights[n.y][n.x] == level
            ]
            current = list(dict.fromkeys(reached)) if distinct else reached
        total += len(current)
    return total


def part1(text: str) -> int:
    """Sum of trailhead scores: distinct peaks reachable from each trailhead."""
    return _trail_ends(text, distinct=True)


def part2(text: str) -> int:
    """Sum of trailhead ratings: distinct trails from each trailhead."""
    return _trail_ends(text, distinct=False)