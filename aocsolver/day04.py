"""Word search for XMAS and crossed MAS."""

from __future__ import annotations

from .parse import parse_string_list

_DIRECTIONS = [
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
]


def part1(text: str) -> int:
    """Count occurrences of XMAS in all eight directions."""
    grid = parse_string_list(text, "\n")
    width, height = len(grid[0]), len(grid)
    count = 0
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != "X":
                continue
            for dx, dy in _DIRECTIONS:
                end_x, end_y = x + 3 * dx, y + 3 * dy
                if not (0 <= end_x < width and 0 <= end_y < height):
                    continue
                if all(
                    grid[y + k * dy][x + k * dx] == letter
                    for k, letter in enumerate("MAS", start=1)
                ):
                    count += 1
    return count


def _is_mas_pair(first: str, second: str) -> bool:
    return {first, second} == {"M", "S"}


def part2(text: str) -> int:
    """Count A cells whose two diagonals each read MAS in either direction."""
    grid = parse_string_list(text, "\n")
    width, height = len(grid[0]), len(grid)
    count = 0
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != "A" or not (0 < x < width - 1 and 0 < y < height - 1):
                continue
            if not _is_mas_pair(grid[y + 1][x + 1], grid[y - 1][x - 1]):
                continue
            if not _is_mas_pair(grid[y - 1][x + 1], grid[y + 1][x - 1]):
                continue
            count += 1
    return count