"""Comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter

from .parse import parse_int_grid


def _columns(text: str) -> tuple[list[int], list[int]]:
    rows = parse_int_grid(text, "   ")
    return [row[0] for row in rows], [row[1] for row in rows]


def part1(text: str) -> int:
    """Total distance between the sorted left and right lists."""
    left, right = _columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left id times its count in the right list."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(x * counts[x] for x in left)