"""Safety of reactor level reports."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable, Sequence

from .parse import parse_int_grid


def is_increasing(levels: Sequence[int]) -> bool:
    """Each step rises by 1 to 3."""
    return all(1 <= b - a <= 3 for a, b in pairwise(levels))


def is_decreasing(levels: Sequence[int]) -> bool:
    """Each step falls by 1 to 3."""
    return all(1 <= a - b <= 3 for a, b in pairwise(levels))


def _safe_with_dampener(levels: Sequence[int], check: Callable[[Sequence[int]], bool]) -> bool:
    if check(levels):
        return True
    return any(check([*levels[:i], *levels[i + 1:]]) for i in range(len(levels)))


def part1(text: str) -> int:
    """Count reports that are decreasing plus those that are increasing."""
    reports = parse_int_grid(text, " ")
    return sum(is_decreasing(r) for r in reports) + sum(is_increasing(r) for r in reports)


def part2(text: str) -> int:
    """Count reports that are safe after removing at most one level."""
    return sum(
        _safe_with_dampener(r, is_decreasing) or _safe_with_dampener(r, is_increasing)
        for r in parse_int_grid(text, " ")
    )