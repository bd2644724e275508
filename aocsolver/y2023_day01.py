"""Calibration values: first and last digit of every line."""

from __future__ import annotations

from .common import to_int
from .parse import parse_rune_grid


def part1(text: str) -> int:
    """Sum the two-digit numbers made of each line's first and last digit."""
    total = 0
    for line in parse_rune_grid(text):
        digits = [char for char in line if "0" <= char <= "9"]
        if not digits:
            raise ValueError(f"line without digits: {''.join(line)!r}")
        total += to_int(digits[0] + digits[-1])
    return total