"""Calibrating equations with +, * and concatenation operators."""

from __future__ import annotations

from typing import Sequence

from .common import to_int
from .parse import parse_int_list


def possible_results(value: int, rest: Sequence[int], with_concat: bool) -> list[int]:
    """Every result of combining ``value`` with ``rest`` left to right.

    Results are ordered add first, then multiply, then concatenate.
    """
    if not rest:
        return [value]
    head, tail = rest[0], rest[1:]
    results = possible_results(value + head, tail, with_concat)
    results += possible_results(value * head, tail, with_concat)
    if with_concat:
        concatenated = value * 10 ** len(str(head)) + head
        results += possible_results(concatenated, tail, with_concat)
    return results


def _calibrate(text: str, with_concat: bool) -> int:
    total = 0
    for line in text.split("\n"):
        target_text, numbers_text = line.split(": ")[:2]
        target = to_int(target_text)
        numbers = parse_int_list(numbers_text, " ")
        if target in possible_results(numbers[0], numbers[1:], with_concat):
            total += target
    return total


def part1(text: str) -> int:
    """Sum of targets reachable with + and *."""
    return _calibrate(text, with_concat=False)


def part2(text: str) -> int:
    """Sum of targets reachable with +, * and concatenation."""
    return _calibrate(text, with_concat=True)