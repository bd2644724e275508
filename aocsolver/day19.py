"""Arranging towel patterns from available stripes."""

from __future__ import annotations

from functools import cache

from .parse import parse_string_list


def _parse(text: str) -> tuple[list[str], list[str]]:
    sections = parse_string_list(text, "\n\n")
    towels = parse_string_list(sections[0], ", ")
    patterns = parse_string_list(sections[1], "\n")
    return towels, patterns


def part1(text: str) -> int:
    """Number of designs that can be made from the towels."""
    towels, patterns = _parse(text)
    towel_set = set(towels)

    @cache
    def is_possible(pattern: str) -> bool:
        if pattern in towel_set:
            return True
        return any(
            pattern.startswith(towel) and is_possible(pattern[len(towel):])
            for towel in towels
        )

    return sum(is_possible(pattern) for pattern in patterns)


def part2(text: str) -> int:
    """Total number of ways to make every design."""
    towels, patterns = _parse(text)

    @cache
    def count_ways(pattern: str) -> int:
        if not pattern:
            return 1
        return sum(
            count_ways(pattern[len(towel):])
            for towel in towels
            if pattern.startswith(towel)
        )

    return sum(count_ways(pattern) for pattern in patterns)