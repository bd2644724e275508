"""Ordering print-queue updates by page rules."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Sequence

from .parse import parse_int_list


def _parse(text: str) -> tuple[list[list[int]], list[list[int]]]:
    sections = text.split("\n\n")
    rules = [parse_int_list(line, "|") for line in sections[0].split("\n")]
    updates = [parse_int_list(line, ",") for line in sections[1].split("\n")]
    return rules, updates


def _index(update: Sequence[int], page: int) -> int:
    try:
        return update.index(page)
    except ValueError:
        return -1


def _follows_rule(update: Sequence[int], rule: Sequence[int]) -> bool:
    first = _index(update, rule[0])
    second = _index(update, rule[1])
    return first == -1 or second == -1 or first < second


def _is_ordered(update: Sequence[int], rules: Sequence[Sequence[int]]) -> bool:
    return all(_follows_rule(update, rule) for rule in rules)


def _comparator(rules: Sequence[Sequence[int]]) -> Callable[[int, int], int]:
    def compare(a: int, b: int) -> int:
        for rule in rules:
            if rule[0] == a and rule[1] == b:
                return -1
            if rule[1] == a and rule[0] == b:
                return 1
        return 0

    return compare


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = _parse(text)
    return sum(u[len(u) // 2] for u in updates if _is_ordered(u, rules))


def part2(text: str) -> int:
    """Sum of middle pages of incorrectly ordered updates after sorting."""
    rules, updates = _parse(text)
    key = cmp_to_key(_comparator(rules))
    total = 0
    for update in updates:
        if _is_ordered(update, rules):
            continue
        fixed = sorted(update, key=key)
        total += fixed[len(fixed) // 2]
    return total