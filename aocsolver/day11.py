"""Stones that split or change every time you blink."""

from __future__ import annotations

from functools import cache

from .parse import parse_int_list


def blink(stone: int) -> list[int]:
    """The stones that ``stone`` turns into after one blink."""
    if stone == 0:
        return [1]
    digits = len(str(abs(stone)))
    if digits % 2 == 0:
        left, right = divmod(stone, 10 ** (digits // 2))
        return [left, right]
    return [stone * 2024]


def blink_n_times(stone: int, times: int) -> list[int]:
    """The stones, in order, after blinking ``times`` times."""
    stones = [stone]
    for _ in range(times):
        stones = [result for current in stones for result in blink(current)]
    return stones


@cache
def count_after_blinks(stone: int, times: int) -> int:
    """How many stones ``stone`` becomes after ``times`` blinks."""
    if times == 0:
        return 1
    return sum(count_after_blinks(result, times - 1) for result in blink(stone))


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return sum(len(blink_n_times(stone, 25)) for stone in parse_int_list(text, " "))


def part2(text: str, times: int = 75) -> int:
    """Number of stones after ``times`` blinks."""
    return sum(count_after_blinks(stone, times) for stone in parse_int_list(text, " "))