"""Summing the products of corrupted ``mul(a,b)`` instructions."""

from __future__ import annotations

from .common import to_int

_MIN_REMAINING = 8


def _maybe_int(text: str) -> int | None:
    try:
        return to_int(text)
    except ValueError:
        return None


def _scan(text: str, conditionals: bool) -> int:
    """Walk through ``text`` adding up every well-formed multiplication.

    With ``conditionals`` set, ``do()`` and ``don't()`` switch the adding on
    and off.
    """
    pos = 0
    total = 0
    enabled = True
    while len(text) - pos >= _MIN_REMAINING:
        if conditionals:
            if text.startswith("do()", pos):
                enabled = True
                pos += 4
            if text.startswith("don't()", pos):
                enabled = False
                pos += 7
        if not text.startswith("mul(", pos):
            pos += 1
            continue
        pos += 4
        comma = text.find(",", pos)
        if comma < 0:
            raise ValueError(f"no comma after mul( at position {pos}")
        left = _maybe_int(text[pos:comma])
        if left is None:
            continue
        pos = comma + 1
        paren = text.find(")", pos)
        if paren < 0:
            raise ValueError(f"no closing parenthesis at position {pos}")
        right = _maybe_int(text[pos:paren])
        if right is None:
            continue
        if enabled:
            total += left * right
    return total


def part1(text: str) -> int:
    """Sum of all multiplications."""
    return _scan(text, conditionals=False)


def part2(text: str) -> int:
    """Sum of multiplications that are enabled by ``do()``/``don't()``."""
    return _scan(text, conditionals=True)