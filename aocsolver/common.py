"""Small helpers shared by the puzzle solvers."""

from __future__ import annotations

import re
from typing import Sequence, TypeVar

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def to_int(text: str) -> int:
    """Parse a decimal integer strictly, without surrounding whitespace."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def reverse_list(items: Sequence[T]) -> list[T]:
    """Return a reversed copy of ``items``."""
    return list(reversed(items))


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]