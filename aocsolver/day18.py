"""Finding a path through a memory grid as bytes fall."""

from __future__ import annotations

from collections.abc import Collection

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .common import to_int

_DIRECTIONS = (UP, DOWN, RIGHT, LEFT)
_ORIGIN = Coord(0, 0)


def _parse(text: str) -> list[Coord]:
    coords = []
    for row in text.split("\n"):
        x_text, y_text = row.split(",")[:2]
        coords.append(Coord(to_int(x_text), to_int(y_text)))
    return coords


def _shortest_path(corrupted: Collection[Coord], end: Coord) -> int | None:
    """Steps from the origin to ``end`` avoiding ``corrupted``, or None."""
    visited = {_ORIGIN}
    current = [_ORIGIN]
    steps = 0
    while current:
        steps += 1
        following = []
        for pos in current:
            for direction in _DIRECTIONS:
                nxt = pos + direction
                if not (0 <= nxt.x <= end.x and 0 <= nxt.y <= end.y):
                    continue
                if nxt in visited or nxt in corrupted:
                    continue
                if nxt == end:
                    return steps
                visited.add(nxt)
                following.append(nxt)
        current = following
    return None


def part1(text: str, end: Coord = Coord(70, 70), fallen: int = 1024) -> int:
    """Fewest steps to ``end`` after ``fallen`` bytes have landed, or 0."""
    corrupted = set(_parse(text)[:fallen])
    steps = _shortest_path(corrupted, end)
    return 0 if steps is None else steps


def part2(text: str, end: Coord = Coord(70, 70), first: int = 383) -> str | None:
    """The ``x,y`` of the first byte that cuts off ``end``, trying ``first`` bytes upward.

    The last byte of the input is never tried; None if no tried byte blocks the path.
    """
    falling = _parse(text)
    for count in range(first, len(falling)):
        if _shortest_path(set(falling[:count]), end) is None:
            blocker = falling[count - 1]
            return f"{blocker.x},{blocker.y}"
    return None