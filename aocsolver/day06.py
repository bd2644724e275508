"""A guard patrolling a lab, turning right at obstacles."""

from __future__ import annotations

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .parse import parse_rune_grid

_START_DIRECTIONS = {"^": UP, "v": DOWN, "<": LEFT, ">": RIGHT}
_TURN_RIGHT = {UP: RIGHT, RIGHT: DOWN, DOWN: LEFT, LEFT: UP}

Grid = list[list[str]]


def _find_guard(field: Grid) -> tuple[Coord, Coord]:
    found: tuple[Coord, Coord] | None = None
    for y, row in enumerate(field):
        for x, char in enumerate(row):
            if char in _START_DIRECTIONS:
                found = (Coord(x, y), _START_DIRECTIONS[char])
    if found is None:
        raise ValueError("no guard in the map")
    return found


def _step(field: Grid, pos: Coord, direction: Coord,
          block: Coord | None) -> tuple[Coord, Coord] | None:
    """Next position and heading, or None if the guard leaves or is boxed in."""
    width, height = len(field[0]), len(field)
    for _ in range(4):
        nxt = pos + direction
        if not (0 <= nxt.x < width and 0 <= nxt.y < height):
            return None
        if field[nxt.y][nxt.x] != "#" and nxt != block:
            return nxt, direction
        direction = _TURN_RIGHT[direction]
    return None


def _patrol(field: Grid, pos: Coord, direction: Coord,
            block: Coord | None = None) -> tuple[set[Coord], bool]:
    """Visited positions and whether the guard ends up in a loop."""
    seen: set[tuple[Coord, Coord]] = set()
    visited: set[Coord] = set()
    while (pos, direction) not in seen:
        seen.add((pos, direction))
        visited.add(pos)
        step = _step(field, pos, direction, block)
        if step is None:
            return visited, False
        pos, direction = step
    return visited, True


def part1(text: str) -> int:
    """Number of distinct positions the guard visits."""
    field = parse_rune_grid(text)
    visited, _ = _patrol(field, *_find_guard(field))
    return len(visited)


def part2(text: str) -> int:
    """Number of cells where one extra obstruction traps the guard in a loop."""
    field = parse_rune_grid(text)
    start, direction = _find_guard(field)
    visited, looped = _patrol(field, start, direction)
    width, height = len(field[0]), len(field)
    # An obstruction off the original path never changes the patrol.
    amount = (width * height - len(visited)) if looped else 0
    for block in visited:
        _, trapped = _patrol(field, start, direction, block)
        amount += trapped
    return amount