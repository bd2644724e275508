"""A race along a single track where one short cheat through walls is allowed."""

from __future__ import annotations

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .parse import parse_rune_grid

_DIRECTIONS = (UP, RIGHT, DOWN, LEFT)
_CHEAT_RADIUS = 20
_WALL = "#"

Grid = list[list[str]]


def _parse(text: str) -> tuple[Grid, Coord, Coord]:
    grid = parse_rune_grid(text)
    start = end = None
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "S":
                start = Coord(x, y)
            if char == "E":
                end = Coord(x, y)
    if start is None or end is None:
        raise ValueError("the racetrack needs both a start S and an end E")
    return grid, start, end


def _inside(grid: Grid, pos: Coord) -> bool:
    return 0 <= pos.x < len(grid[0]) and 0 <= pos.y < len(grid)


def _is_wall(grid: Grid, pos: Coord) -> bool:
    return grid[pos.y][pos.x] == _WALL


def _track(grid: Grid, start: Coord, end: Coord) -> list[Coord]:
    """The cells of the track in order from ``start`` to ``end``."""
    track = [start]
    on_track = {start}
    current = start
    while current != end:
        for direction in _DIRECTIONS:
            nxt = current + direction
            if nxt in on_track or not _inside(grid, nxt) or _is_wall(grid, nxt):
                continue
            break
        else:
            raise ValueError(f"the track ends at {current} before reaching E")
        track.append(nxt)
        on_track.add(nxt)
        current = nxt
    return track


def part1(text: str, save: int = 100) -> int:
    """Number of finishing runs, cheating through at most one wall cell,
    that take at most the honest time minus ``save``.

    Every way of entering a wall from the track and leaving it onto the track
    counts as its own run; the honest run itself counts when ``save`` is at
    most zero.
    """
    grid, start, end = _parse(text)
    track = _track(grid, start, end)
    index = {cell: i for i, cell in enumerate(track)}
    base = len(track) - 1
    limit = min(base, base - save)
    count = 1 if base <= limit else 0
    for i, cell in enumerate(track[:-1]):
        previous = track[i - 1] if i else Coord(0, 0)
        for direction in _DIRECTIONS:
            wall = cell + direction
            if wall == previous or not _inside(grid, wall) or not _is_wall(grid, wall):
                continue
            for exit_direction in _DIRECTIONS:
                landing = wall + exit_direction
                if landing in (cell, start) or not _inside(grid, landing):
                    continue
                if _is_wall(grid, landing):
                    continue
                j = index.get(landing)
                if j is None:
                    continue
                if i + 2 + (base - j) <= limit:
                    count += 1
    return count


def _cheat_offsets() -> list[tuple[int, int, int]]:
    offsets = []
    for dx in range(-_CHEAT_RADIUS, _CHEAT_RADIUS + 1):
        reach = _CHEAT_RADIUS - abs(dx)
        for dy in range(-reach, reach + 1):
            offsets.append((dx, dy, abs(dx) + abs(dy)))
    return offsets


def part2(text: str, save: int = 100) -> int:
    """Number of track cell pairs joined by a cheat of up to 20 steps that
    saves at least ``save`` picoseconds."""
    grid, start, end = _parse(text)
    track = _track(grid, start, end)
    index = {(cell.x, cell.y): i for i, cell in enumerate(track)}
    offsets = _cheat_offsets()
    count = 0
    for i, cell in enumerate(track):
        for dx, dy, distance in offsets:
            j = index.get((cell.x + dx, cell.y + dy))
            if j is None or j <= i:
                continue
            if (j - i) - distance >= save:
                count += 1
    return count