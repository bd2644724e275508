"""A robot pushing boxes around a warehouse."""

from __future__ import annotations

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .parse import parse_rune_grid

_MOVES = {"^": UP, "v": DOWN, "<": LEFT, ">": RIGHT}
_WIDEN = {"#": "##", "O": "[]", ".": "..", "@": "@."}

Grid = list[list[str]]


def _parse(text: str, wide: bool) -> tuple[Grid, list[Coord]]:
    sections = text.split("\n\n")
    layout = sections[0]
    if wide:
        layout = "".join(_WIDEN.get(char, char) for char in layout)
    moves = [_MOVES[char] for char in sections[1] if char in _MOVES]
    return parse_rune_grid(layout), moves


def _find_robot(grid: Grid) -> Coord:
    found = None
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "@":
                found = Coord(x, y)
    if found is None:
        raise ValueError("no robot in the warehouse")
    return found


def _gps_sum(grid: Grid, box: str) -> int:
    return sum(
        100 * y + x for y, row in enumerate(grid) for x, char in enumerate(row) if char == box
    )


def part1(text: str) -> int:
    """Sum of box GPS coordinates after all moves."""
    grid, moves = _parse(text, wide=False)
    pos = _find_robot(grid)
    for direction in moves:
        first = pos + direction
        target = first
        while grid[target.y][target.x] == "O":
            target = target + direction
        if grid[target.y][target.x] != ".":
            continue
        if target != first:
            grid[target.y][target.x] = "O"
        grid[first.y][first.x] = "@"
        grid[pos.y][pos.x] = "."
        pos = first
    return _gps_sum(grid, "O")


class _WideWarehouse:
    """A warehouse whose boxes are two cells wide."""

    def __init__(self, grid: Grid):
        self.grid = grid

    def _at(self, pos: Coord) -> str:
        return self.grid[pos.y][pos.x]

    def _set(self, pos: Coord, char: str) -> None:
        self.grid[pos.y][pos.x] = char

    def can_push(self, pos: Coord, direction: Coord) -> bool:
        nxt = pos + direction
        cell = self._at(nxt)
        if cell == ".":
            return True
        if cell == "#":
            return False
        if direction.y == 0:
            return self.can_push(nxt, direction)
        other_half = nxt + (RIGHT if cell == "[" else LEFT)
        return self.can_push(nxt, direction) and self.can_push(other_half, direction)

    def push(self, pos: Coord, direction: Coord) -> None:
        if self._at(pos) == ".":
            return
        nxt = pos + direction
        cell = self._at(nxt)
        if direction.x == 0 and cell in "[]":
            other_half = nxt + (RIGHT if cell == "[" else LEFT)
            self.push(nxt, direction)
            self.push(other_half, direction)
            self._set(nxt, self._at(pos))
            self._set(other_half, ".")
        else:
            self.push(nxt, direction)
            self._set(nxt, self._at(pos))


def part2(text: str) -> int:
    """Sum of GPS coordinates of wide boxes after all moves."""
    grid, moves = _parse(text, wide=True)
    warehouse = _WideWarehouse(grid)
    pos = _find_robot(grid)
    for direction in moves:
        if warehouse.can_push(pos, direction):
            warehouse.push(pos, direction)
            grid[pos.y][pos.x] = "."
            pos = pos + direction
    return _gps_sum(grid, "[")