"""A reindeer maze: cheapest routes where turning costs a thousand steps."""

from __future__ import annotations

import heapq
import math
from itertools import count
from typing import Callable, Iterable, Iterator

from .c2d import DOWN, LEFT, RIGHT, UP, Coord
from .parse import parse_rune_grid

_DIRECTIONS = (UP, RIGHT, DOWN, LEFT)
_STEP_COST = 1
_TURN_COST = 1000

Grid = list[list[str]]
State = tuple[Coord, Coord]
Moves = Callable[[State], Iterator[tuple[State, int]]]


def _parse(text: str) -> tuple[Grid, Coord, Coord]:
    grid = parse_rune_grid(text)
    start = end = None
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "S":
                start = Coord(x, y)
            elif char == "E":
                end = Coord(x, y)
    if start is None or end is None:
        raise ValueError("the maze needs both a start S and an end E")
    return grid, start, end


def _is_open(grid: Grid, pos: Coord) -> bool:
    return 0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[pos.y]) and grid[pos.y][pos.x] != "#"


def _turns(state: State) -> Iterator[tuple[State, int]]:
    pos, direction = state
    yield (pos, direction.rotate_left()), _TURN_COST
    yield (pos, direction.rotate_right()), _TURN_COST


def _forward_moves(grid: Grid) -> Moves:
    def moves(state: State) -> Iterator[tuple[State, int]]:
        pos, direction = state
        ahead = pos + direction
        if _is_open(grid, ahead):
            yield (ahead, direction), _STEP_COST
        yield from _turns(state)

    return moves


def _backward_moves(grid: Grid) -> Moves:
    def moves(state: State) -> Iterator[tuple[State, int]]:
        pos, direction = state
        behind = pos - direction
        if _is_open(grid, behind):
            yield (behind, direction), _STEP_COST
        yield from _turns(state)

    return moves


def _cheapest(sources: Iterable[State], moves: Moves) -> dict[State, int]:
    """Lowest cost of reaching every state from any of ``sources``."""
    tie = count()
    best: dict[State, int] = {}
    queue = [(0, next(tie), source) for source in sources]
    heapq.heapify(queue)
    while queue:
        cost, _, state = heapq.heappop(queue)
        if state in best:
            continue
        best[state] = cost
        for following, extra in moves(state):
            if following not in best:
                heapq.heappush(queue, (cost + extra, next(tie), following))
    return best


def _best_score(costs: dict[State, int], end: Coord) -> int | None:
    scores = [costs[(end, d)] for d in _DIRECTIONS if (end, d) in costs]
    return min(scores) if scores else None


def part1(text: str) -> int:
    """Lowest score from S (facing east) to E, or -1 if E cannot be reached."""
    grid, start, end = _parse(text)
    costs = _cheapest([(start, RIGHT)], _forward_moves(grid))
    best = _best_score(costs, end)
    return -1 if best is None else best


def part2(text: str) -> int:
    """Number of tiles lying on at least one lowest-score route, or 0."""
    grid, start, end = _parse(text)
    forward = _cheapest([(start, RIGHT)], _forward_moves(grid))
    best = _best_score(forward, end)
    if best is None:
        return 0
    backward = _cheapest([(end, d) for d in _DIRECTIONS], _backward_moves(grid))
    tiles = {
        pos
        for (pos, direction), cost in forward.items()
        if cost + backward.get((pos, direction), math.inf) == best
    }
    return len(tiles)