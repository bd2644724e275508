"""Integer coordinates on a two-dimensional grid."""

from __future__ import annotations

from dataclasses import dataclass


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Coord:
    """A point or direction on a grid; ``y`` grows downwards."""

    x: int
    y: int

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def neighbours(self, len_x: int, len_y: int, include_diagonal: bool = False) -> list[Coord]:
        """Neighbours inside a ``len_x`` by ``len_y`` grid.

        Order: left, right, up, down, then up-left, up-right, down-right,
        down-left when diagonals are included.
        """
        x, y = self.x, self.y
        candidates = [
            (x > 0, Coord(x - 1, y)),
            (x < len_x - 1, Coord(x + 1, y)),
            (y > 0, Coord(x, y - 1)),
            (y < len_y - 1, Coord(x, y + 1)),
        ]
        if include_diagonal:
            candidates += [
                (x > 0 and y > 0, Coord(x - 1, y - 1)),
                (x < len_x - 1 and y > 0, Coord(x + 1, y - 1)),
                (x < len_x - 1 and y < len_y - 1, Coord(x + 1, y + 1)),
                (x > 0 and y < len_y - 1, Coord(x - 1, y + 1)),
            ]
        return [coord for inside, coord in candidates if inside]

    def all_neighbours(self, include_diagonal: bool = False) -> list[Coord]:
        """All neighbours, unbounded, in the same order as :meth:`neighbours`."""
        x, y = self.x, self.y
        result = [Coord(x - 1, y), Coord(x + 1, y), Coord(x, y - 1), Coord(x, y + 1)]
        if include_diagonal:
            result += [
                Coord(x - 1, y - 1),
                Coord(x + 1, y - 1),
                Coord(x + 1, y + 1),
                Coord(x - 1, y + 1),
            ]
        return result

    def rotate_right(self) -> Coord:
        return Coord(self.y, -self.x)

    def rotate_left(self) -> Coord:
        return Coord(-self.y, self.x)

    def rotate_45_right(self) -> Coord:
        """Rotate like a square around the origin: (1, 1) becomes (1, 0)."""
        if self.x == 0:
            return Coord(self.y, self.y)
        if self.y == 0:
            return Coord(self.x, -self.x)
        if self.x == self.y:
            return Coord(self.x, 0)
        return Coord(0, self.y)

    def rotate_45_left(self) -> Coord:
        """Rotate like a square around the origin: (1, 1) becomes (0, 1)."""
        if self.x == 0:
            return Coord(-self.y, self.y)
        if self.y == 0:
            return Coord(self.x, self.x)
        if self.x == self.y:
            return Coord(0, self.y)
        return Coord(self.x, 0)

    def manhattan_distance(self, other: Coord) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def truncate(self) -> Coord:
        """Clamp each component to -1, 0 or 1 by its sign."""
        return Coord(_sign(self.x), _sign(self.y))


UP = Coord(0, -1)
DOWN = Coord(0, 1)
RIGHT = Coord(1, 0)
LEFT = Coord(-1, 0)