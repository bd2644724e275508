import pytest

from aocsolver.day12 import part1, part2


def grid(*rows):
    return "\n".join(rows)


SMALL = grid("AAAA", "BBCD", "BBCC", "EEEC")

XO = grid("OOOOO", "OXOXO", "OOOOO", "OXOXO", "OOOOO")

LARGE = grid(
    "RRRRIICCFF", "RRRRIICCCF", "VVRRRCCFFF", "VVRCCCJFFF", "VVVVCJJCFE",
    "VVIVCCJJEE", "VVIIICJJEE", "MIIIIIJJEE", "MIIISIJEEE", "MMMISSJEEE",
)

E_SHAPE = grid("EEEEE", "EXXXX", "EEEEE", "EXXXX", "EEEEE")

AB = grid("AAAAAA", "AAABBA", "AAABBA", "ABBAAA", "ABBAAA", "AAAAAA")


@pytest.mark.parametrize("text, expected", [(SMALL, 140), (XO, 772), (LARGE, 1930)])
def test_part1(text, expected):
    assert part1(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [(SMALL, 80), (XO, 436), (E_SHAPE, 236), (AB, 368), (LARGE, 1206)],
)
def test_part2(text, expected):
    assert part2(text) == expected


def test_single_cell():
    assert part1("A") == 4
    assert part2("A") == 4


def test_repeated_calls_are_independent():
    first = part1(SMALL)
    second = part1(SMALL)
    assert first == 140
    assert second == 140