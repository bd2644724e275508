import pytest

from aocsolver.day20 import part1, part2

SAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############"""


def test_part1_save_64():
    assert part1(SAMPLE, 64) == 1


def test_part1_save_10():
    assert part1(SAMPLE, 10) == 10


def test_part1_no_cheat_saves_100():
    assert part1(SAMPLE, 100) == 0


def test_part2_save_76():
    assert part2(SAMPLE, 76) == 3


def test_part2_save_60():
    assert part2(SAMPLE, 60) == 129


def test_part2_save_50():
    assert part2(SAMPLE, 50) == 285


def test_part2_count_grows_as_save_shrinks():
    assert part2(SAMPLE, 50) >= part2(SAMPLE, 60) >= part2(SAMPLE, 76)


def test_missing_start_raises():
    with pytest.raises(ValueError):
        part2("#E#", 1)


def test_broken_track_raises():
    with pytest.raises(ValueError):
        part2("S#E", 1)