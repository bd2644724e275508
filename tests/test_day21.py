import pytest

from aocsolver.day21 import (
    DIRECTIONAL_POSITIONS,
    NUMERIC_POSITIONS,
    directional_sequences,
    key_paths,
    min_length,
    numeric_sequences,
    part1,
    part2,
)

SAMPLE = """029A
980A
179A
456A
379A"""


def test_numeric_path():
    assert key_paths(NUMERIC_POSITIONS, "0", "9")[0] == ">^^^"


def test_numeric_path_both_orders():
    assert key_paths(NUMERIC_POSITIONS, "2", "9") == [">^^", "^^>"]


def test_numeric_path_avoids_gap():
    assert key_paths(NUMERIC_POSITIONS, "A", "1") == ["^<<"]


def test_directional_path_avoids_gap():
    assert key_paths(DIRECTIONAL_POSITIONS, "<", "^") == [">^"]


def test_same_key_is_empty_path():
    assert key_paths(DIRECTIONAL_POSITIONS, "A", "A") == [""]


def test_numeric_paths():
    assert numeric_sequences("029A")[0] == "<A^A>^^AvvvA"


def test_numeric_sequences_all_variants():
    assert sorted(numeric_sequences("029A")) == sorted(
        ["<A^A>^^AvvvA", "<A^A^^>AvvvA"]
    )


def test_directional_sequences_empty():
    assert directional_sequences("") == []


def test_directional_sequences_single_press():
    assert directional_sequences("A") == ["A"]


def test_min_length_depth_zero():
    assert min_length("<A", 0) == 2


def test_run():
    assert part1(SAMPLE) == 126384


def test_single_code():
    assert part1("029A") == 1972


def test_part2_with_two_robots():
    assert part2(SAMPLE, 2) == 126384


def test_invalid_code_raises():
    with pytest.raises(ValueError):
        part1("02xA")