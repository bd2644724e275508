import pytest

from aocsolver.parse import (
    parse_digit_grid,
    parse_digit_list,
    parse_int_grid,
    parse_int_list,
    parse_rune_grid,
    parse_rune_grids,
    parse_string_list,
)


def test_parse_int_list_rows():
    ints = parse_int_list("1\n23\n45", "\n")
    assert len(ints) == 3
    assert ints[1] == 23


def test_parse_int_list_csv():
    ints = parse_int_list("1,23,45", ",")
    assert len(ints) == 3
    assert ints[1] == 23


def test_parse_int_list_rejects_garbage():
    with pytest.raises(ValueError):
        parse_int_list("1,x,3", ",")


def test_parse_digit_list():
    ints = parse_digit_list("12345")
    assert len(ints) == 5
    assert ints[1] == 2


def test_parse_string_list():
    words = parse_string_list("hej\npå\ndig", "\n")
    assert len(words) == 3
    assert words[1] == "på"


def test_parse_string_list_sentence():
    words = parse_string_list("hej på dig", " ")
    assert len(words) == 3
    assert words[1] == "på"


def test_parse_rune_grid():
    runes = parse_rune_grid("abc\ndef\nghi")
    assert len(runes) == 3
    assert len(runes[0]) == 3
    assert runes[2][1] == "h"
    assert runes[1][1] == "e"


def test_parse_digit_grid():
    digits = parse_digit_grid("123\n345\n567")
    assert len(digits) == 3
    assert len(digits[0]) == 3
    assert digits[2][1] == 6
    assert digits[1][1] == 4


def test_parse_rune_grids():
    runes = parse_rune_grids("abc\ndef\nghi\n\n123\n456\n789")
    assert len(runes) == 2
    assert len(runes[0]) == 3
    assert len(runes[0][1]) == 3
    assert runes[0][2][1] == "h"
    assert runes[1][1][0] == "4"


def test_parse_int_grid():
    ints = parse_int_grid("2   5\n19   21\n123   456", "   ")
    assert len(ints) == 3
    assert len(ints[0]) == 2
    assert ints[0][0] == 2
    assert ints[2][0] == 123
    assert ints[1][1] == 21