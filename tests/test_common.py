import pytest

from aocsolver.common import reverse_list, reverse_string, to_int


def test_to_int():
    assert to_int("47") == 47


@pytest.mark.parametrize("text,expected", [("-12", -12), ("+3", 3), ("007", 7)])
def test_to_int_signs_and_zeros(text, expected):
    assert to_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " 1", "1 ", "1_000", "4.2"])
def test_to_int_rejects_invalid(text):
    with pytest.raises(ValueError):
        to_int(text)


def test_reverse_string():
    assert reverse_string("odoM") == "Modo"


def test_reverse_string_twice_is_identity():
    assert reverse_string(reverse_string("hej på dig")) == "hej på dig"


def test_reverse_list_leaves_input_untouched():
    items = [1, 2, 3]
    assert reverse_list(items) == [3, 2, 1]
    assert items == [1, 2, 3]


def test_reverse_list_empty():
    assert reverse_list([]) == []