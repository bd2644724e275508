"""Parsers that turn puzzle input text into lists and grids."""

from __future__ import annotations

from .common import to_int


def parse_int_list(text: str, sep: str) -> list[int]:
    """Split ``text`` on ``sep`` and parse each piece as an integer."""
    return [to_int(piece) for piece in text.split(sep)]


def parse_digit_list(text: str) -> list[int]:
    """Parse each character of ``text`` as a single digit."""
    return [to_int(char) for char in text]


def parse_string_list(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``."""
    return text.split(sep)


def parse_rune_grid(text: str) -> list[list[str]]:
    """Split ``text`` into lines of characters."""
    return [list(line) for line in text.split("\n")]


def parse_digit_grid(text: str) -> list[list[int]]:
    """Split ``text`` into lines of single digits."""
    return [[to_int(char) for char in line] for line in text.split("\n")]


def parse_rune_grids(text: str) -> list[list[list[str]]]:
    """Split ``text`` into character grids separated by blank lines."""
    grids: list[list[list[str]]] = []
    current: list[list[str]] = []
    for line in text.split("\n"):
        if line:
            current.append(list(line))
        else:
            grids.append(current)
            current = []
    grids.append(current)
    return grids


def parse_int_grid(text: str, sep: str) -> list[list[int]]:
    """Parse each line of ``text`` as integers separated by ``sep``."""
    return [parse_int_list(line, sep) for line in text.split("\n")]