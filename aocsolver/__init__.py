"""Advent of Code puzzle solutions with parsing, grid, computer and input helpers."""

__version__ = "0.1.0"