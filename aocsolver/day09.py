"""Compacting a disk map of files and free space."""

from __future__ import annotations

from .parse import parse_digit_list

_FREE = -1


def _expand(text: str) -> list[int]:
    """Lay out the disk: file blocks hold their id, free blocks hold -1."""
    drive: list[int] = []
    for index, size in enumerate(parse_digit_list(text)):
        block = index // 2 if index % 2 == 0 else _FREE
        drive.extend([block] * size)
    return drive


def part1(text: str) -> int:
    """Checksum after moving single blocks from the end into the first gaps."""
    drive = _expand(text)
    last = len(drive)
    for i in range(len(drive)):
        if i >= last:
            break
        if drive[i] != _FREE:
            continue
        while True:
            last -= 1
            if i >= last:
                break
            if drive[last] != _FREE:
                drive[i], drive[last] = drive[last], _FREE
                break
    total = 0
    for position, file_id in enumerate(drive):
        if file_id == _FREE:
            break
        total += position * file_id
    return total


def _find_free_span(empties: list[int], length: int, limit: int) -> int | None:
    """Index into ``empties`` of the first run of ``length`` consecutive free blocks."""
    for index, position in enumerate(empties):
        if position + length > limit:
            return None
        run = empties[index:index + length]
        if position != _FREE and run == list(range(position, position + length)):
            return index
    return None


def part2(text: str) -> int:
    """Checksum after moving whole files, highest id first, to the leftmost fit."""
    drive = _expand(text)
    empties = [position for position, block in enumerate(drive) if block == _FREE]
    last = len(drive) - 1
    while last > 0 and drive[last] != 0:
        if drive[last] == _FREE:
            last -= 1
            continue
        first = last
        while first > 0 and drive[first - 1] == drive[last]:
            first -= 1
        length = last - first + 1
        span = _find_free_span(empties, length, first)
        if span is not None and span < first:
            target = empties[span]
            for offset in range(length):
                drive[target + offset] = drive[first + offset]
                drive[first + offset] = _FREE
                empties[span + offset] = _FREE
        last = first - 1
    return sum(position * file_id for position, file_id in enumerate(drive) if file_id != _FREE)