"""Fetching inputs, submitting answers and running solvers."""

from __future__ import annotations

import os
import time
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator

BASE_URL = os.environ.get("AOC_BASE_URL", "https://adventofcode.com")
COOKIE_ENV = "AOC_COOKIE"
_TIMEOUT = 30


class MissingCookieError(RuntimeError):
    """No session cookie was given or found in the environment."""


class CaseFailure(AssertionError):
    """A sample case produced an answer other than the expected one."""


@dataclass
class TestCase:
    """A sample input with expected answers; 0 means not checked."""

    __test__ = False

    text: str
    expected_part1: int = 0
    expected_part2: int = 0


def _resolve_cookie(cookie: str | None) -> str:
    if cookie:
        return cookie
    from_env = os.environ.get(COOKIE_ENV)
    if from_env:
        return from_env
    raise MissingCookieError(f"set {COOKIE_ENV} to 'session=...' or pass a cookie")


def fetch_input(year: int, day: int, cookie: str | None = None) -> str:
    """Download a day's puzzle input, without its final newline."""
    request = urllib.request.Request(
        f"{BASE_URL}/{year}/day/{day}/input",
        headers={"Cookie": _resolve_cookie(cookie)},
    )
    with urllib.request.urlopen(request, timeout=_TIMEOUT) as response:
        body = response.read().decode("utf-8")
    return body.removesuffix("\n")


def read_input(year: int, day: int, path: str | os.PathLike | None = None,
               cookie: str | None = None) -> str:
    """Return a day's input, downloading it to ``path`` first if missing."""
    target = Path(path) if path else Path(f"cmd/{year}/{day:02d}/puzzle.txt")
    if target.exists():
        print("INFO: File already exists.. Will not create new one")
    else:
        target.write_bytes(fetch_input(year, day, cookie).encode("utf-8"))
        print("INFO: File successfully created")
    return target.read_bytes().decode("utf-8")


def _main_section(body: str) -> Iterator[str]:
    inside = False
    for row in body.split("\n"):
        if row.startswith("</main>"):
            inside = False
        elif row.startswith("<main>"):
            inside = True
        elif inside:
            yield row


def submit(year: int, day: int, level: int, answer: int, cookie: str | None = None) -> list[str]:
    """Post an answer; print and return the lines of the reply's main section."""
    print(f"Will submit for {year}/{day}/{level}: {answer}")
    request = urllib.request.Request(
        f"{BASE_URL}/{year}/day/{day}/answer",
        data=f"level={level}&answer={answer}".encode("ascii"),
        method="POST",
        headers={
            "Cookie": _resolve_cookie(cookie),
            "Content-Type": "application/x-www-form-urlencoded",
        },
    )
    with urllib.request.urlopen(request, timeout=_TIMEOUT) as response:
        body = response.read().decode("utf-8", errors="replace")
    lines = list(_main_section(body))
    for line in lines:
        print(line)
    return lines


def run(solver: Callable[[str], int], year: int, day: int, part: int,
        submit_answer: bool = False, verbose: bool = True) -> int:
    """Solve a day's input, print the answer and optionally submit it."""
    text = read_input(year, day)
    start = time.perf_counter()
    answer = solver(text)
    elapsed = time.perf_counter() - start
    print(f"PART{part}: {answer}")
    if verbose:
        print(f"Program took {elapsed:.6f}s")
    if submit_answer and answer != 0:
        submit(year, day, part, answer)
    return answer


def check_cases(cases: Iterable[TestCase], part1: Callable[[str], int],
                part2: Callable[[str], int], hide_input: bool = False) -> None:
    """Run both parts on every case; raise :class:`CaseFailure` on a mismatch."""
    for case in cases:
        got1 = part1(case.text)
        got2 = part2(case.text)
        ok1 = case.expected_part1 == 0 or got1 == case.expected_part1
        ok2 = case.expected_part2 == 0 or got2 == case.expected_part2
        if ok1 and ok2:
            continue
        lines = [] if hide_input else [f"Input {case.text}"]
        if not ok1:
            lines.append(f" - PART1: {got1} but expected {case.expected_part1}")
        else:
            lines.append(f" - PART2: {got2} but expected {case.expected_part2}")
        raise CaseFailure("\n".join(lines))