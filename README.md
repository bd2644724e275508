# aocsolver

Solutions to Advent of Code puzzles (2024 days 1 to 21 and 2023 day 1),
together with the small toolkit they are built on: input parsers, a 2D
coordinate type, a three-register computer, and helpers for fetching
inputs and submitting answers.

## Solving a puzzle

Every 2024 day lives in its own module, `aocsolver.day01` to
`aocsolver.day21`, and exposes a `part1` and a `part2` function that take
the puzzle input as a string and return the answer.

```python
from aocsolver import day01

example = """3   4
4   3
2   5
1   3
3   9
3   3"""

print(day01.part1(example))  # 11
print(day01.part2(example))  # 31
```

Most answers are integers. Two are not:

- `day17.part1` returns the program's output as a comma-separated string.
- `day18.part2` returns the `"x,y"` of the first byte that cuts off the
  exit, or `None` if none of the bytes it tries does.

Some parts take extra parameters. Their defaults suit the real input; the
examples need other values:

```python
from aocsolver import day11, day14, day18, day20, day21
from aocsolver.c2d import Coord

day11.part2("125 17", 25)                  # stones after 25 blinks (default 75)
day14.part1(robots_text, 11, 7)            # the example room is 11 by 7 (default 101 by 103)
day18.part1(bytes_text, Coord(6, 6), 12)   # exit and number of fallen bytes
day18.part2(bytes_text, Coord(6, 6), 12)   # exit and first byte count to try
day20.part2(track_text, 50)                # picoseconds a cheat must save (default 100)
day21.part2(codes_text, 25)                # robots in the keypad chain
```

A few parameters behave in ways worth knowing:

- `day13.part2(text, prize_offset)` solves each machine exactly at the
  prize positions given in the text; `prize_offset` does not move them.
- `day17.part2(text, start, step)` tries register A values `start`,
  `start + step`, ... until the program prints itself, and does not stop
  before it finds one.

The 2023 solution is `aocsolver.y2023_day01.part1`.

Malformed input raises `ValueError`, for example a number that does not
parse, or a map without its start or end marker.

## Building blocks

- `aocsolver.parse` turns input text into lists and grids:
  `parse_int_list`, `parse_digit_list`, `parse_string_list`,
  `parse_rune_grid`, `parse_digit_grid`, `parse_rune_grids` and
  `parse_int_grid`.
- `aocsolver.c2d.Coord` is an immutable 2D coordinate (`y` grows
  downwards) that supports `+` and `-`, `neighbours` inside a grid and
  `all_neighbours` without bounds (each with or without diagonals),
  `rotate_right`, `rotate_left`, `rotate_45_right`, `rotate_45_left`,
  `manhattan_distance` and `truncate`. The module also defines the unit
  steps `UP`, `DOWN`, `LEFT` and `RIGHT`.
- `aocsolver.intcode.IntCodeComputer(program, register=(0, 0, 0))` runs
  programs for the three-register machine of day 17; `run()` returns the
  list of output values.
- `aocsolver.common` holds `to_int` (strict decimal parsing),
  `reverse_list` and `reverse_string`.

## Fetching input and submitting answers

`aocsolver.runner` downloads a day's input, caches it on disk, times a
solver and can submit the answer. It needs your session cookie, passed as
an argument or set in the `AOC_COOKIE` environment variable; without one
it raises `runner.MissingCookieError`. The server address comes from
`AOC_BASE_URL` and defaults to `https://adventofcode.com`.

```python
from aocsolver import day01, runner

cookie = "placeholder"  # your own session cookie value
text = runner.read_input(2024, 1, "puzzle.txt", cookie)
print(day01.part1(text))
```

- `runner.fetch_input(year, day, cookie)` downloads the input text.
- `runner.read_input(year, day, path, cookie)` reads `path`, downloading
  it first if it does not exist. Without a path it uses
  `cmd/<year>/<day, two digits>/puzzle.txt`.
- `runner.submit(year, day, level, answer, cookie)` posts an answer and
  prints and returns the lines of the reply's main section.
- `runner.run(solver, year, day, part, submit_answer, verbose)` reads the
  input from the default path, prints the answer, prints the time it took
  when `verbose` is set, and submits a non-zero answer when
  `submit_answer` is set.
- `runner.check_cases(cases, part1, part2, hide_input)` runs both parts
  on a list of `runner.TestCase` values and raises `runner.CaseFailure`
  on the first mismatch. An expected answer of 0 is not checked.

## What it does not do

The package has no command-line program. Solutions are run from Python,
by calling a day's functions or `runner.run`.