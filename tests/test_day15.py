import pytest

from aocsolver.day15 import part1, part2


def puzzle(rows, moves):
    return "\n".join(rows) + "\n\n" + moves


LARGE_ROWS = [
    "##########", "#..O..O.O#", "#......O.#", "#.OO..O.O#", "#..O@..O.#",
    "#O#..O...#", "#O..O..O.#", "#.OO.O.OO#", "#....O...#", "##########",
]

MOVE_LINES = [
    "<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^>"
    "<<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^",
    "vvv<<^>^v^^><<>>><>^<<><^vv^^<>"
    "vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v",
    "><>vv>v^v^<>><>>>><^^>vv>v<^^^>>"
    "v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<",
    "<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^"
    "vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^",
    "^><^><>>><>^^<<^^v>>><^<v>^<vv>>"
    "v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><",
    "^>><>^v<><^vvv<^^<><v<<<<<><^v<<<"
    "><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^",
    ">^>>^v>vv>^<<^v<>><<><<v<<v><>v<"
    "^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^",
    "<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<"
    "^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>",
    "^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^"
    "vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>",
    "v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^"
    "v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^",
]

LARGE = puzzle(LARGE_ROWS, "\n".join(MOVE_LINES))
LARGE_ONE_LINE = puzzle(LARGE_ROWS, "".join(MOVE_LINES))

SMALL_ROWS = [
    "########", "#..O.O.#", "##@.O..#", "#...O..#",
    "#.#.O..#", "#...O..#", "#......#", "########",
]
SMALL = puzzle(SMALL_ROWS, "<^^>>>vv" + "<v>>v<<")

SMALL_WIDE_ROWS = [
    "#######", "#...#.#", "#.....#", "#..OO@#", "#..O..#", "#.....#", "#######",
]
SMALL_WIDE = puzzle(SMALL_WIDE_ROWS, "<vv<<" + "^^<<^^")


@pytest.mark.parametrize(
    "text, expected", [(LARGE, 10092), (LARGE_ONE_LINE, 10092), (SMALL, 2028)]
)
def test_part1(text, expected):
    assert part1(text) == expected


@pytest.mark.parametrize("text, expected", [(LARGE, 9021), (SMALL_WIDE, 618)])
def test_part2(text, expected):
    assert part2(text) == expected


def test_part1_box_against_wall_does_not_move():
    assert part1(puzzle(["#####", "#@O##", "#####"], ">")) == 102


def test_part2_repeated_calls_are_independent():
    first = part2(SMALL_WIDE)
    second = part2(SMALL_WIDE)
    assert first == 618
    assert second == 618


def test_missing_robot_raises():
    with pytest.raises(ValueError):
        part1(puzzle(["####", "#.O#", "####"], "<"))