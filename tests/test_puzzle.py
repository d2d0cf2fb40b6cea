"""
Tests for puzzle file parsing and configuration validation.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.puzzle import (
    MAX_VEHICLES,
    PuzzleConfig,
    PuzzleFormatError,
    load_puzzle,
    parse_puzzle,
)
from src.rushhour import Board, Direction, solve

PUZZLE_DIR = Path(__file__).parent.parent / "puzzles"


SAMPLE = """\
6 6
11
AAB..F
..BCDF
GPPCDFK
GH.III
GHJ...
LLJMM.
"""


def test_parse_right_exit():
    config = parse_puzzle(SAMPLE)

    assert config.size == (6, 6)
    assert config.vehicle_count == 11
    assert config.exit == (2, 5)
    assert config.exit_direction == "right"
    assert config.board[2] == "GPPCDF"
    assert len(config.piece_cells()) == 12


def test_vehicle_count_may_include_primary():
    config = parse_puzzle(SAMPLE.replace("\n11\n", "\n12\n"))
    assert config.vehicle_count == 12


def test_parse_left_exit_strips_padding():
    text = "2 4\n1\n ..A.\nKPPA.\n"
    config = parse_puzzle(text)

    assert config.exit == (1, 0)
    assert config.exit_direction == "left"
    assert config.board == ["..A.", "PPA."]


def test_parse_up_exit():
    text = "3 3\n0\n K\n...\n.P.\n.P.\n"
    config = parse_puzzle(text)

    assert config.exit == (0, 1)
    assert config.exit_direction == "up"
    assert config.board == ["...", ".P.", ".P."]


def test_parse_down_exit():
    text = "5 4\n2\n..P.\n..P.\nABB.\nA...\n....\n  K\n"
    config = parse_puzzle(text)

    assert config.exit == (4, 2)
    assert config.exit_direction == "down"
    assert config.board[0] == "..P."


def test_exit_marker_inside_grid_corner_follows_primary():
    config = parse_puzzle("3 3\n0\nPPK\n...\n...\n")

    assert config.exit == (0, 2)
    assert config.exit_direction == "right"
    assert config.board[0] == "PP."


def test_parse_without_validation():
    config = parse_puzzle("2 2\n0\n..K\n..\n", validate=False)
    assert config.exit_direction == "right"
    with pytest.raises(PuzzleFormatError):
        config.validate()


@pytest.mark.parametrize("text,message", [
    ("6x6\n0\nPP..\n", "size"),
    ("2 2\nmany\n..\nPPK\n", "vehicle count"),
    ("2 3\n0\nPP.\n...\n", "exit"),
    ("3\n0\nPP.\n", "size line"),
    ("2 3\n0\nPP.K\n...K\n", "Multiple exits"),
    ("3 3\n0\nPP.K\n...\n", "grid rows"),
    ("2 3\n0\nAA.K\n...\n", "primary"),
    ("3 3\n0\nP..K\nP..\n...\n", "up/down"),
    ("3 3\n0\nPP.\n...K\n...\n", "exit row"),
    ("3 3\n1\nPP.K\nA..\nAA.\n", "straight"),
    ("1 5\n1\nPP.AAK\n", "blocks the primary lane"),
    (SAMPLE.replace("\n11\n", "\n5\n"), "Declared 5"),
])
def test_invalid_puzzles(text, message):
    with pytest.raises(PuzzleFormatError, match=message):
        parse_puzzle(text)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_puzzle("")


def test_too_many_vehicles():
    others = "ABCDEFGHIJLMNOQRSTUVWXYZa"
    config = PuzzleConfig(
        size=(2, 26),
        board=["PP" + "." * 24, others + "."],
        exit=(0, 25),
        exit_direction="right",
    )
    assert len(others) == MAX_VEHICLES + 1
    with pytest.raises(PuzzleFormatError, match="Too many vehicles"):
        config.validate()


def test_to_text_places_exit_outside_grid():
    config = parse_puzzle("2 4\n1\n ..A.\nKPPA.\n")
    text = config.to_text()

    assert text.splitlines()[3] == "KPPA."
    assert parse_puzzle(text) == config


def test_board_from_config():
    board = Board.from_config(parse_puzzle(SAMPLE))

    assert board.size == (6, 6)
    assert board.exit == (2, 5)
    assert board.exit_direction == Direction.RIGHT
    assert board.primary_piece().cells == ((2, 1), (2, 2))


def test_load_puzzle_from_file(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_puzzle(path) == parse_puzzle(SAMPLE)

    with pytest.raises(OSError):
        load_puzzle(tmp_path / "missing.txt")


@pytest.mark.parametrize("name,direction,moves", [
    ("sample.txt", "right", 5),
    ("left_exit.txt", "left", 3),
    ("up_exit.txt", "up", 3),
    ("blocked.txt", "right", None),
])
def test_bundled_puzzles(name, direction, moves):
    config = load_puzzle(PUZZLE_DIR / name)
    assert config.exit_direction == direction

    solution = solve(config, strategy="ucs")
    if moves is None:
        assert not solution.solved
    else:
        assert solution.solved
        assert solution.move_count == moves
