"""
Tests for solution replay and playback.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.replay import ReplayError, SolutionPlayback, replay
from src.rushhour import Board, Move, solve


SCENARIO_ROWS = [
    "AAB..F",
    "..BCDF",
    "GPPCDF",
    "GH.III",
    "GHJ...",
    "LLJMM.",
]

SOLUTION = [
    Move.create("C", "up", 1),
    Move.create("D", "up", 1),
    Move.create("I", "left", 1),
    Move.create("F", "down", 3),
    Move.create("P", "right", 3),
]


def scenario_board() -> Board:
    return Board.from_grid((6, 6), SCENARIO_ROWS, (2, 5), "right")


def test_replay_known_solution():
    boards = replay(scenario_board(), SOLUTION)

    assert len(boards) == len(SOLUTION) + 1
    assert boards[0] == scenario_board()
    assert not any(board.is_solved() for board in boards[:-1])
    assert boards[-1].is_solved()
    assert boards[-1].to_list()[2] == "G...PP"


def test_replay_accepts_move_records():
    records = [move.to_dict() for move in SOLUTION]
    assert records[0] == {"pieceId": "C", "direction": "up", "distance": 1}
    assert replay(scenario_board(), records)[-1].is_solved()


def test_replay_search_result():
    solution = solve(scenario_board(), strategy="greedy", heuristic="blocking")
    assert replay(scenario_board(), solution.moves)[-1].is_solved()


def test_replay_stops_on_illegal_move():
    moves = [Move.create("C", "up", 1), Move.create("F", "down", 1)]
    with pytest.raises(ReplayError) as excinfo:
        replay(scenario_board(), moves)

    error = excinfo.value
    assert error.step == 2
    assert error.move.piece_id == "F"
    assert error.board.get_piece("C").cells == ((0, 3), (1, 3))


def test_replay_unknown_piece():
    with pytest.raises(ReplayError) as excinfo:
        replay(scenario_board(), [Move.create("Z", "left", 1)])
    assert excinfo.value.step == 1


def test_playback_cursor():
    playback = SolutionPlayback(scenario_board(), SOLUTION)

    assert playback.step == 0
    assert playback.current_move == SOLUTION[0]
    assert playback.moves_remaining == 5
    assert playback.back() is None

    assert playback.advance() == SOLUTION[0]
    assert playback.current_board.get_piece("C").cells == ((0, 3), (1, 3))
    assert playback.peek_moves(2) == SOLUTION[1:3]

    assert playback.back() == SOLUTION[0]
    assert playback.current_board == scenario_board()

    assert playback.seek(99).is_solved()
    assert playback.is_exhausted
    assert playback.current_move is None
    assert playback.advance() is None
    assert playback.seek(-3) == scenario_board()


def test_playback_from_solution():
    solution = solve(scenario_board(), strategy="ucs")
    playback = SolutionPlayback(scenario_board(), solution)
    assert playback.moves == solution.moves
    assert len(playback.boards) == solution.move_count + 1


def test_direction_case_is_normalised():
    assert Move.create("P", "RIGHT", 3).direction.value == "right"
    assert Move.from_dict({"pieceId": "C", "direction": " Up ", "distance": 1}) == SOLUTION[0]

    records = [move.to_dict() for move in SOLUTION]
    records[-1]["direction"] = "Right"
    assert replay(scenario_board(), records)[-1].is_solved()

    with pytest.raises(ReplayError) as excinfo:
        replay(scenario_board(), [{"pieceId": "P", "direction": "Right", "distance": 1}])
    assert excinfo.value.step == 1
