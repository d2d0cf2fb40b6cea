"""
Tests for the search strategies

Covers:
1. Optimal and suboptimal paths on the 6x6 scenario
2. Unsolvable and trivially solved puzzles
3. Search statistics and trace events
4. Strategy and heuristic registries

Usage:
    pytest tests/test_solver.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.puzzle import PuzzleConfig
from src.replay import replay
from src.rushhour import (
    Board,
    SolutionContext,
    SolverStrategy,
    create_strategy,
    get_default_strategy_name,
    get_heuristic_names,
    get_strategy_info,
    get_strategy_names,
    register_strategy,
    solve,
)


SCENARIO_ROWS = [
    "AAB..F",
    "..BCDF",
    "GPPCDF",
    "GH.III",
    "GHJ...",
    "LLJMM.",
]
OPTIMAL_MOVES = 5

STRATEGIES = ["ucs", "greedy", "astar"]
HEURISTICS = ["manhattan", "blocking", "combined"]


def scenario_board() -> Board:
    return Board.from_grid((6, 6), SCENARIO_ROWS, (2, 5), "right")


def blocked_board() -> Board:
    return Board.from_grid((3, 4), ["...A", "PP.A", "...A"], (1, 3), "right")


def test_ucs_finds_optimal_path():
    board = scenario_board()
    solution = solve(board, strategy="ucs")

    assert solution.solved
    assert solution.move_count == OPTIMAL_MOVES
    assert solution.metrics.moves_count == len(solution.moves)
    assert solution.final_board.is_solved()

    boards = replay(board, solution.moves)
    assert len(boards) == OPTIMAL_MOVES + 1
    assert boards[-1].is_solved()
    assert boards[-1] == solution.final_board


def test_astar_with_blocking_matches_ucs():
    ucs = solve(scenario_board(), strategy="ucs")
    astar = solve(scenario_board(), strategy="astar", heuristic="blocking")

    assert astar.solved
    assert astar.move_count == ucs.move_count


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_every_combination_solves_scenario(strategy, heuristic):
    board = scenario_board()
    solution = solve(board, strategy=strategy, heuristic=heuristic)

    assert solution.solved
    assert solution.move_count >= OPTIMAL_MOVES
    assert replay(board, solution.moves)[-1].is_solved()


@pytest.mark.parametrize("heuristic", HEURISTICS)
def test_astar_visits_no_more_nodes_than_ucs(heuristic):
    ucs = solve(scenario_board(), strategy="ucs")
    astar = solve(scenario_board(), strategy="astar", heuristic=heuristic)
    assert astar.nodes_visited <= ucs.nodes_visited


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_blocked_puzzle_reports_no_solution(strategy):
    solution = solve(blocked_board(), strategy=strategy)

    assert not solution.solved
    assert solution.moves == []
    assert solution.metrics.moves_count == 0
    # Initial board plus the one reachable position
    assert solution.nodes_visited == 2
    assert solution.final_board is None


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_already_solved_board(strategy):
    board = Board.from_grid((1, 1), ["P"], (0, 0), "right")
    solution = solve(board, strategy=strategy)

    assert solution.solved
    assert solution.moves == []
    assert solution.nodes_visited == 1


def test_ucs_expands_in_cost_order():
    costs = []

    def trace(event, state):
        if event in ("expand", "goal"):
            costs.append(state.cost)

    solve(scenario_board(), strategy="ucs", trace=trace)
    assert costs == sorted(costs)
    assert costs[0] == 0
    assert costs[-1] == OPTIMAL_MOVES


def test_trace_events():
    events = []
    solution = solve(scenario_board(), strategy="astar", heuristic="blocking",
                     trace=lambda event, state: events.append(event))

    assert events[-1] == "goal"
    assert events.count("goal") == 1
    assert set(events) <= {"expand", "skip", "goal"}
    # Every pop produces exactly one event
    assert len(events) == solution.nodes_visited


def test_solve_accepts_puzzle_config():
    config = PuzzleConfig(size=(6, 6), board=list(SCENARIO_ROWS), exit=(2, 5),
                          exit_direction="right", vehicle_count=11)
    solution = solve(config, strategy="ucs")
    assert solution.move_count == OPTIMAL_MOVES


def test_solution_to_dict():
    solution = solve(scenario_board(), strategy="ucs")
    data = solution.to_dict()

    assert data["solved"] is True
    assert len(data["moves"]) == OPTIMAL_MOVES
    assert set(data["moves"][0]) == {"pieceId", "direction", "distance"}
    assert data["stats"]["movesCount"] == OPTIMAL_MOVES
    assert data["stats"]["nodesVisited"] == solution.nodes_visited
    assert data["stats"]["algorithm"] == "ucs"
    assert data["stats"]["heuristic"] == ""
    assert data["stats"]["executionTime"] >= 0

    greedy = solve(scenario_board(), strategy="greedy", heuristic="combined")
    assert greedy.to_dict()["stats"]["heuristic"] == "combined"


def test_unknown_names_raise():
    with pytest.raises(ValueError):
        solve(scenario_board(), strategy="dfs")
    with pytest.raises(ValueError):
        solve(scenario_board(), strategy="astar", heuristic="euclidean")
    with pytest.raises(ValueError):
        solve(scenario_board(), strategy="greedy", heuristic="euclidean")


def test_ucs_ignores_heuristic_name():
    solution = solve(scenario_board(), strategy="ucs", heuristic="euclidean")
    assert solution.solved


def test_strategy_registry():
    assert set(get_strategy_names()) == set(STRATEGIES)
    assert get_default_strategy_name() == "astar"
    assert get_heuristic_names() == HEURISTICS

    info = {entry["name"]: entry for entry in get_strategy_info()}
    assert list(info) == get_strategy_names()
    assert all(entry["description"] for entry in info.values())
    assert info["ucs"]["uses_heuristic"] is False
    assert info["greedy"]["uses_heuristic"] is True
    assert info["astar"]["uses_heuristic"] is True

    assert create_strategy("ucs").uses_heuristic is False
    assert create_strategy("astar").uses_heuristic is True


def test_duplicate_strategy_name_rejected():
    class ShadowUcs(SolverStrategy):
        name = "ucs"

        def solve(self, context):
            return self._search(context, lambda state: 0)

    with pytest.raises(ValueError, match="already used"):
        register_strategy(ShadowUcs)
    assert type(create_strategy("ucs")).__name__ == "UniformCostStrategy"


def test_strategy_solve_with_context():
    strategy = create_strategy("astar")
    context = SolutionContext(board=scenario_board(), heuristic_name="blocking")
    solution = strategy.solve(context)

    assert solution.solved
    assert solution.metrics.strategy_name == "astar"
    assert solution.metrics.heuristic_name == "blocking"
    assert solution.metrics.computation_time_ms >= 0
