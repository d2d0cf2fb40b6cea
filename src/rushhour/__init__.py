"""
Rush Hour Package - State model and search engine for the Rush Hour puzzle.

This package provides the immutable board model and a pluggable strategy
framework (UCS, Greedy Best-First, A*) for sliding the primary piece to
the exit with as few moves as possible.

Public API:
    - Piece, Direction, Orientation: Vehicle model
    - Board: Immutable grid with exit metadata
    - Move: Single slide (piece, direction, distance)
    - State: Search graph node
    - Solution / SolutionMetrics: Search result and statistics
    - SolutionContext: Per-run input for strategies
    - SolverStrategy: Abstract base for strategies
    - create_strategy(), get_strategy_names(), get_strategy_info()
    - HEURISTICS, get_heuristic(): Heuristic registry
    - solve(): One-call convenience wrapper

Usage:
    from src.rushhour import Board, solve

    board = Board.from_grid((6, 6), rows, exit=(2, 5), exit_direction="right")
    solution = solve(board, strategy="astar", heuristic="blocking")

    for move in solution.moves:
        print(f"{move.piece_id} {move.direction.value} {move.distance}")
"""

from typing import Any, Optional

# Core data structures
from .piece import Piece, Direction, Orientation
from .move import Move
from .board import Board, EMPTY, EXIT_MARKER, PRIMARY_ID
from .state import State
from .solution import Solution, SolutionMetrics
from .context import SolutionContext, TraceSink

# Heuristics
from .heuristics import (
    HEURISTICS,
    manhattan_to_exit,
    blocking_pieces,
    combined,
    get_heuristic,
    get_heuristic_names,
)

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies


def solve(puzzle: Any, strategy: str = "astar", heuristic: str = "manhattan",
          trace: Optional[TraceSink] = None) -> Solution:
    """
    Solve a puzzle with the named strategy.

    Args:
        puzzle: Board, or a configuration object accepted by Board.from_config
        strategy: "ucs", "greedy" or "astar"
        heuristic: "manhattan", "blocking" or "combined" (unused by UCS)
        trace: Optional trace sink receiving (event, state)

    Returns:
        Solution with moves and statistics

    Raises:
        ValueError: If the strategy or heuristic name is unknown
    """
    board = puzzle if isinstance(puzzle, Board) else Board.from_config(puzzle)
    solver = create_strategy(strategy)
    if solver.uses_heuristic:
        # Fail on a bad name before any search work
        get_heuristic(heuristic)
    context = SolutionContext(board=board, heuristic_name=heuristic, trace=trace)
    return solver.solve(context)


__all__ = [
    # Data structures
    "Piece",
    "Direction",
    "Orientation",
    "Move",
    "Board",
    "EMPTY",
    "EXIT_MARKER",
    "PRIMARY_ID",
    "State",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    "TraceSink",
    # Heuristics
    "HEURISTICS",
    "manhattan_to_exit",
    "blocking_pieces",
    "combined",
    "get_heuristic",
    "get_heuristic_names",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve",
]
