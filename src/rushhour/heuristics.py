"""
Heuristics Module - Goal-distance estimates used to order exploration.

Every heuristic maps a Board to a non-negative number (lower = closer to
the goal) and returns math.inf for a board without a primary piece.
"""

import math
from typing import Callable, Dict, List, Set

from .board import EMPTY, Board

Heuristic = Callable[[Board], float]


def manhattan_to_exit(board: Board) -> float:
    """
    Distance from the primary piece's exit-facing cell to the exit edge.

    Measured along the exit axis only (e.g. cols-1 - rightmost column for
    a right exit). Zero when the piece already touches the exit edge.
    """
    primary = board.primary_piece()
    if primary is None:
        return math.inf

    direction = board.exit_direction
    if direction is None:
        # No usable edge: fall back to grid distance to the exit cell
        r, c = primary.cells[0]
        return abs(r - board.exit[0]) + abs(c - board.exit[1])

    lead = primary.leading_cell(direction)
    if direction.sign < 0:
        return lead[direction.axis]
    return board.size[direction.axis] - 1 - lead[direction.axis]


def blocking_pieces(board: Board) -> float:
    """
    Twice the number of distinct pieces between the primary piece and
    the exit edge, along the exit axis.
    """
    primary = board.primary_piece()
    if primary is None:
        return math.inf

    direction = board.exit_direction
    if direction is None:
        return 0

    blockers: Set[str] = set()
    dr, dc = direction.delta()
    r, c = primary.leading_cell(direction)
    r, c = r + dr, c + dc
    while board.in_bounds(r, c):
        cell = board.grid[r][c]
        if cell != EMPTY and cell != primary.id:
            blockers.add(cell)
        r, c = r + dr, c + dc

    return len(blockers) * 2


def combined(board: Board) -> float:
    """Unweighted sum of manhattan_to_exit and blocking_pieces."""
    return manhattan_to_exit(board) + blocking_pieces(board)


# Registry of heuristics by CLI/settings name
HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan_to_exit,
    "blocking": blocking_pieces,
    "combined": combined,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Look up a heuristic by name.

    Args:
        name: "manhattan", "blocking" or "combined"

    Returns:
        Heuristic function

    Raises:
        ValueError: If the name is not registered
    """
    if name not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic: {name}. Available: {available}")
    return HEURISTICS[name]


def get_heuristic_names() -> List[str]:
    return list(HEURISTICS.keys())
