"""
Solution Module - Result of a search run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .board import Board
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Statistics for one search run.

    Attributes:
        moves_count: Length of the returned path (0 when unsolved)
        nodes_visited: States popped from the frontier, stale pops included
        computation_time_ms: Time taken in milliseconds
        strategy_name: Name of strategy that computed this solution
        heuristic_name: Heuristic used, empty for UCS
    """
    moves_count: int = 0
    nodes_visited: int = 0
    computation_time_ms: float = 0.0
    strategy_name: str = ""
    heuristic_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        solved: True if a goal board was reached
        moves: Ordered moves from the initial board to the goal
        metrics: Performance statistics
        final_board: Goal board when solved
    """
    solved: bool = False
    moves: List[Move] = field(default_factory=list)
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    final_board: Optional[Board] = None

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def nodes_visited(self) -> int:
        return self.metrics.nodes_visited

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the host-facing result record.

        Returns:
            {"solved", "moves": [{pieceId, direction, distance}], "stats"}
        """
        return {
            "solved": self.solved,
            "moves": [move.to_dict() for move in self.moves],
            "stats": {
                "movesCount": self.metrics.moves_count,
                "nodesVisited": self.metrics.nodes_visited,
                "executionTime": round(self.metrics.computation_time_ms, 2),
                "algorithm": self.metrics.strategy_name,
                "heuristic": self.metrics.heuristic_name,
            },
        }
