"""
Greedy Strategy - Always expands the board the heuristic likes best.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import Solution
from ..factory import register_strategy


@register_strategy
class GreedyStrategy(SolverStrategy):
    """
    Greedy Best-First Search.

    Orders the frontier by heuristic value alone; ties are expanded in
    insertion order. Path cost is ignored, so the solution may be longer
    than the optimum. Usually visits the fewest nodes of the three.
    """
    name = "greedy"
    description = "Greedy Best-First (fast) - Heuristic only, not optimal"
    uses_heuristic = True

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute greedy solution.

        Args:
            context: Solution context with board and heuristic name

        Returns:
            Solution with moves and metrics

        Raises:
            ValueError: If the heuristic name is unknown
        """
        heuristic = context.heuristic
        return self._search(context, lambda state: heuristic(state.board))
