"""
A* Strategy - Path cost plus heuristic estimate.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import Solution
from ..factory import register_strategy


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    A* Search ordered by f = cost + h(board).

    With an admissible heuristic the result has the minimal move count,
    usually after far fewer expansions than UCS. The manhattan and
    combined heuristics count cells rather than moves, so they can
    overestimate when a single slide covers several cells.
    """
    name = "astar"
    description = "A* (balanced) - Cost plus heuristic"
    uses_heuristic = True

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute A* solution.

        Args:
            context: Solution context with board and heuristic name

        Returns:
            Solution with moves and metrics

        Raises:
            ValueError: If the heuristic name is unknown
        """
        heuristic = context.heuristic
        return self._search(context, lambda state: state.cost + heuristic(state.board))
