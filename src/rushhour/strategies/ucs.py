"""
Uniform Cost Strategy - Expands boards in order of move count.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import Solution
from ..factory import register_strategy


@register_strategy
class UniformCostStrategy(SolverStrategy):
    """
    Uniform Cost Search.

    Orders the frontier purely by accumulated path cost (one per move,
    whatever the slide distance). Returns a shortest solution in moves.
    The heuristic selection is ignored.
    """
    name = "ucs"
    description = "Uniform Cost Search - Optimal, no heuristic"

    def solve(self, context: SolutionContext) -> Solution:
        return self._search(context, lambda state: state.cost)
