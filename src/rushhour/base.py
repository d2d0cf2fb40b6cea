"""
Base Strategy Module - Abstract base class for search strategies.
"""

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Set, Tuple

from .context import SolutionContext
from .solution import Solution, SolutionMetrics
from .state import State

logger = logging.getLogger(__name__)

Priority = Callable[[State], float]


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses implement solve(), usually by handing a priority function
    to _search(). They define name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
        uses_heuristic: Whether the heuristic selection affects the run
    """
    name: str = "base"
    description: str = "Base strategy"
    uses_heuristic: bool = False

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a path from context.board to a solved board.

        Args:
            context: Solution context with board, heuristic and trace sink

        Returns:
            Solution with moves and metrics
        """
        pass

    def _search(self, context: SolutionContext, priority: Priority) -> Solution:
        """
        Best-first graph search shared by every strategy.

        The frontier is a heap ordered by (priority, insertion order).
        Every pop counts as a visited node, including stale entries that
        are discarded because their board is already closed. A board found
        again at a lower cost while still queued is pushed once more; the
        dearer entry is dropped when it surfaces (lazy deletion).

        There is no depth or time cutoff: an unreachable goal ends the run
        only when the frontier is empty.

        Args:
            context: Solution context
            priority: Maps a State to its frontier key (lower first)

        Returns:
            Solution with the path (if any) and statistics
        """
        root = State.root(context.board)
        counter = itertools.count()
        frontier: List[Tuple[float, int, State]] = [(priority(root), next(counter), root)]
        queued: Dict[str, int] = {root.key(): root.cost}
        closed: Set[str] = set()
        nodes_visited = 0

        while frontier:
            _, _, state = heapq.heappop(frontier)
            nodes_visited += 1

            key = state.key()
            if key in closed:
                context.emit("skip", state)
                continue
            closed.add(key)

            if state.is_goal():
                context.emit("goal", state)
                logger.info(
                    f"{self.name}: solved in {state.cost} moves, "
                    f"{nodes_visited} nodes visited"
                )
                return self._build_solution(context, state, nodes_visited)

            context.emit("expand", state)
            for child in state.children():
                child_key = child.key()
                if child_key in closed:
                    continue
                known_cost = queued.get(child_key)
                if known_cost is not None and known_cost <= child.cost:
                    continue
                queued[child_key] = child.cost
                heapq.heappush(frontier, (priority(child), next(counter), child))

        logger.info(f"{self.name}: no solution, {nodes_visited} nodes visited")
        return self._build_solution(context, None, nodes_visited)

    def _build_solution(self, context: SolutionContext, goal: Optional[State],
                        nodes_visited: int) -> Solution:
        """Build Solution object from computation results."""
        moves = goal.path() if goal is not None else []

        return Solution(
            solved=goal is not None,
            moves=moves,
            final_board=goal.board if goal is not None else None,
            metrics=SolutionMetrics(
                moves_count=len(moves),
                nodes_visited=nodes_visited,
                computation_time_ms=context.elapsed_ms(),
                strategy_name=self.name,
                heuristic_name=context.heuristic_name if self.uses_heuristic else "",
            )
        )
