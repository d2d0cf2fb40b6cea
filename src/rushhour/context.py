"""
Solution Context Module - Per-run input for strategies.
"""

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from .board import Board
from .heuristics import Heuristic, get_heuristic

if TYPE_CHECKING:
    from .state import State

# Trace sink signature: (event, state) with event in "expand", "skip", "goal"
TraceSink = Callable[[str, "State"], None]


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the board, heuristic
    selection and an optional trace sink.

    The context is private to one search run; nothing in it is shared
    between runs.

    Attributes:
        board: Initial board to solve
        heuristic_name: Heuristic used by greedy and A* (ignored by UCS)
        trace: Optional callback receiving search events
        start_time: When computation started
    """
    board: Board
    heuristic_name: str = "manhattan"
    trace: Optional[TraceSink] = None
    start_time: float = field(default_factory=time.perf_counter)

    @property
    def heuristic(self) -> Heuristic:
        """
        Resolve the configured heuristic.

        Raises:
            ValueError: If heuristic_name is not registered
        """
        return get_heuristic(self.heuristic_name)

    def emit(self, event: str, state: "State") -> None:
        """
        Forward a search event to the trace sink, if any.

        Args:
            event: "expand", "skip" or "goal"
            state: State the event refers to
        """
        if self.trace:
            self.trace(event, state)

    def elapsed_ms(self) -> float:
        """Milliseconds since computation started."""
        return (time.perf_counter() - self.start_time) * 1000
