"""
Replay Module - Step-by-step playback of a solution against the original puzzle.

Moves are re-applied with Board.move() on the configuration the search
started from. A move that cannot be applied stops the replay with a
ReplayError instead of being skipped, so displayed boards never drift
away from the actual solution.

For the search itself, see the src.rushhour package.
"""

import logging
from typing import Any, Iterable, List, Optional, Union

from src.rushhour import Board, Move, Solution

logger = logging.getLogger(__name__)


__all__ = [
    "ReplayError",
    "replay",
    "SolutionPlayback",
]


class ReplayError(RuntimeError):
    """
    Raised when a move cannot be applied during replay.

    Attributes:
        step: 1-based index of the failing move
        move: The move that failed
        board: Board the move was attempted on
    """

    def __init__(self, step: int, move: Move, board: Board):
        super().__init__(f"Move {step} cannot be applied: {move}")
        self.step = step
        self.move = move
        self.board = board


def replay(puzzle: Any, moves: Iterable[Union[Move, dict]]) -> List[Board]:
    """
    Apply moves one at a time to the original puzzle.

    Args:
        puzzle: Board or configuration object (see Board.from_config)
        moves: Move objects or {pieceId, direction, distance} records

    Returns:
        Boards after each move, initial board first

    Raises:
        ReplayError: On the first move that Board.move() rejects
    """
    board = puzzle if isinstance(puzzle, Board) else Board.from_config(puzzle)
    boards = [board]

    for step, item in enumerate(moves, start=1):
        move = item if isinstance(item, Move) else Move.from_dict(item)
        next_board = board.apply_move(move)
        if next_board is None:
            logger.error(f"Replay stopped at move {step}: {move}")
            raise ReplayError(step, move, board)
        board = next_board
        boards.append(board)

    logger.debug(f"Replayed {len(boards) - 1} moves")
    return boards


class SolutionPlayback:
    """
    Cursor over a replayed solution.

    Tracks the current step so a host can show the board before/after
    each move and step forwards or backwards.

    Attributes:
        moves: Ordered solution moves
        boards: Board after each move (first is initial)
        step: Number of moves applied so far (0 = initial board)
    """

    def __init__(self, puzzle: Any, solution: Union[Solution, List[Move]]):
        """
        Initialize playback.

        Args:
            puzzle: Original board or configuration
            solution: Solution or plain list of moves

        Raises:
            ReplayError: If the moves do not replay cleanly
        """
        self.moves: List[Move] = list(
            solution.moves if isinstance(solution, Solution) else solution
        )
        self.boards: List[Board] = replay(puzzle, self.moves)
        self.step = 0

    @property
    def current_board(self) -> Board:
        return self.boards[self.step]

    @property
    def current_move(self) -> Optional[Move]:
        """Next move to apply, or None if exhausted."""
        if self.step < len(self.moves):
            return self.moves[self.step]
        return None

    @property
    def is_exhausted(self) -> bool:
        """True if all moves have been applied."""
        return self.step >= len(self.moves)

    @property
    def moves_remaining(self) -> int:
        return len(self.moves) - self.step

    def advance(self) -> Optional[Move]:
        """
        Apply the next move.

        Returns:
            The move that was just applied, or None if exhausted
        """
        if self.is_exhausted:
            return None
        applied = self.moves[self.step]
        self.step += 1
        return applied

    def back(self) -> Optional[Move]:
        """
        Undo the last applied move.

        Returns:
            The move that was undone, or None at the initial board
        """
        if self.step == 0:
            return None
        self.step -= 1
        return self.moves[self.step]

    def seek(self, step: int) -> Board:
        """
        Jump to a step, clamped to the valid range.

        Args:
            step: Number of moves to have applied

        Returns:
            Board at that step
        """
        self.step = max(0, min(step, len(self.moves)))
        return self.current_board

    def peek_moves(self, count: int = 3) -> List[Move]:
        """Preview upcoming moves without advancing."""
        return self.moves[self.step:self.step + count]
