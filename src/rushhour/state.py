"""
State Module - Search graph node wrapping a Board.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .move import Move


@dataclass(frozen=True, eq=False)
class State:
    """
    Node in the search graph.

    Two states holding identical boards are the same node for duplicate
    detection, whatever move sequence produced them. Parent links keep the
    solution chain reachable for path reconstruction.

    Attributes:
        board: Board at this node
        parent: State this one was expanded from (None at the root)
        move: Move that produced this state from its parent
        cost: Number of moves from the root
    """
    board: Board
    parent: Optional['State'] = None
    move: Optional[Move] = None
    cost: int = 0

    @classmethod
    def root(cls, board: Board) -> 'State':
        return cls(board=board)

    def key(self) -> str:
        """Duplicate-detection key (the board key)."""
        return self.board.key()

    def is_goal(self) -> bool:
        return self.board.is_solved()

    def children(self) -> List['State']:
        """Expand every legal move; each child costs one more move."""
        return [
            State(board=board, parent=self, move=move, cost=self.cost + 1)
            for move, board in self.board.possible_moves()
        ]

    def path(self) -> List[Move]:
        """
        Walk parent links back to the root.

        Returns:
            Moves in root-to-goal order (empty for the root)
        """
        moves: List[Move] = []
        node: Optional[State] = self
        while node is not None and node.move is not None:
            moves.append(node.move)
            node = node.parent
        moves.reverse()
        return moves

    def __hash__(self):
        return hash(self.key())

    def __eq__(self, other):
        if not isinstance(other, State):
            return False
        return self.board == other.board
