"""
Board Module - Immutable Rush Hour grid with exit metadata.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .move import Move
from .piece import Cell, Direction, Piece

logger = logging.getLogger(__name__)

EMPTY = "."
EXIT_MARKER = "K"
PRIMARY_ID = "P"

Grid = Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class Board:
    """
    Immutable board snapshot.

    Uses tuple-of-tuples for hashability and immutability. Cells hold a
    single-character piece identifier or EMPTY. Boards produced by moves
    share every untouched row with their parent.

    Attributes:
        size: (rows, cols)
        grid: Tuple of row tuples
        exit: (row, col) of the exit cell on the boundary
        exit_direction: Edge the exit sits on, None if unrecognized
        pieces: Pieces in first-encountered row-major scan order (derived)
    """
    size: Tuple[int, int]
    grid: Grid
    exit: Cell
    exit_direction: Optional[Direction]
    pieces: Tuple[Piece, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "pieces", self._identify_pieces())

    @classmethod
    def from_grid(cls, size: Sequence[int], grid: Sequence[Union[str, Sequence[str]]],
                  exit: Sequence[int],
                  exit_direction: Union[str, Direction, None]) -> 'Board':
        """
        Create a Board from rows given as strings or cell sequences.

        Exit metadata is taken verbatim from the caller. Any stray exit
        marker inside the grid is stored as an empty cell.

        Args:
            size: (rows, cols)
            grid: Row strings or lists of single-character cells
            exit: (row, col) exit cell
            exit_direction: "up", "down", "left" or "right"

        Returns:
            Board instance

        Raises:
            ValueError: If the grid does not match `size`
        """
        rows, cols = int(size[0]), int(size[1])
        normalized = tuple(
            tuple(EMPTY if cell == EXIT_MARKER else cell for cell in row)
            for row in grid
        )

        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board size must be positive, got {rows}x{cols}")
        if len(normalized) != rows or any(len(row) != cols for row in normalized):
            raise ValueError(f"Grid does not match declared size {rows}x{cols}")

        return cls(
            size=(rows, cols),
            grid=normalized,
            exit=(int(exit[0]), int(exit[1])),
            exit_direction=_parse_direction(exit_direction),
        )

    @classmethod
    def from_config(cls, config: Any) -> 'Board':
        """
        Create a Board from a puzzle configuration object.

        Any object with `size`, `board`, `exit` and `exit_direction`
        attributes works (see src.puzzle.PuzzleConfig).
        """
        return cls.from_grid(config.size, config.board, config.exit,
                             config.exit_direction)

    def _identify_pieces(self) -> Tuple[Piece, ...]:
        """Scan the grid once and group cells by identifier."""
        found: Dict[str, List[Cell]] = {}
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                if cell == EMPTY:
                    continue
                found.setdefault(cell, []).append((r, c))

        return tuple(
            Piece.create(piece_id, cells, is_primary=piece_id == PRIMARY_ID)
            for piece_id, cells in found.items()
        )

    @property
    def rows(self) -> int:
        return self.size[0]

    @property
    def cols(self) -> int:
        return self.size[1]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[str]:
        """Cell value, or None when out of bounds."""
        if self.in_bounds(row, col):
            return self.grid[row][col]
        return None

    def is_cell_empty(self, row: int, col: int) -> bool:
        """False if out of bounds or occupied."""
        return self.get_cell(row, col) == EMPTY

    def get_piece(self, piece_id: str) -> Optional[Piece]:
        for piece in self.pieces:
            if piece.id == piece_id:
                return piece
        return None

    def primary_piece(self) -> Optional[Piece]:
        for piece in self.pieces:
            if piece.is_primary:
                return piece
        return None

    def is_solved(self) -> bool:
        """
        Check whether the primary piece touches the exit edge.

        The primary piece must have a cell on the exit edge (row 0 or
        rows-1 for up/down, column 0 or cols-1 for left/right) that also
        shares the exit's row (left/right) or column (up/down).

        Returns:
            True if solved; False without a primary piece or exit direction
        """
        primary = self.primary_piece()
        if primary is None or self.exit_direction is None:
            return False

        axis = self.exit_direction.axis
        cross = 1 - axis
        edge = 0 if self.exit_direction.sign < 0 else self.size[axis] - 1
        return any(
            cell[axis] == edge and cell[cross] == self.exit[cross]
            for cell in primary.cells
        )

    def can_slide(self, piece: Piece, direction: Direction, distance: int) -> bool:
        """
        Check whether `piece` may slide `distance` cells in `direction`.

        Only the footprint after the full translation is checked. Callers
        that need path-clear semantics probe increasing distances and stop
        at the first failure (see possible_moves()).

        A leading edge pushed past the boundary is only legal for the
        primary piece leaving through the exit: same direction as the exit,
        same cross-axis coordinate, and not further than one cell past the
        edge cell.

        Args:
            piece: Piece on this board
            direction: Slide direction
            distance: Cells to slide

        Returns:
            True if the slide is legal
        """
        if distance < 1 or not piece.can_travel(direction):
            return False

        axis = direction.axis
        lead = piece.leading_cell(direction)
        target = lead[axis] + direction.sign * distance
        moved = piece.translate(direction, distance)

        if 0 <= target < self.size[axis]:
            return all(self._free_for(piece, r, c) for r, c in moved.cells)

        if not piece.is_primary or direction != self.exit_direction:
            return False
        cross = 1 - axis
        if lead[cross] != self.exit[cross]:
            return False

        if direction.sign < 0:
            remaining = lead[axis] + 1
        else:
            remaining = self.size[axis] - lead[axis]
        if distance > remaining:
            return False

        return all(
            self._free_for(piece, r, c)
            for r, c in moved.cells if self.in_bounds(r, c)
        )

    def _free_for(self, piece: Piece, row: int, col: int) -> bool:
        return self.is_cell_empty(row, col) or piece.occupies(row, col)

    def move(self, piece_id: str, direction: Union[str, Direction],
             distance: int = 1) -> Optional['Board']:
        """
        Apply a slide and return the resulting board.

        Original board is unchanged.

        Args:
            piece_id: Identifier of the piece to slide
            direction: Slide direction
            distance: Cells to slide

        Returns:
            New Board, or None if the piece is unknown, the direction does
            not run along the piece, or the slide is blocked
        """
        piece = self.get_piece(piece_id)
        if piece is None:
            logger.debug(f"Move rejected: unknown piece {piece_id!r}")
            return None

        direction = _parse_direction(direction)
        if direction is None or not self.can_slide(piece, direction, distance):
            logger.debug(f"Move rejected: {piece_id} {direction} {distance}")
            return None

        return self._apply(piece, direction, distance)

    def apply_move(self, move: Move) -> Optional['Board']:
        """Apply a Move object (see move())."""
        return self.move(move.piece_id, move.direction, move.distance)

    def _apply(self, piece: Piece, direction: Direction, distance: int) -> 'Board':
        """Rewrite only the rows touched by the slide."""
        moved = piece.translate(direction, distance)
        new_rows: Dict[int, List[str]] = {}

        for r, c in piece.cells:
            new_rows.setdefault(r, list(self.grid[r]))[c] = EMPTY

        for r, c in moved.cells:
            # Cells pushed past the exit edge are dropped
            if self.in_bounds(r, c):
                new_rows.setdefault(r, list(self.grid[r]))[c] = piece.id

        grid = tuple(
            tuple(new_rows[r]) if r in new_rows else row
            for r, row in enumerate(self.grid)
        )
        return Board(size=self.size, grid=grid, exit=self.exit,
                     exit_direction=self.exit_direction)

    def possible_moves(self) -> List[Tuple[Move, 'Board']]:
        """
        Enumerate every legal slide from this board.

        For each piece and both directions along its axis, distances
        1, 2, ... are probed until the first illegal one. Every legal
        distance before it is a separate move.

        Returns:
            List of (Move, resulting Board) pairs in piece scan order
        """
        results: List[Tuple[Move, Board]] = []
        limit = max(self.size)

        for piece in self.pieces:
            for direction in Direction.along(piece.axis):
                for distance in range(1, limit + 1):
                    if not self.can_slide(piece, direction, distance):
                        break
                    results.append((
                        Move(piece.id, direction, distance),
                        self._apply(piece, direction, distance),
                    ))

        return results

    def key(self) -> str:
        """Canonical row-major concatenation of all cells."""
        return "".join("".join(row) for row in self.grid)

    def render_text(self) -> str:
        """Grid rows joined by newlines."""
        return "\n".join("".join(row) for row in self.grid)

    def to_list(self) -> List[str]:
        """Rows as plain strings."""
        return ["".join(row) for row in self.grid]

    def __hash__(self):
        """Enable using Board as dict key or in sets."""
        return hash(self.key())

    def __eq__(self, other):
        """Boards with identical grids are interchangeable."""
        if not isinstance(other, Board):
            return False
        return self.grid == other.grid


def _parse_direction(value: Union[str, Direction, None]) -> Optional[Direction]:
    if value is None or isinstance(value, Direction):
        return value
    try:
        return Direction(str(value).lower())
    except ValueError:
        logger.warning(f"Unrecognized direction: {value!r}")
        return None
