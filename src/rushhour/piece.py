"""
Piece Module - Immutable rigid vehicle occupying a straight run of cells.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple


Cell = Tuple[int, int]


class Direction(str, Enum):
    """Slide directions. Values match the external move records."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def axis(self) -> int:
        """Grid axis the direction moves along (0 = rows, 1 = columns)."""
        return 0 if self in (Direction.UP, Direction.DOWN) else 1

    @property
    def sign(self) -> int:
        """-1 towards row/col 0, +1 away from it."""
        return -1 if self in (Direction.UP, Direction.LEFT) else 1

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def delta(self, distance: int = 1) -> Cell:
        """Row/column offset for a slide of `distance` cells."""
        step = self.sign * distance
        return (step, 0) if self.axis == 0 else (0, step)

    @classmethod
    def along(cls, axis: int) -> Tuple["Direction", "Direction"]:
        """Both directions lying on an axis, negative first."""
        if axis == 0:
            return (cls.UP, cls.DOWN)
        return (cls.LEFT, cls.RIGHT)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    UNKNOWN = "unknown"  # single cell


@dataclass(frozen=True)
class Piece:
    """
    Immutable vehicle on the board.

    Orientation and length are derived from the cell set. A single-cell
    piece reports UNKNOWN orientation and moves along the column axis
    (like a horizontal piece).

    Attributes:
        id: Single-character identifier from the grid
        cells: Occupied (row, col) cells in scan order
        is_primary: True for the piece that has to reach the exit
    """
    id: str
    cells: Tuple[Cell, ...]
    is_primary: bool = False
    orientation: Orientation = field(init=False, compare=False)

    def __post_init__(self):
        if not self.cells:
            raise ValueError(f"Piece {self.id!r} has no cells")

        object.__setattr__(self, "cells", tuple(tuple(c) for c in self.cells))

        if len(self.cells) == 1:
            orientation = Orientation.UNKNOWN
        elif all(r == self.cells[0][0] for r, _ in self.cells):
            orientation = Orientation.HORIZONTAL
        else:
            orientation = Orientation.VERTICAL
        object.__setattr__(self, "orientation", orientation)

    @classmethod
    def create(cls, piece_id: str, cells: Iterable[Cell],
               is_primary: bool = False) -> "Piece":
        """
        Create a Piece from any iterable of cells.

        Args:
            piece_id: Grid identifier
            cells: (row, col) positions
            is_primary: Whether this is the primary piece

        Returns:
            Piece instance

        Raises:
            ValueError: If no cells are given
        """
        return cls(id=piece_id, cells=tuple(cells), is_primary=is_primary)

    @property
    def length(self) -> int:
        """Number of cells covered."""
        return len(self.cells)

    @property
    def axis(self) -> int:
        """Movement axis: 0 for vertical pieces, 1 otherwise."""
        return 0 if self.orientation == Orientation.VERTICAL else 1

    def can_travel(self, direction: Direction) -> bool:
        """True if `direction` runs along this piece's axis."""
        return direction.axis == self.axis

    def top_left(self) -> Cell:
        """Cell with the minimal row, ties broken by minimal column."""
        return min(self.cells)

    def leading_cell(self, direction: Direction) -> Cell:
        """Extreme cell facing `direction` (e.g. top-most for UP)."""
        axis = direction.axis
        if direction.sign < 0:
            return min(self.cells, key=lambda c: c[axis])
        return max(self.cells, key=lambda c: c[axis])

    def translate(self, direction: Direction, distance: int = 1) -> "Piece":
        """
        Shift every cell by `distance` along `direction`.

        No bounds or collision checks happen here; see Board.can_slide().

        Args:
            direction: Direction to slide
            distance: Number of cells

        Returns:
            New Piece at the shifted position
        """
        dr, dc = direction.delta(distance)
        shifted = tuple((r + dr, c + dc) for r, c in self.cells)
        return Piece(id=self.id, cells=shifted, is_primary=self.is_primary)

    def occupies(self, row: int, col: int) -> bool:
        return (row, col) in self.cells
