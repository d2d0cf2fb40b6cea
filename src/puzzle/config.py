"""
Puzzle Configuration Dataclasses

Validated puzzle description handed to the solver core.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from src.rushhour import EMPTY, PRIMARY_ID


# At most 24 vehicle letters: A-Z without P (primary) and K (exit)
MAX_VEHICLES = 24

DIRECTIONS = ("up", "down", "left", "right")


class PuzzleFormatError(ValueError):
    """Raised when puzzle text or a configuration is malformed."""


@dataclass
class PuzzleConfig:
    """Puzzle configuration consumed by Board.from_config()."""
    size: Tuple[int, int]        # (rows, cols)
    board: List[str]             # rows of cells, exit marker removed
    exit: Tuple[int, int]        # exit cell on the boundary
    exit_direction: str          # "up", "down", "left" or "right"
    vehicle_count: Optional[int] = None  # declared non-primary vehicles

    @property
    def rows(self) -> int:
        return self.size[0]

    @property
    def cols(self) -> int:
        return self.size[1]

    def piece_cells(self) -> Dict[str, List[Tuple[int, int]]]:
        """Cells of every piece, keyed by identifier in scan order."""
        cells: Dict[str, List[Tuple[int, int]]] = {}
        for r, row in enumerate(self.board):
            for c, cell in enumerate(row):
                if cell != EMPTY:
                    cells.setdefault(cell, []).append((r, c))
        return cells

    def validate(self) -> "PuzzleConfig":
        """
        Check the configuration before any search starts.

        Returns:
            self, for chaining

        Raises:
            PuzzleFormatError: Describing the first problem found
        """
        rows, cols = self.size
        if rows <= 0 or cols <= 0:
            raise PuzzleFormatError(f"Board size must be positive, got {rows}x{cols}")
        if len(self.board) != rows:
            raise PuzzleFormatError(f"Expected {rows} rows, got {len(self.board)}")
        for r, row in enumerate(self.board):
            if len(row) != cols:
                raise PuzzleFormatError(
                    f"Row {r} has {len(row)} cells, expected {cols}: {row!r}"
                )

        pieces = self.piece_cells()
        if PRIMARY_ID not in pieces:
            raise PuzzleFormatError("No primary piece (P) on the board")
        for piece_id, cells in pieces.items():
            if not _is_straight_run(cells):
                raise PuzzleFormatError(
                    f"Piece {piece_id} is not a straight contiguous run: {cells}"
                )

        vehicles = len(pieces) - 1
        if vehicles > MAX_VEHICLES:
            raise PuzzleFormatError(
                f"Too many vehicles: {vehicles} (maximum {MAX_VEHICLES})"
            )
        # Some puzzle files count the primary piece as well
        if self.vehicle_count is not None and self.vehicle_count not in (vehicles, vehicles + 1):
            raise PuzzleFormatError(
                f"Declared {self.vehicle_count} vehicles, found {vehicles}"
            )

        self._validate_exit(pieces[PRIMARY_ID])
        self._validate_lane(pieces)
        return self

    def _validate_exit(self, primary: List[Tuple[int, int]]) -> None:
        rows, cols = self.size
        er, ec = self.exit

        if self.exit_direction not in DIRECTIONS:
            raise PuzzleFormatError(f"Unknown exit direction: {self.exit_direction!r}")

        expected_edge = {
            "up": er == 0,
            "down": er == rows - 1,
            "left": ec == 0,
            "right": ec == cols - 1,
        }
        if not (0 <= er < rows and 0 <= ec < cols) or not expected_edge[self.exit_direction]:
            raise PuzzleFormatError(
                f"Exit {self.exit} is not on the {self.exit_direction} edge"
            )

        # Single-cell primaries move like horizontal pieces
        vertical = len(primary) > 1 and primary[0][1] == primary[1][1]
        if vertical and self.exit_direction in ("left", "right"):
            raise PuzzleFormatError("Vertical primary piece needs an up/down exit")
        if not vertical and self.exit_direction in ("up", "down"):
            raise PuzzleFormatError("Horizontal primary piece needs a left/right exit")

        if vertical and primary[0][1] != ec:
            raise PuzzleFormatError(f"Primary piece is not in exit column {ec}")
        if not vertical and primary[0][0] != er:
            raise PuzzleFormatError(f"Primary piece is not in exit row {er}")

    def _validate_lane(self, pieces: Dict[str, List[Tuple[int, int]]]) -> None:
        """Reject a vehicle lying along the primary lane between it and the exit."""
        primary = pieces[PRIMARY_ID]
        axis = 0 if self.exit_direction in ("up", "down") else 1
        cross = 1 - axis
        lane = primary[0][cross]
        ahead = self.exit_direction in ("down", "right")
        front = max(c[axis] for c in primary) if ahead else min(c[axis] for c in primary)

        for piece_id, cells in pieces.items():
            if piece_id == PRIMARY_ID or len(cells) < 2:
                continue
            if not all(c[cross] == lane for c in cells):
                continue
            if all((c[axis] > front) == ahead for c in cells):
                raise PuzzleFormatError(
                    f"Vehicle {piece_id} blocks the primary lane and can never clear it"
                )

    def to_text(self) -> str:
        """
        Serialize to the puzzle file format with the exit marker placed
        outside the grid.
        """
        rows, cols = self.size
        er, ec = self.exit
        vehicles = self.vehicle_count
        if vehicles is None:
            vehicles = len(self.piece_cells()) - 1
        lines = [f"{rows} {cols}", str(vehicles)]

        if self.exit_direction == "up":
            lines.append(" " * ec + "K")
        for r, row in enumerate(self.board):
            if self.exit_direction == "left":
                row = ("K" if r == er else " ") + row
            elif self.exit_direction == "right" and r == er:
                row = row + "K"
            lines.append(row)
        if self.exit_direction == "down":
            lines.append(" " * ec + "K")

        return "\n".join(lines) + "\n"


def _is_straight_run(cells: List[Tuple[int, int]]) -> bool:
    if len(cells) == 1:
        return True
    rows = {r for r, _ in cells}
    cols = {c for _, c in cells}
    if len(rows) == 1:
        span = sorted(cols)
    elif len(cols) == 1:
        span = sorted(rows)
    else:
        return False
    return span == list(range(span[0], span[0] + len(span)))
