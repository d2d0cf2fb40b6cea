"""
Puzzle Parser

Reads the Rush Hour text format:

    6 6          rows cols
    11           number of non-primary vehicles
    AAB..F       grid rows, '.' = empty, 'P' = primary piece
    ..BCDF
    GPPCDFK      exit marker 'K' placed outside the grid
    GH.III
    GHJ...
    LLJMM.

The exit direction is inferred from where the 'K' sits: after the last
column (right), before the first column (left, other rows are then padded
with one leading space), on its own line above the grid (up) or below it
(down). A 'K' on a boundary cell inside the grid is accepted too.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from src.rushhour import EMPTY, EXIT_MARKER, PRIMARY_ID

from .config import PuzzleConfig, PuzzleFormatError

logger = logging.getLogger(__name__)


def parse_puzzle(content: str, validate: bool = True) -> PuzzleConfig:
    """
    Parse puzzle text into a PuzzleConfig.

    Args:
        content: Puzzle file contents
        validate: Run PuzzleConfig.validate() on the result

    Returns:
        Parsed configuration

    Raises:
        PuzzleFormatError: If the text is malformed or fails validation
    """
    lines = [line.rstrip("\r") for line in content.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 3:
        raise PuzzleFormatError("Puzzle needs a size line, a vehicle count and the grid")

    try:
        rows, cols = (int(value) for value in lines[0].split())
    except ValueError:
        raise PuzzleFormatError(f"Invalid size line: {lines[0]!r}") from None
    if rows <= 0 or cols <= 0:
        raise PuzzleFormatError(f"Board size must be positive, got {rows}x{cols}")

    try:
        vehicle_count = int(lines[1].strip())
    except ValueError:
        raise PuzzleFormatError(f"Invalid vehicle count: {lines[1]!r}") from None

    body = lines[2:]
    exit_cell: Optional[Tuple[int, int]] = None
    direction: Optional[str] = None

    if len(body) == rows + 1:
        if body[0].strip() == EXIT_MARKER:
            exit_cell, direction = (0, body[0].index(EXIT_MARKER)), "up"
            body = body[1:]
        elif body[-1].strip() == EXIT_MARKER:
            exit_cell, direction = (rows - 1, body[-1].index(EXIT_MARKER)), "down"
            body = body[:-1]
    if len(body) != rows:
        raise PuzzleFormatError(f"Expected {rows} grid rows, got {len(body)}")

    grid: List[str] = []
    for r, line in enumerate(body):
        line = line.rstrip()
        if len(line) == cols + 1 and line[0] in (EXIT_MARKER, " "):
            if line[0] == EXIT_MARKER:
                exit_cell, direction = _claim_exit(exit_cell, (r, 0)), "left"
            line = line[1:]
        elif len(line) == cols + 1 and line[-1] == EXIT_MARKER:
            exit_cell, direction = _claim_exit(exit_cell, (r, cols - 1)), "right"
            line = line[:-1]
        grid.append(line)

    inside = [
        (r, c) for r, row in enumerate(grid)
        for c, cell in enumerate(row) if cell == EXIT_MARKER
    ]
    for cell in inside:
        exit_cell = _claim_exit(exit_cell, cell)
        direction = _edge_direction(cell, (rows, cols), grid)
        r, c = cell
        grid[r] = grid[r][:c] + EMPTY + grid[r][c + 1:]

    if exit_cell is None or direction is None:
        raise PuzzleFormatError("No exit (K) found on the board boundary")

    config = PuzzleConfig(
        size=(rows, cols),
        board=grid,
        exit=exit_cell,
        exit_direction=direction,
        vehicle_count=vehicle_count,
    )
    logger.debug(f"Parsed {rows}x{cols} puzzle, exit {exit_cell} {direction}")

    if validate:
        config.validate()
    return config


def load_puzzle(path: Union[str, Path], validate: bool = True) -> PuzzleConfig:
    """
    Read and parse a puzzle file.

    Args:
        path: Puzzle file path
        validate: Run PuzzleConfig.validate() on the result

    Returns:
        Parsed configuration

    Raises:
        OSError: If the file cannot be read
        PuzzleFormatError: If the contents are malformed
    """
    content = Path(path).read_text(encoding="utf-8")
    logger.info(f"Loaded puzzle file: {path}")
    return parse_puzzle(content, validate=validate)


def _claim_exit(current: Optional[Tuple[int, int]],
                cell: Tuple[int, int]) -> Tuple[int, int]:
    if current is not None:
        raise PuzzleFormatError(f"Multiple exits: {current} and {cell}")
    return cell


def _edge_direction(cell: Tuple[int, int], size: Tuple[int, int],
                    grid: List[str]) -> str:
    """Direction of an exit marker sitting on a boundary cell."""
    r, c = cell
    rows, cols = size
    edges = []
    if r == 0:
        edges.append("up")
    if r == rows - 1:
        edges.append("down")
    if c == 0:
        edges.append("left")
    if c == cols - 1:
        edges.append("right")

    if not edges:
        raise PuzzleFormatError(f"Exit {cell} is not on the board boundary")
    if len(edges) == 1:
        return edges[0]

    # Corner: pick the edge matching the primary piece's orientation
    primary = [(i, j) for i, row in enumerate(grid)
               for j, value in enumerate(row) if value == PRIMARY_ID]
    vertical = len(primary) > 1 and primary[0][1] == primary[1][1]
    for edge in edges:
        if (edge in ("up", "down")) == vertical:
            return edge
    return edges[0]
