"""
Board Rendering

Functions for drawing board snapshots and exporting solution frames.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from src.rushhour import Board, Move, PRIMARY_ID

logger = logging.getLogger(__name__)


# Drawing settings
CELL_SIZE = 48
FRAME_DURATION_MS = 600

BACKGROUND_COLOR = "#f5f5f4"
EMPTY_COLOR = "#e5e7eb"
EXIT_COLOR = "#fde047"
PRIMARY_COLOR = "#dc2626"
HIGHLIGHT_COLOR = "#ffffff"
TEXT_COLOR = "#111827"

# Vehicle colors, picked by identifier character code
PALETTE = [
    "#3b82f6",  # Blue
    "#22c55e",  # Green
    "#a855f7",  # Purple
    "#f97316",  # Orange
    "#ec4899",  # Pink
    "#6366f1",  # Indigo
    "#eab308",  # Yellow
    "#14b8a6",  # Teal
]


def piece_color(piece_id: str) -> str:
    """
    Get fill color for a piece.

    Args:
        piece_id: Piece identifier

    Returns:
        Hex color code string (primary piece is always red)
    """
    if piece_id == PRIMARY_ID:
        return PRIMARY_COLOR
    return PALETTE[ord(piece_id[0]) % len(PALETTE)]


def _load_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("arial.ttf", size)
    except OSError:
        return ImageFont.load_default()


def render_board(board: Board, highlight: Optional[str] = None,
                 caption: str = "", cell_size: int = CELL_SIZE) -> Image.Image:
    """
    Draw a board snapshot.

    Annotations include:
    - Exit marker in the margin next to the exit cell
    - One filled rectangle per piece with its identifier
    - White outline around the highlighted (just moved) piece
    - Optional caption in the top margin

    Args:
        board: Board to draw
        highlight: Identifier of a piece to outline
        caption: Text drawn above the grid
        cell_size: Cell edge length in pixels

    Returns:
        RGB PIL Image
    """
    rows, cols = board.size
    margin = cell_size // 2
    width = cols * cell_size + 2 * margin
    height = rows * cell_size + 2 * margin

    image = Image.new("RGB", (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)
    font = _load_font(cell_size // 2)
    small_font = _load_font(max(10, cell_size // 4))
    pad = max(2, cell_size // 16)

    for r in range(rows):
        for c in range(cols):
            x, y = margin + c * cell_size, margin + r * cell_size
            draw.rectangle([x + pad, y + pad, x + cell_size - pad, y + cell_size - pad],
                           fill=EMPTY_COLOR)

    if board.exit_direction is not None:
        draw.rectangle(_exit_box(board, cell_size, margin), fill=EXIT_COLOR)

    for piece in board.pieces:
        top = min(r for r, _ in piece.cells)
        left = min(c for _, c in piece.cells)
        bottom = max(r for r, _ in piece.cells) + 1
        right = max(c for _, c in piece.cells) + 1
        box = [margin + left * cell_size + pad, margin + top * cell_size + pad,
               margin + right * cell_size - pad, margin + bottom * cell_size - pad]

        outline = HIGHLIGHT_COLOR if piece.id == highlight else None
        draw.rectangle(box, fill=piece_color(piece.id), outline=outline, width=pad)

        l, t, rr, b = draw.textbbox((0, 0), piece.id, font=font)
        cx = (box[0] + box[2]) / 2 - (rr - l) / 2
        cy = (box[1] + box[3]) / 2 - (b - t) / 2 - t
        draw.text((cx, cy), piece.id, fill=HIGHLIGHT_COLOR, font=font)

    if caption:
        draw.text((pad, pad), caption, fill=TEXT_COLOR, font=small_font)

    return image


def _exit_box(board: Board, cell_size: int, margin: int) -> List[int]:
    """Margin rectangle next to the exit cell, on the exit side."""
    rows, cols = board.size
    er, ec = board.exit
    x, y = margin + ec * cell_size, margin + er * cell_size
    direction = board.exit_direction.value

    if direction == "right":
        return [margin + cols * cell_size, y, 2 * margin + cols * cell_size - 1, y + cell_size]
    if direction == "left":
        return [0, y, margin - 1, y + cell_size]
    if direction == "up":
        return [x, 0, x + cell_size, margin - 1]
    return [x, margin + rows * cell_size, x + cell_size, 2 * margin + rows * cell_size - 1]


def render_frames(boards: Sequence[Board], moves: Optional[Sequence[Move]] = None,
                  cell_size: int = CELL_SIZE) -> List[Image.Image]:
    """
    Draw one frame per board of a replayed solution.

    Args:
        boards: Boards from replay(), initial board first
        moves: Moves between consecutive boards, used for captions
        cell_size: Cell edge length in pixels

    Returns:
        List of PIL Images
    """
    frames = []
    for index, board in enumerate(boards):
        move = moves[index - 1] if moves and index > 0 else None
        caption = f"Step {index}: {move}" if move else "Initial board"
        frames.append(render_board(
            board,
            highlight=move.piece_id if move else None,
            caption=caption,
            cell_size=cell_size,
        ))
    return frames


def save_frames(boards: Sequence[Board], directory: Union[str, Path],
                moves: Optional[Sequence[Move]] = None) -> List[Path]:
    """
    Save each step of a solution as step_000.png, step_001.png, ...

    Args:
        boards: Boards from replay(), initial board first
        directory: Output directory (created if missing)
        moves: Moves between consecutive boards

    Returns:
        Paths of the written images
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for index, frame in enumerate(render_frames(boards, moves)):
        path = out_dir / f"step_{index:03d}.png"
        frame.save(path, "PNG")
        paths.append(path)

    logger.info(f"Saved {len(paths)} frames to {out_dir}")
    return paths


def save_animation(boards: Sequence[Board], path: Union[str, Path],
                   moves: Optional[Sequence[Move]] = None,
                   duration_ms: int = FRAME_DURATION_MS) -> Path:
    """
    Save a solution as an animated GIF.

    Args:
        boards: Boards from replay(), initial board first
        path: Output file path
        moves: Moves between consecutive boards
        duration_ms: Display time per frame

    Returns:
        Path of the written GIF
    """
    frames = render_frames(boards, moves)
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(out_path, "GIF", save_all=True, append_images=frames[1:],
                   duration=duration_ms, loop=0)

    logger.info(f"Saved animation ({len(frames)} frames) to {out_path}")
    return out_path
