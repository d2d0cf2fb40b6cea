"""
Move Module - Represents a single slide of one piece.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from .piece import Direction


@dataclass(frozen=True)
class Move:
    """
    Represents one slide action.

    A move relocates a piece by `distance` cells along its own axis.
    It costs one step in the search regardless of the distance.

    Attributes:
        piece_id: Identifier of the moved piece
        direction: Slide direction
        distance: Number of cells travelled (>= 1)
    """
    piece_id: str
    direction: Direction
    distance: int = 1

    @classmethod
    def create(cls, piece_id: str, direction: Union[str, Direction],
               distance: int = 1) -> 'Move':
        """
        Create a Move, accepting the direction as a plain string.

        Args:
            piece_id: Piece identifier
            direction: "up", "down", "left", "right" (any case) or a Direction
            distance: Cells to slide

        Returns:
            Move instance

        Raises:
            ValueError: If the direction is unknown or distance < 1
        """
        if isinstance(direction, str) and not isinstance(direction, Direction):
            direction = direction.strip().lower()
        if distance < 1:
            raise ValueError(f"Move distance must be positive, got {distance}")
        return cls(piece_id=piece_id, direction=Direction(direction),
                   distance=distance)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Move':
        """Build a Move from a {pieceId, direction, distance} record."""
        piece_id = data.get("pieceId", data.get("piece"))
        return cls.create(piece_id, data["direction"], data.get("distance", 1))

    @property
    def reverse(self) -> 'Move':
        """Move sliding the same piece back by the same distance."""
        return Move(self.piece_id, self.direction.opposite, self.distance)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the external {pieceId, direction, distance} record."""
        return {
            "pieceId": self.piece_id,
            "direction": self.direction.value,
            "distance": self.distance,
        }

    def __str__(self) -> str:
        return f"{self.piece_id} {self.direction.value} {self.distance}"
