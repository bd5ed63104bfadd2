from __future__ import annotations

from enum import Enum, auto
from typing import Tuple

from tilemerge.components.board import Position


class Direction(Enum):
    """Shift direction; names the edge tiles are compacted toward."""
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def scan_key(self, pos: Position) -> Tuple[int, int]:
        """Sort key visiting each line in turn, leading edge first."""
        if self is Direction.LEFT:
            return (pos.y, pos.x)
        if self is Direction.RIGHT:
            return (-pos.y, -pos.x)
        if self is Direction.UP:
            return (-pos.x, -pos.y)
        return (pos.x, pos.y)

    def line_of(self, pos: Position) -> int:
        """Coordinate perpendicular to the motion axis."""
        return pos.y if self.is_horizontal else pos.x

    def slot_position(self, pos: Position, slot: int, size: int) -> Position:
        """Cell ``slot`` steps in from the leading edge, on ``pos``'s line."""
        if self is Direction.LEFT:
            return Position(slot, pos.y)
        if self is Direction.RIGHT:
            return Position(size - 1 - slot, pos.y)
        if self is Direction.UP:
            return Position(pos.x, size - 1 - slot)
        return Position(pos.x, slot)
