from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Position:
    """Grid cell coordinate; ``y`` grows toward the top edge."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Board:
    """Square grid bounds. Owns no tiles."""

    size: int

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size <= 0:
            raise ValueError(f"Board size must be a positive integer, got {self.size!r}")

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def is_valid(self, pos: Position) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def cells(self) -> Tuple[Position, ...]:
        return tuple(Position(x, y) for x in range(self.size) for y in range(self.size))
