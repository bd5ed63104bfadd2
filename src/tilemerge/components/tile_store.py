from __future__ import annotations

from typing import Dict, Iterator, List

from tilemerge.components.board import Board, Position
from tilemerge.components.tile import Tile


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and (value & (value - 1)) == 0


class TileStore:
    """Live tiles keyed by their cell.

    Every mutating call checks bounds against the board and keeps at most one
    tile per position; violations raise ``ValueError``.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self._tiles: Dict[Position, Tile] = {}

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, pos: object) -> bool:
        return pos in self._tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.all())

    def get(self, pos: Position) -> Tile | None:
        return self._tiles.get(pos)

    def insert(self, pos: Position, value: int) -> Tile:
        if not self.board.is_valid(pos):
            raise ValueError(f"Position {pos} is outside a {self.board.size}x{self.board.size} board")
        if pos in self._tiles:
            raise ValueError(f"Position {pos} is already occupied")
        if not _is_power_of_two(value):
            raise ValueError(f"Tile value must be a power of two >= 2, got {value}")
        tile = Tile(position=pos, value=value)
        self._tiles[pos] = tile
        return tile

    def remove(self, pos: Position) -> Tile:
        try:
            return self._tiles.pop(pos)
        except KeyError:
            raise ValueError(f"No tile at {pos}") from None

    def move_tile(self, src: Position, dst: Position) -> Tile:
        tile = self._tiles.get(src)
        if tile is None:
            raise ValueError(f"No tile at {src}")
        if src == dst:
            return tile
        if not self.board.is_valid(dst):
            raise ValueError(f"Position {dst} is outside a {self.board.size}x{self.board.size} board")
        if dst in self._tiles:
            raise ValueError(f"Cannot move {src} onto occupied {dst}")
        del self._tiles[src]
        tile.position = dst
        self._tiles[dst] = tile
        return tile

    def all(self) -> List[Tile]:
        """Tiles in x-major cell order, stable for a given layout."""
        return [self._tiles[pos] for pos in sorted(self._tiles, key=lambda p: (p.x, p.y))]

    def is_full(self) -> bool:
        return len(self._tiles) == self.board.cell_count

    def clear(self) -> None:
        self._tiles.clear()
