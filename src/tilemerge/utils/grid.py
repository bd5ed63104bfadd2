"""Row-major views of a tile store.

Row ``i`` of a grid holds the cells with ``y == i`` and 0 marks an empty cell,
so ``rows[0]`` is the bottom edge of the board.
"""
from __future__ import annotations

from typing import List, Sequence

from tilemerge.components.board import Position
from tilemerge.components.tile_store import TileStore

Grid = List[List[int]]


def tile_rows(store: TileStore) -> Grid:
    size = store.board.size
    rows = [[0] * size for _ in range(size)]
    for tile in store:
        rows[tile.position.y][tile.position.x] = tile.value
    return rows


def load_rows(store: TileStore, rows: Sequence[Sequence[int]]) -> None:
    """Replace the store's contents with ``rows`` (same layout as ``tile_rows``)."""
    size = store.board.size
    if len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError(f"Expected a {size}x{size} grid")
    store.clear()
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            if value:
                store.insert(Position(x, y), value)
