from __future__ import annotations

import random
from typing import List, Tuple

from tilemerge.components.board import Position
from tilemerge.components.tile_store import TileStore
from tilemerge.constants import SPAWN_VALUE, STARTING_TILES

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


def empty_cells(store: TileStore) -> List[Position]:
    return [pos for pos in store.board.cells() if pos not in store]


def spawn_random_tile(
    store: TileStore,
    rng: random.Random,
    value: int = SPAWN_VALUE,
) -> Position | None:
    """Place a tile on a uniformly chosen empty cell.

    Returns ``None`` when the board is full; that is a normal outcome, not a
    failure.
    """
    candidates = empty_cells(store)
    if not candidates:
        return None
    pos = rng.choice(candidates)
    store.insert(pos, value)
    return pos


def spawn_starting_tiles(
    store: TileStore,
    rng: random.Random,
    count: int = STARTING_TILES,
    value: int = SPAWN_VALUE,
) -> List[Position]:
    """Seed an empty store with ``count`` tiles on distinct cells."""
    candidates = empty_cells(store)
    chosen = rng.sample(candidates, min(count, len(candidates)))
    for pos in chosen:
        store.insert(pos, value)
    return chosen


def has_available_merge(store: TileStore) -> bool:
    """True when some tile has an in-bounds axis neighbour of equal value."""
    for tile in store:
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = store.get(tile.position.offset(dx, dy))
            if neighbor is not None and neighbor.value == tile.value:
                return True
    return False


def is_terminal(store: TileStore) -> bool:
    # A non-full board always has a slide available.
    if not store.is_full():
        return False
    return not has_available_merge(store)
