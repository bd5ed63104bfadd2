from __future__ import annotations

import random
from typing import Sequence

from tilemerge.components.tile_store import TileStore
from tilemerge.events.bus import EventBus
from tilemerge.systems.game_system import GameSystem
from tilemerge.utils.grid import load_rows, tile_rows
from tilemerge.world import GameWorld, create_world


def make_game(
    rows: Sequence[Sequence[int]] | None = None,
    *,
    size: int = 4,
    seed: int = 0,
) -> tuple[EventBus, GameWorld, GameSystem]:
    """Build a game; with ``rows`` the board is laid out exactly instead of seeded randomly."""

    bus = EventBus()
    world = create_world(size=size, rng=random.Random(seed))
    game = GameSystem(world, bus, start=rows is None)
    if rows is not None:
        load_rows(world.tiles, rows)
    return bus, world, game


def store_from_rows(rows: Sequence[Sequence[int]]) -> TileStore:
    world = create_world(size=len(rows))
    load_rows(world.tiles, rows)
    return world.tiles


def rows_of(store: TileStore) -> list[list[int]]:
    return tile_rows(store)
