from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from tilemerge.components.board import Position
from tilemerge.components.direction import Direction
from tilemerge.components.tile_store import TileStore


@dataclass(slots=True)
class TileMove:
    source: Position
    target: Position
    value: int


@dataclass(slots=True)
class TileMerge:
    """A surviving tile at ``position`` absorbed the tile that started at ``absorbed``."""

    position: Position
    value: int
    source: Position
    absorbed: Position


@dataclass(slots=True)
class ShiftResult:
    direction: Direction
    moves: List[TileMove] = field(default_factory=list)
    merges: List[TileMerge] = field(default_factory=list)
    score_gained: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.moves or self.merges)


def shift_tiles(store: TileStore, direction: Direction) -> ShiftResult:
    """Slide every tile toward ``direction``'s edge, merging equal neighbours.

    Single pass over the tiles in scan order. ``slot`` counts cells already
    claimed on the current line; an equal successor is absorbed into the
    current tile and skipped, so a run of three merges only its leading pair.
    """
    size = store.board.size
    ordered = sorted(store.all(), key=lambda tile: direction.scan_key(tile.position))
    origins: Dict[int, Position] = {id(tile): tile.position for tile in ordered}
    absorbed_ids: set[int] = set()
    result = ShiftResult(direction=direction)

    slot = 0
    index = 0
    while index < len(ordered):
        tile = ordered[index]
        line = direction.line_of(tile.position)
        store.move_tile(tile.position, direction.slot_position(tile.position, slot, size))
        index += 1
        if index >= len(ordered):
            break
        follower = ordered[index]
        if direction.line_of(follower.position) != line:
            slot = 0
        elif follower.value != tile.value:
            slot += 1
        else:
            store.remove(follower.position)
            absorbed_ids.add(id(follower))
            index += 1
            tile.value *= 2
            result.score_gained += tile.value
            result.merges.append(
                TileMerge(
                    position=tile.position,
                    value=tile.value,
                    source=origins[id(tile)],
                    absorbed=origins[id(follower)],
                )
            )
            if index < len(ordered) and direction.line_of(ordered[index].position) != line:
                slot = 0
            else:
                slot += 1

    for tile in ordered:
        if id(tile) in absorbed_ids:
            continue
        origin = origins[id(tile)]
        if origin != tile.position:
            result.moves.append(TileMove(source=origin, target=tile.position, value=tile.value))
    return result
