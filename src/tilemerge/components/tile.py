from dataclasses import dataclass

from tilemerge.components.board import Position


@dataclass(slots=True)
class Tile:
    """A positioned power-of-two value.

    The object itself is the tile's identity: it survives moves, and the
    absorbed half of a merge is discarded.
    """
    position: Position
    value: int
