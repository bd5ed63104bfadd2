from __future__ import annotations

from typing import Dict, Iterable

from tilemerge.components.direction import Direction
from tilemerge.constants import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

KEY_DIRECTIONS: Dict[int, Direction] = {
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
}


def direction_for_key(symbol: int | None) -> Direction | None:
    """Map a host key symbol to a shift direction; other keys map to None."""
    if symbol is None:
        return None
    return KEY_DIRECTIONS.get(symbol)


def latest_direction(symbols: Iterable[int]) -> Direction | None:
    """Direction for the last recognised key among one frame's presses."""
    chosen: Direction | None = None
    for symbol in symbols:
        direction = direction_for_key(symbol)
        if direction is not None:
            chosen = direction
    return chosen
