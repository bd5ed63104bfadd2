from __future__ import annotations

from tilemerge.components.game_state import GameMode
from tilemerge.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from tilemerge.world import GameWorld


def set_game_mode(world: GameWorld, event_bus: EventBus, mode: GameMode) -> bool:
    """Update the game mode and emit a change event when it differs."""

    previous_mode = world.state.mode
    if previous_mode == mode:
        return False
    world.state.mode = mode
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
    return True
