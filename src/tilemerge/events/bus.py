from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                  # payload: symbol=int, modifiers=int
EVENT_MOVE_REQUEST = "move_request"            # payload: direction=Direction
EVENT_NEW_GAME_REQUEST = "new_game_request"    # payload: reason=str


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILES_SHIFTED = "tiles_shifted"          # payload: direction, moves=[TileMove], merges=[TileMerge]
EVENT_TILE_SPAWNED = "tile_spawned"            # payload: position=Position, value=int
EVENT_TURN_RESOLVED = "turn_resolved"          # payload: result=TurnResult


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"          # payload: score=int, best_score=int, delta=int
EVENT_GAME_OVER = "game_over"                  # payload: score=int, best_score=int
EVENT_GAME_RESET = "game_reset"                # payload: best_score=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode, new_mode
