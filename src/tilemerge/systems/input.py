from typing import Iterable

from tilemerge.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_MOVE_REQUEST
from tilemerge.utils.key_mapping import direction_for_key, latest_direction


class InputSystem:
    """Turns raw host key presses into move requests."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        direction = direction_for_key(kwargs.get('symbol'))
        if direction is None:
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)

    def handle_frame(self, symbols: Iterable[int]) -> None:
        """Polling hosts: one move per frame, for the last recognised key."""
        direction = latest_direction(symbols)
        if direction is None:
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
