"""Turn controller: shift, spawn, terminal check, reset."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from tilemerge.components.board import Position
from tilemerge.components.direction import Direction
from tilemerge.components.game_state import GameMode
from tilemerge.constants import SPAWN_VALUE, STARTING_TILES
from tilemerge.events.bus import (
    EVENT_GAME_OVER,
    EVENT_GAME_RESET,
    EVENT_MOVE_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_SPAWNED,
    EVENT_TILES_SHIFTED,
    EVENT_TURN_RESOLVED,
    EventBus,
)
from tilemerge.systems.board_ops import is_terminal, spawn_random_tile, spawn_starting_tiles
from tilemerge.systems.shift_ops import ShiftResult, shift_tiles
from tilemerge.utils.game_state import set_game_mode
from tilemerge.world import GameWorld

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TurnResult:
    shift: ShiftResult
    spawned: Position | None = None
    game_over: bool = False

    @property
    def changed(self) -> bool:
        return self.shift.changed


class GameSystem:
    """Owns the world during play and resolves one directional command per turn.

    A turn runs to completion before returning: the shift, at most one spawn
    (only when something moved or merged) and the terminal check, which also
    runs after the starting tiles are placed. While the game is over only
    ``reset`` has any effect.
    """

    def __init__(
        self,
        world: GameWorld,
        event_bus: EventBus,
        *,
        starting_tiles: int = STARTING_TILES,
        spawn_value: int = SPAWN_VALUE,
        start: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.starting_tiles = starting_tiles
        self.spawn_value = spawn_value
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        if start:
            self.reset()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_move_request(self, sender, **payload) -> None:
        direction = payload.get("direction")
        if not isinstance(direction, Direction):
            return
        self.handle_move(direction)

    def on_new_game_request(self, sender, **payload) -> None:
        self.reset()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def handle_move(self, direction: Direction) -> TurnResult | None:
        if self.world.state.mode != GameMode.PLAYING:
            return None
        tiles = self.world.tiles
        score = self.world.score

        shift = shift_tiles(tiles, direction)
        result = TurnResult(shift=shift)
        if shift.changed:
            self.event_bus.emit(
                EVENT_TILES_SHIFTED,
                direction=direction,
                moves=list(shift.moves),
                merges=list(shift.merges),
            )
        if shift.score_gained:
            score.add(shift.score_gained)
        score.record_best()
        if shift.score_gained:
            self.event_bus.emit(
                EVENT_SCORE_CHANGED,
                score=score.score,
                best_score=score.best_score,
                delta=shift.score_gained,
            )

        if shift.changed:
            result.spawned = self._spawn_one()
        if is_terminal(tiles):
            result.game_over = True
            self._enter_game_over()
        self.event_bus.emit(EVENT_TURN_RESOLVED, result=result)
        return result

    def reset(self) -> None:
        """Start a fresh game; ``best_score`` carries over."""
        self.world.tiles.clear()
        self.world.score.reset()
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.debug("new game, best score %d", self.world.score.best_score)
        self.event_bus.emit(EVENT_GAME_RESET, best_score=self.world.score.best_score)
        placed = spawn_starting_tiles(
            self.world.tiles,
            self.world.random,
            count=self.starting_tiles,
            value=self.spawn_value,
        )
        for pos in placed:
            self.event_bus.emit(EVENT_TILE_SPAWNED, position=pos, value=self.spawn_value)
        if is_terminal(self.world.tiles):
            self._enter_game_over()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _spawn_one(self) -> Position | None:
        pos = spawn_random_tile(self.world.tiles, self.world.random, value=self.spawn_value)
        if pos is not None:
            self.event_bus.emit(EVENT_TILE_SPAWNED, position=pos, value=self.spawn_value)
        return pos

    def _enter_game_over(self) -> None:
        score = self.world.score
        logger.debug("game over, score %d", score.score)
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        self.event_bus.emit(EVENT_GAME_OVER, score=score.score, best_score=score.best_score)
