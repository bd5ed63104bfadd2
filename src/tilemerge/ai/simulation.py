from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List

from tilemerge.components.direction import Direction
from tilemerge.components.game_state import GameMode
from tilemerge.constants import BOARD_SIZE
from tilemerge.events.bus import EventBus
from tilemerge.systems.game_system import GameSystem
from tilemerge.world import create_world

DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


@dataclass(slots=True)
class GameRecord:
    """Outcome of one headless game."""

    final_score: int
    max_tile: int
    turns: int
    game_over: bool
    scores: List[int] = field(default_factory=list)


def play_random_game(
    rng: random.Random,
    *,
    size: int = BOARD_SIZE,
    max_turns: int = 10_000,
) -> GameRecord:
    """Play one game choosing a uniformly random direction every turn.

    The game gets its own ``EventBus`` so nothing leaks into a live session.
    ``turns`` counts commands that changed the board.
    """
    event_bus = EventBus()
    world = create_world(size=size, rng=rng)
    game = GameSystem(world, event_bus)
    turns = 0
    scores: List[int] = []
    for _ in range(max_turns):
        if world.state.mode == GameMode.GAME_OVER:
            break
        result = game.handle_move(rng.choice(DIRECTIONS))
        if result is not None and result.changed:
            turns += 1
            scores.append(world.score.score)
    max_tile = max((tile.value for tile in world.tiles.all()), default=0)
    return GameRecord(
        final_score=world.score.score,
        max_tile=max_tile,
        turns=turns,
        game_over=world.state.mode == GameMode.GAME_OVER,
        scores=scores,
    )


def play_random_games(count: int, *, seed: int = 0, size: int = BOARD_SIZE) -> List[GameRecord]:
    rng = random.Random(seed)
    return [play_random_game(rng, size=size) for _ in range(count)]


def mean_score_by_turn(records: List[GameRecord]) -> List[float]:
    """Average score after each changed turn; finished games hold their final score."""
    longest = max((len(record.scores) for record in records), default=0)
    means: List[float] = []
    for turn in range(longest):
        total = 0
        for record in records:
            if turn < len(record.scores):
                total += record.scores[turn]
            else:
                total += record.final_score
        means.append(total / len(records))
    return means
