from random import Random
from dataclasses import dataclass, field

from tilemerge.components.board import Board
from tilemerge.components.game_state import GameState
from tilemerge.components.score import Score
from tilemerge.components.tile_store import TileStore
from tilemerge.constants import BOARD_SIZE


@dataclass
class GameWorld:
    """All mutable game state, owned by whichever system drives the turns."""
    board: Board
    tiles: TileStore
    score: Score = field(default_factory=Score)
    state: GameState = field(default_factory=GameState)
    random: Random = field(default_factory=Random)


def create_world(
    *,
    size: int = BOARD_SIZE,
    best_score: int = 0,
    rng: Random | None = None,
) -> GameWorld:
    """Build an empty world; the game system seeds the starting tiles.

    ``best_score`` lets a host restore a value it persisted elsewhere.
    """
    board = Board(size)
    return GameWorld(
        board=board,
        tiles=TileStore(board),
        score=Score(best_score=best_score),
        random=rng or Random(),
    )
