"""Game state resource describing whether a game is still running."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level game modes that gate which commands are accepted."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Stores the currently active game mode."""
    mode: GameMode = GameMode.PLAYING
