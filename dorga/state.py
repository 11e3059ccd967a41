"""The states the game moves through."""

from enum import Enum, auto


class GameState(Enum):
    """Top-level game state."""

    MAIN_MENU = auto()
    PLAYING = auto()
    PLAYER_DEAD = auto()