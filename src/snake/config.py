from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

# ----- Window -----
WIDTH, HEIGHT = 600, 600
FULLSCREEN_PADDING = 40

# ----- Colors -----
TEXT = (220, 220, 230)
EYES = (0, 0, 0)
OVERLAY = (0, 0, 0, 140)

# ----- Grid cells -----
Position = Tuple[int, int]


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT

INITIAL_DIRECTION = RIGHT
INITIAL_LENGTH = 3


class GameStatus(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


# ----- Food kinds -----
@dataclass(frozen=True)
class FoodType:
    name: str
    score: int
    color: str


FOOD_TYPES: Dict[str, FoodType] = {
    "apple": FoodType("apple", 10, "#e11d48"),
    "banana": FoodType("banana", 10, "#facc15"),
    "cherry": FoodType("cherry", 15, "#be123c"),
    "strawberry": FoodType("strawberry", 10, "#f43f5e"),
    "watermelon": FoodType("watermelon", 15, "#22c55e"),
    "steak": FoodType("steak", 20, "#b45309"),
    "chicken": FoodType("chicken", 20, "#fbbf24"),
    "fish": FoodType("fish", 20, "#38bdf8"),
}

# ----- Tunables exposed to the player -----
GRID_SIZE_RANGE = (10, 30)
TICK_INTERVAL_RANGE = (50, 300)
TICK_INTERVAL_STEP = 25


class SettingsError(ValueError):
    """Raised when game settings fall outside the supported ranges."""


@dataclass(frozen=True)
class GameSettings:
    grid_size: int = 20
    tick_interval_ms: int = 150   # lower = faster
    sound_enabled: bool = True
    snake_color: str = "#4ade80"
    food_color: str = "#ef4444"
    grid_color: str = "#374151"
    background_color: str = "#1f2937"


DEFAULT_SETTINGS = GameSettings()


def validate_settings(settings: GameSettings) -> GameSettings:
    """Return ``settings`` unchanged, or raise SettingsError if out of range."""
    lo, hi = GRID_SIZE_RANGE
    if not lo <= settings.grid_size <= hi:
        raise SettingsError(f"grid_size must be between {lo} and {hi}, got {settings.grid_size}")
    lo, hi = TICK_INTERVAL_RANGE
    if not lo <= settings.tick_interval_ms <= hi:
        raise SettingsError(
            f"tick_interval_ms must be between {lo} and {hi}, got {settings.tick_interval_ms}"
        )
    return settings


def clamp_tick_interval(ms: int) -> int:
    lo, hi = TICK_INTERVAL_RANGE
    return max(lo, min(hi, ms))


# ----- Runtime knobs (not part of a game's settings) -----
@dataclass
class Config:
    seed: Optional[int] = None
    fps: int = 60
    window_size: int = WIDTH
    padding: int = FULLSCREEN_PADDING


CFG = Config()
