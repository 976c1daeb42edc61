# game.py
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple
import random

from .config import (
    FOOD_TYPES, INITIAL_DIRECTION,
    Direction, GameSettings, GameStatus, Position,
)
from .geometry import (
    initial_snake, is_collision, is_food_collision, is_opposite_direction,
    next_head_position, random_food_kind, random_free_position,
)


# ---------- State ----------
@dataclass(frozen=True)
class Food:
    position: Position
    kind: str
    score: int


@dataclass(frozen=True)
class GameState:
    snake: Tuple[Position, ...]        # head at index 0
    food: Food
    direction: Direction               # direction in effect
    pending_direction: Direction       # applied on the next tick
    score: int
    status: GameStatus

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)


# ---------- Helpers ----------
def spawn_food(
    grid_size: int,
    occupied: Iterable[Position],
    rng: Optional[random.Random] = None,
) -> Food:
    position = random_free_position(grid_size, occupied, rng)
    kind = random_food_kind(rng)
    return Food(position=position, kind=kind, score=FOOD_TYPES[kind].score)


def _new_game_state(settings: GameSettings, status: GameStatus, rng: Optional[random.Random]) -> GameState:
    snake = initial_snake(settings.grid_size)
    return GameState(
        snake=snake,
        food=spawn_food(settings.grid_size, snake, rng),
        direction=INITIAL_DIRECTION,
        pending_direction=INITIAL_DIRECTION,
        score=0,
        status=status,
    )


# ---------- Lifecycle ----------
def start(settings: GameSettings, rng: Optional[random.Random] = None) -> GameState:
    """Fresh game, already playing."""
    return _new_game_state(settings, GameStatus.PLAYING, rng)


def reset(settings: GameSettings, rng: Optional[random.Random] = None) -> GameState:
    """Fresh game waiting in idle until the player starts it."""
    return _new_game_state(settings, GameStatus.IDLE, rng)


def pause(state: GameState) -> GameState:
    if state.status is GameStatus.PLAYING:
        return replace(state, status=GameStatus.PAUSED)
    if state.status is GameStatus.PAUSED:
        return replace(state, status=GameStatus.PLAYING)
    return state


# ---------- Input / Update ----------
def request_direction(state: GameState, direction: Direction) -> GameState:
    """Queue ``direction`` for the next tick (no 180° turns). Last request wins."""
    if state.status is not GameStatus.PLAYING:
        return state
    if is_opposite_direction(state.direction, direction):
        return state
    return replace(state, pending_direction=direction)


def step(state: GameState, settings: GameSettings, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance the game by one tick.
    - Collision is checked against the pre-move body; on death the board is frozen.
    - Eating grows the snake by one (tail kept) and spawns new food.
    - Otherwise the tail drops and the length is unchanged.
    Outside of PLAYING this is a no-op.
    """
    if state.status is not GameStatus.PLAYING:
        return state

    direction = state.pending_direction
    new_head = next_head_position(state.head, direction)

    if is_collision(new_head, state.snake, settings.grid_size):
        return replace(state, status=GameStatus.GAME_OVER)

    snake = (new_head,) + state.snake
    food = state.food
    score = state.score

    if is_food_collision(new_head, food.position):
        score += food.score
        food = spawn_food(settings.grid_size, snake, rng)
    else:
        snake = snake[:-1]

    return replace(
        state,
        snake=snake,
        food=food,
        direction=direction,
        pending_direction=direction,
        score=score,
    )
