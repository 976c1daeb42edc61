# geometry.py
"""Grid geometry and collision rules. Everything here is a pure function."""
import random
from typing import Iterable, Optional, Sequence, Tuple

from .config import FOOD_TYPES, INITIAL_DIRECTION, INITIAL_LENGTH, Direction, Position


def next_head_position(head: Position, direction: Direction) -> Position:
    """Translate ``head`` one cell in ``direction``. No bounds clamping."""
    dx, dy = direction.value
    return (head[0] + dx, head[1] + dy)


def is_opposite_direction(a: Direction, b: Direction) -> bool:
    # Applied regardless of snake length, so a single-cell snake can't reverse either.
    return a.value[0] == -b.value[0] and a.value[1] == -b.value[1]


def in_bounds(pos: Position, grid_size: int) -> bool:
    x, y = pos
    return 0 <= x < grid_size and 0 <= y < grid_size


def is_collision(head: Position, snake_body: Sequence[Position], grid_size: int) -> bool:
    """
    True if ``head`` is off the grid or lands on the body.

    ``snake_body`` is the pre-move body; its first cell (the current head)
    is skipped so a head is never compared against itself.
    """
    if not in_bounds(head, grid_size):
        return True
    return head in tuple(snake_body[1:])


def is_food_collision(head: Position, food_position: Position) -> bool:
    return tuple(head) == tuple(food_position)


def random_free_position(
    grid_size: int,
    occupied: Iterable[Position],
    rng: Optional[random.Random] = None,
) -> Position:
    """
    Draw a uniformly random cell not in ``occupied``.

    Gives up after grid_size**2 draws and returns the last one, even if it
    is occupied (only reachable when the snake fills the grid).
    """
    rng = rng or random
    taken = set(occupied)
    max_attempts = grid_size * grid_size
    attempts = 0
    while True:
        pos = (rng.randrange(grid_size), rng.randrange(grid_size))
        attempts += 1
        if pos not in taken or attempts >= max_attempts:
            return pos


def random_food_kind(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return rng.choice(list(FOOD_TYPES))


def initial_snake(grid_size: int, length: int = INITIAL_LENGTH) -> Tuple[Position, ...]:
    """Canonical starting body: head at the grid centre, trailing away from the initial facing."""
    cx, cy = grid_size // 2, grid_size // 2
    dx, dy = INITIAL_DIRECTION.value
    return tuple((cx - i * dx, cy - i * dy) for i in range(length))
