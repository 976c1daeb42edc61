# render.py
import math
from typing import Optional, Tuple
import pygame # type: ignore

from .config import (
    CFG, TEXT, EYES, OVERLAY, FOOD_TYPES,
    LEFT, RIGHT, GameSettings, GameStatus,
)
from .game import GameState


# ---------- Layout ----------
def board_rect(width: int, height: int, fullscreen: bool, padding: Optional[int] = None) -> pygame.Rect:
    """Square board: fixed size in a window, largest fitting square (minus padding) in fullscreen."""
    if fullscreen:
        pad = CFG.padding if padding is None else padding
        size = max(min(width, height) - pad, 1)
    else:
        size = min(CFG.window_size, width, height)
    rect = pygame.Rect(0, 0, size, size)
    rect.center = (width // 2, height // 2)
    return rect


def status_message(state: GameState) -> str:
    if state.status is GameStatus.IDLE:
        return "Press Enter to start!"
    if state.status is GameStatus.PLAYING:
        return "Use Arrow Keys or WASD to move"
    if state.status is GameStatus.PAUSED:
        return "Game Paused"
    return f"Game Over! Final Score: {state.score}"


# ---------- Draw ----------
def _cell_rect(rect: pygame.Rect, cell: float, gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(
        rect.x + int(gx * cell) + 1,
        rect.y + int(gy * cell) + 1,
        max(int(cell) - 2, 1),
        max(int(cell) - 2, 1),
    )


def _eye_rects(cell_rect: pygame.Rect, cell: float, state: GameState) -> Tuple[pygame.Rect, pygame.Rect]:
    size = max(int(cell / 6), 1)
    offset = int(cell / 4)
    x, y = cell_rect.x - 1, cell_rect.y - 1
    first = pygame.Rect(x + offset, y + offset, size, size)
    if state.direction in (LEFT, RIGHT):
        second = pygame.Rect(x + offset, y + int(cell) - offset - size, size, size)
    else:
        second = pygame.Rect(x + int(cell) - offset - size, y + offset, size, size)
    return first, second


def draw_board(surface: pygame.Surface, rect: pygame.Rect, state: GameState, settings: GameSettings) -> None:
    cell = rect.width / settings.grid_size

    pygame.draw.rect(surface, pygame.Color(settings.background_color), rect)

    grid_color = pygame.Color(settings.grid_color)
    for i in range(settings.grid_size + 1):
        offset = int(i * cell)
        pygame.draw.line(surface, grid_color, (rect.x + offset, rect.y), (rect.x + offset, rect.bottom))
        pygame.draw.line(surface, grid_color, (rect.x, rect.y + offset), (rect.right, rect.y + offset))

    snake_color = pygame.Color(settings.snake_color)
    for index, (gx, gy) in enumerate(state.snake):
        seg = _cell_rect(rect, cell, gx, gy)
        pygame.draw.rect(surface, snake_color, seg)
        if index == 0:
            for eye in _eye_rects(seg, cell, state):
                pygame.draw.rect(surface, EYES, eye)

    fx, fy = state.food.position
    center = (rect.x + int((fx + 0.5) * cell), rect.y + int((fy + 0.5) * cell))
    radius = max(int(cell / 2) - 2, 1)
    kind = FOOD_TYPES.get(state.food.kind)
    pygame.draw.circle(surface, pygame.Color(settings.food_color), center, radius)
    if kind is not None:
        pygame.draw.circle(surface, pygame.Color(kind.color), center, max(int(math.ceil(radius * 0.7)), 1))


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, state: GameState, settings: GameSettings) -> None:
    score = font.render(f"Score: {state.score}", True, TEXT)
    surface.blit(score, (8, 6))

    speed = font.render(f"Speed: {round(1000 / settings.tick_interval_ms)} moves/sec", True, TEXT)
    surface.blit(speed, (surface.get_width() - speed.get_width() - 8, 6))

    msg = font.render(status_message(state), True, TEXT)
    surface.blit(msg, msg.get_rect(midbottom=(surface.get_width() // 2, surface.get_height() - 6)))


def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect, score: int) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    surface.blit(overlay, rect.topleft)

    title = font.render("GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press Enter to play again", True, TEXT)
    sco   = font.render(f"Score: {score}", True, TEXT)

    surface.blit(title, title.get_rect(center=(rect.centerx, rect.centery - 16)))
    surface.blit(sub, sub.get_rect(center=(rect.centerx, rect.centery + 16)))
    surface.blit(sco, sco.get_rect(center=(rect.centerx, rect.centery + 44)))


def draw_game(surface: pygame.Surface, font: pygame.font.Font, state: GameState, settings: GameSettings, fullscreen: bool = False) -> pygame.Rect:
    """Draw a full frame for ``state``; returns the board rect used."""
    surface.fill((0, 0, 0))
    rect = board_rect(surface.get_width(), surface.get_height(), fullscreen)
    draw_board(surface, rect, state, settings)
    if state.status is GameStatus.GAME_OVER:
        draw_game_over(surface, font, rect, state.score)
    draw_hud(surface, font, state, settings)
    return rect
