# driver.py
"""
Owns the clock, the current snapshot and the collaborators (audio, display).

The engine in game.py is pure; everything with side effects lives here.
"""
from dataclasses import replace
from typing import Optional, Union
import logging
import random

from . import game
from .audio import SoundService
from .config import (
    GRID_SIZE_RANGE, TICK_INTERVAL_STEP,
    Direction, GameSettings, GameStatus,
    clamp_tick_interval, validate_settings,
)
from .controls import Command, map_key
from .display import FullscreenCapability
from .events import SoundKind, diff_states
from .game import GameState

logger = logging.getLogger(__name__)


class GameDriver:
    def __init__(
        self,
        settings: GameSettings,
        sound: SoundService,
        display: Optional[FullscreenCapability] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = validate_settings(settings)
        self.sound = sound
        self.sound.muted = not settings.sound_enabled
        self.display = display
        self.rng = rng or random.Random()
        self.state: GameState = game.reset(self.settings, self.rng)
        self.last_move = 0   # ms timestamp of last step

    # ---------- Snapshot publishing ----------
    def publish(self, new_state: GameState) -> None:
        """Replace the current snapshot and play whatever the transition implies."""
        events = diff_states(self.state, new_state)
        self.state = new_state
        for event in events:
            if event.kind is SoundKind.EAT:
                logger.debug("Ate %s, score=%d", event.food_kind, new_state.score)
            elif event.kind is SoundKind.GAME_OVER:
                logger.info("Game over with score %d (length %d)", new_state.score, new_state.length)
            self.sound.play(event.kind)

    # ---------- Game commands ----------
    def start_game(self, now_ms: int = 0) -> None:
        """Start from idle, or play again after game over."""
        if self.state.status not in (GameStatus.IDLE, GameStatus.GAME_OVER):
            return
        self.publish(game.start(self.settings, self.rng))
        self.last_move = now_ms
        logger.info("Game started on a %dx%d grid", self.settings.grid_size, self.settings.grid_size)

    def reset_game(self) -> None:
        self.publish(game.reset(self.settings, self.rng))
        logger.info("Game reset")

    def toggle_pause(self, now_ms: int = 0) -> None:
        was_paused = self.state.status is GameStatus.PAUSED
        self.publish(game.pause(self.state))
        if was_paused:
            # don't fire an immediate catch-up tick on resume
            self.last_move = now_ms

    def request_direction(self, direction: Direction) -> None:
        self.state = game.request_direction(self.state, direction)

    def update(self, now_ms: int) -> bool:
        """Step once if playing and a full tick interval has elapsed. Returns True if stepped."""
        if self.state.status is not GameStatus.PLAYING:
            return False
        if now_ms - self.last_move < self.settings.tick_interval_ms:
            return False  # not time to move yet
        self.publish(game.step(self.state, self.settings, self.rng))
        self.last_move = now_ms
        return True

    # ---------- Settings ----------
    def set_grid_size(self, grid_size: int) -> bool:
        """Change the grid (implies a reset). Refused mid-game."""
        if self.state.status in (GameStatus.PLAYING, GameStatus.PAUSED):
            logger.info("Grid size can't change while a game is in progress")
            return False
        lo, hi = GRID_SIZE_RANGE
        grid_size = max(lo, min(hi, grid_size))
        self.settings = validate_settings(replace(self.settings, grid_size=grid_size))
        self.reset_game()
        return True

    def set_tick_interval(self, ms: int) -> None:
        self.settings = replace(self.settings, tick_interval_ms=clamp_tick_interval(ms))

    def toggle_sound(self) -> bool:
        enabled = not self.settings.sound_enabled
        self.settings = replace(self.settings, sound_enabled=enabled)
        self.sound.muted = not enabled
        logger.info("Sound %s", "on" if enabled else "off")
        return enabled

    def toggle_fullscreen(self) -> None:
        if self.display is None:
            logger.warning("No display attached; ignoring fullscreen toggle")
            return
        self.display.toggle()

    # ---------- Input ----------
    def handle_key(self, key: int, mod: int = 0, now_ms: int = 0) -> bool:
        """Apply a key press. Return False to quit."""
        action: Union[Direction, Command, None] = map_key(key, mod)
        if action is None:
            return True
        if isinstance(action, Direction):
            self.request_direction(action)
        elif action is Command.QUIT:
            return False
        elif action is Command.START:
            self.start_game(now_ms)
        elif action is Command.PAUSE:
            self.toggle_pause(now_ms)
        elif action is Command.RESET:
            self.reset_game()
        elif action is Command.FULLSCREEN:
            self.toggle_fullscreen()
        elif action is Command.TOGGLE_SOUND:
            self.toggle_sound()
        elif action is Command.FASTER:
            self.set_tick_interval(self.settings.tick_interval_ms - TICK_INTERVAL_STEP)
        elif action is Command.SLOWER:
            self.set_tick_interval(self.settings.tick_interval_ms + TICK_INTERVAL_STEP)
        elif action is Command.GRID_SMALLER:
            self.set_grid_size(self.settings.grid_size - 1)
        elif action is Command.GRID_LARGER:
            self.set_grid_size(self.settings.grid_size + 1)
        return True
