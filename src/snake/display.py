# src/snake/display.py
"""Window / fullscreen handling behind a single capability interface."""
from typing import Optional, Tuple
import logging

import pygame  # type: ignore

from .config import CFG

logger = logging.getLogger(__name__)


class FullscreenCapability:
    """What the driver needs from a display: a surface to draw on and a fullscreen toggle."""

    def __init__(self, size: Optional[Tuple[int, int]] = None):
        self.windowed_size = size or (CFG.window_size, CFG.window_size)
        self.surface: Optional[pygame.Surface] = None
        self._fullscreen = False

    @property
    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def open(self, fullscreen: bool = False) -> pygame.Surface:
        raise NotImplementedError

    def toggle(self) -> bool:
        """Flip fullscreen on/off. Returns the resulting fullscreen flag."""
        raise NotImplementedError


class PygameDisplay(FullscreenCapability):
    def __init__(self, size: Optional[Tuple[int, int]] = None, caption: str = "Snake"):
        super().__init__(size)
        self.caption = caption

    def _set_mode(self, fullscreen: bool) -> pygame.Surface:
        if fullscreen:
            surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            surface = pygame.display.set_mode(self.windowed_size)
        pygame.display.set_caption(self.caption + (" [Fullscreen]" if fullscreen else ""))
        return surface

    def open(self, fullscreen: bool = False) -> pygame.Surface:
        self.surface = self._set_mode(fullscreen)
        self._fullscreen = fullscreen
        return self.surface

    def toggle(self) -> bool:
        target = not self._fullscreen
        try:
            self.surface = self._set_mode(target)
        except pygame.error as exc:
            logger.error("Error toggling fullscreen: %s", exc)
            return self._fullscreen
        self._fullscreen = target
        return self._fullscreen


class HeadlessDisplay(FullscreenCapability):
    """Off-screen surface for tests and dummy video drivers; fullscreen is unsupported."""

    def open(self, fullscreen: bool = False) -> pygame.Surface:
        self.surface = pygame.Surface(self.windowed_size)
        return self.surface

    def toggle(self) -> bool:
        logger.warning("Fullscreen is not supported on this display")
        return False
