# controls.py
from enum import Enum
from typing import Optional, Union
import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, Direction


class Command(Enum):
    START = "start"
    PAUSE = "pause"
    RESET = "reset"
    FULLSCREEN = "fullscreen"
    TOGGLE_SOUND = "toggle_sound"
    FASTER = "faster"
    SLOWER = "slower"
    GRID_SMALLER = "grid_smaller"
    GRID_LARGER = "grid_larger"
    QUIT = "quit"


KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

KEY_COMMANDS = {
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_SPACE: Command.PAUSE,
    pygame.K_p: Command.PAUSE,
    pygame.K_r: Command.RESET,
    pygame.K_f: Command.FULLSCREEN,
    pygame.K_m: Command.TOGGLE_SOUND,
    pygame.K_EQUALS: Command.FASTER,
    pygame.K_PLUS: Command.FASTER,
    pygame.K_KP_PLUS: Command.FASTER,
    pygame.K_MINUS: Command.SLOWER,
    pygame.K_KP_MINUS: Command.SLOWER,
    pygame.K_LEFTBRACKET: Command.GRID_SMALLER,
    pygame.K_RIGHTBRACKET: Command.GRID_LARGER,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q: Command.QUIT,
}

# F with a modifier is left to the OS / window manager
_BLOCKING_MODS = pygame.KMOD_CTRL | pygame.KMOD_ALT | pygame.KMOD_META


def map_key(key: int, mod: int = 0) -> Optional[Union[Direction, Command]]:
    """Translate a pygame key press into a Direction, a Command, or None."""
    if key in KEY_DIRECTIONS:
        return KEY_DIRECTIONS[key]
    cmd = KEY_COMMANDS.get(key)
    if cmd is Command.FULLSCREEN and mod & _BLOCKING_MODS:
        return None
    return cmd
