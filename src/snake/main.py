# main.py
import argparse
import logging
import random
from typing import List, Optional

import pygame # type: ignore

from .audio import SoundService
from .config import (
    CFG, DEFAULT_SETTINGS,
    GameSettings, GameStatus, SettingsError, validate_settings,
)
from .display import HeadlessDisplay, PygameDisplay
from .driver import GameDriver
from .render import draw_game

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake arcade game")
    parser.add_argument("--grid-size", type=int, default=DEFAULT_SETTINGS.grid_size,
                        help="cells per side (10-30)")
    parser.add_argument("--speed", type=int, default=DEFAULT_SETTINGS.tick_interval_ms,
                        help="milliseconds between moves (50-300, lower = faster)")
    parser.add_argument("--no-sound", action="store_true", help="start muted")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed food placement")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen (toggle with F)")
    parser.add_argument("--headless", action="store_true",
                        help="no window: start immediately and exit on game over")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="quit after this many moves")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    try:
        args.settings = validate_settings(GameSettings(
            grid_size=args.grid_size,
            tick_interval_ms=args.speed,
            sound_enabled=not args.no_sound,
        ))
    except SettingsError as exc:
        parser.error(str(exc))
    if args.max_ticks is not None and args.max_ticks < 1:
        parser.error("--max-ticks must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    display = HeadlessDisplay() if args.headless else PygameDisplay(caption="Snake")
    display.open(fullscreen=args.fullscreen)
    clock = pygame.time.Clock()

    with SoundService() as sound:
        driver = GameDriver(args.settings, sound, display=display, rng=random.Random(args.seed))
        if args.headless:
            # nothing can press Enter without a window
            driver.start_game(pygame.time.get_ticks())
        ticks = 0
        running = True
        try:
            while running:
                # 1) input
                for event in ([] if args.headless else pygame.event.get()):
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        running = driver.handle_key(event.key, event.mod, pygame.time.get_ticks()) and running

                # 2) update
                if driver.update(pygame.time.get_ticks()):
                    ticks += 1
                if args.max_ticks is not None and ticks >= args.max_ticks:
                    running = False
                if args.headless and driver.state.status is GameStatus.GAME_OVER:
                    running = False

                # 3) render
                draw_game(display.surface, font, driver.state, driver.settings, display.is_fullscreen)
                if not args.headless:
                    pygame.display.flip()
                clock.tick(CFG.fps)  # high FPS; movement gated inside driver.update
        finally:
            logger.info("Final score: %d", driver.state.score)
            pygame.quit()


if __name__ == "__main__":
    main()
