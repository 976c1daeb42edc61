import random
from dataclasses import replace
from unittest.mock import MagicMock

import pygame
import pytest

from src.snake.config import (
    DEFAULT_SETTINGS, UP, LEFT, GameSettings, GameStatus, SettingsError,
)
from src.snake.driver import GameDriver
from src.snake.events import SoundKind
from src.snake.game import Food


@pytest.fixture
def sound():
    return MagicMock()


@pytest.fixture
def driver(sound):
    return GameDriver(DEFAULT_SETTINGS, sound, display=MagicMock(), rng=random.Random(7))


def _park_food(driver):
    driver.state = replace(driver.state, food=Food(position=(0, 0), kind="apple", score=10))


def test_driver_starts_idle(driver):
    assert driver.state.status is GameStatus.IDLE
    assert driver.update(10_000) is False


def test_invalid_settings_rejected(sound):
    with pytest.raises(SettingsError):
        GameDriver(GameSettings(grid_size=5), sound)
    with pytest.raises(SettingsError):
        GameDriver(GameSettings(tick_interval_ms=10), sound)


def test_sound_setting_mutes_service(sound):
    GameDriver(replace(DEFAULT_SETTINGS, sound_enabled=False), sound)
    assert sound.muted is True


def test_update_is_gated_by_tick_interval(driver, sound):
    driver.start_game(now_ms=1000)
    _park_food(driver)
    assert driver.update(1100) is False          # 100ms < 150ms
    assert driver.update(1150) is True
    assert driver.state.snake[0] == (11, 10)
    sound.play.assert_called_once_with(SoundKind.MOVE)
    assert driver.update(1200) is False


def test_eating_plays_eat_sound(driver, sound):
    driver.start_game(now_ms=0)
    driver.state = replace(driver.state, food=Food(position=(11, 10), kind="steak", score=20))
    driver.update(150)
    assert driver.state.score == 20
    sound.play.assert_called_once_with(SoundKind.EAT)


def test_crash_plays_game_over(driver, sound):
    driver.start_game(now_ms=0)
    driver.state = replace(driver.state, snake=((19, 10), (18, 10), (17, 10)))
    driver.update(150)
    assert driver.state.status is GameStatus.GAME_OVER
    sound.play.assert_called_once_with(SoundKind.GAME_OVER)


def test_play_again_after_game_over(driver):
    driver.start_game(now_ms=0)
    driver.state = replace(driver.state, status=GameStatus.GAME_OVER, score=40)
    driver.start_game(now_ms=500)
    assert driver.state.status is GameStatus.PLAYING
    assert driver.state.score == 0


def test_start_ignored_mid_game(driver):
    driver.start_game(now_ms=0)
    _park_food(driver)
    driver.update(150)
    snapshot = driver.state
    driver.start_game(now_ms=200)
    assert driver.state is snapshot


def test_pause_freezes_and_resume_waits_full_tick(driver):
    driver.start_game(now_ms=0)
    _park_food(driver)
    driver.toggle_pause(now_ms=50)
    assert driver.update(1000) is False
    driver.toggle_pause(now_ms=1000)
    assert driver.update(1100) is False
    assert driver.update(1150) is True


def test_direction_request_goes_through_engine(driver):
    driver.start_game(now_ms=0)
    _park_food(driver)
    driver.request_direction(LEFT)               # opposite, dropped
    driver.request_direction(UP)
    driver.update(150)
    assert driver.state.snake[0] == (10, 9)


def test_grid_size_refused_while_playing(driver):
    driver.start_game(now_ms=0)
    assert driver.set_grid_size(15) is False
    assert driver.settings.grid_size == 20
    driver.toggle_pause()
    assert driver.set_grid_size(15) is False


def test_grid_size_change_resets_when_idle(driver):
    assert driver.set_grid_size(12) is True
    assert driver.settings.grid_size == 12
    assert driver.state.status is GameStatus.IDLE
    assert driver.state.snake[0] == (6, 6)


def test_grid_size_is_clamped(driver):
    driver.set_grid_size(99)
    assert driver.settings.grid_size == 30


def test_tick_interval_clamped_and_allowed_mid_game(driver):
    driver.start_game(now_ms=0)
    driver.set_tick_interval(10)
    assert driver.settings.tick_interval_ms == 50
    driver.set_tick_interval(1000)
    assert driver.settings.tick_interval_ms == 300


def test_toggle_sound(driver, sound):
    assert driver.toggle_sound() is False
    assert sound.muted is True
    assert driver.toggle_sound() is True
    assert sound.muted is False


def test_handle_key_directions_and_commands(driver):
    assert driver.handle_key(pygame.K_RETURN, now_ms=0) is True
    assert driver.state.status is GameStatus.PLAYING
    driver.handle_key(pygame.K_w)
    assert driver.state.pending_direction is UP
    driver.handle_key(pygame.K_SPACE)
    assert driver.state.status is GameStatus.PAUSED
    driver.handle_key(pygame.K_r)
    assert driver.state.status is GameStatus.IDLE
    assert driver.handle_key(pygame.K_ESCAPE) is False


def test_handle_key_speed_steps(driver):
    driver.handle_key(pygame.K_EQUALS)
    assert driver.settings.tick_interval_ms == 125
    driver.handle_key(pygame.K_MINUS)
    driver.handle_key(pygame.K_MINUS)
    assert driver.settings.tick_interval_ms == 175


def test_handle_key_fullscreen(driver):
    driver.handle_key(pygame.K_f)
    driver.display.toggle.assert_called_once()
    driver.handle_key(pygame.K_f, pygame.KMOD_LCTRL)
    driver.display.toggle.assert_called_once()


def test_fullscreen_without_display_is_harmless(sound):
    GameDriver(DEFAULT_SETTINGS, sound).toggle_fullscreen()


def test_unmapped_key_is_ignored(driver):
    before = driver.state
    assert driver.handle_key(pygame.K_z) is True
    assert driver.state is before
