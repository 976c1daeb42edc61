# events.py
"""Derive presentation events by diffing two consecutive engine snapshots."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .config import GameStatus
from .game import GameState


class SoundKind(Enum):
    MOVE = "move"
    EAT = "eat"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class StateEvent:
    kind: SoundKind
    food_kind: Optional[str] = None   # set for EAT only


def diff_states(previous: GameState, current: GameState) -> List[StateEvent]:
    if previous.status is not GameStatus.PLAYING:
        return []
    if current.status is GameStatus.GAME_OVER:
        return [StateEvent(SoundKind.GAME_OVER)]
    if current.status is not GameStatus.PLAYING or current.snake == previous.snake:
        return []
    if current.length > previous.length:
        return [StateEvent(SoundKind.EAT, food_kind=previous.food.kind)]
    return [StateEvent(SoundKind.MOVE)]
