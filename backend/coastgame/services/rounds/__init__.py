"""Round engine services: sequencing, the streak state machine and timers.

This package is pure domain logic with no Flask imports. HTTP routes and
socket handlers call the functions below and keep transport concerns on
their side.
"""

import random
from typing import Iterable, Optional

from .engine import (
    DEFAULT_CORRECT_DELAY,
    DEFAULT_INCORRECT_DELAY,
    Feedback,
    GameOverCallback,
    Progress,
    RoundHandle,
    RoundState,
    RoundStatus,
    StateChangeCallback,
)
from .records import Coast, ImageRecord
from .scheduler import ManualScheduler, Scheduler, SocketIOScheduler
from .sequencer import build_sequence


def start_round(
    images: Iterable[ImageRecord],
    *,
    scheduler: Scheduler,
    on_game_over: Optional[GameOverCallback] = None,
    on_state_change: Optional[StateChangeCallback] = None,
    rng: Optional[random.Random] = None,
    correct_delay: float = DEFAULT_CORRECT_DELAY,
    incorrect_delay: float = DEFAULT_INCORRECT_DELAY,
) -> RoundHandle:
    """Shuffle a fresh play sequence from ``images`` and open a round on it."""
    return RoundHandle(
        build_sequence(images, rng=rng),
        scheduler=scheduler,
        on_game_over=on_game_over,
        on_state_change=on_state_change,
        correct_delay=correct_delay,
        incorrect_delay=incorrect_delay,
    )


def current_image(handle: RoundHandle) -> Optional[ImageRecord]:
    return handle.current_image


def submit_guess(handle: RoundHandle, guess) -> bool:
    return handle.submit_guess(guess)


def current_streak(handle: RoundHandle) -> int:
    return handle.streak


def progress(handle: RoundHandle) -> Progress:
    return handle.progress


__all__ = [
    'Coast',
    'Feedback',
    'ImageRecord',
    'ManualScheduler',
    'Progress',
    'RoundHandle',
    'RoundState',
    'RoundStatus',
    'Scheduler',
    'SocketIOScheduler',
    'build_sequence',
    'current_image',
    'current_streak',
    'progress',
    'start_round',
    'submit_guess',
]
