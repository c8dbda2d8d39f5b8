"""Round engine: the streak/feedback state machine for one game.

A round walks a play sequence one image at a time. Each accepted guess puts
the round into a feedback window; a scheduler fires the follow-up transition
once that window elapses. Only one guess can be in flight at a time.

The transition functions are pure (old state -> new state); ``RoundHandle``
owns the current state, the scheduler and the callbacks.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .records import Coast, ImageRecord
from .scheduler import Scheduler
from .sequencer import PlaySequence

logger = logging.getLogger(__name__)

GameOverCallback = Callable[[int, Optional[str]], None]
StateChangeCallback = Callable[["RoundHandle"], None]

DEFAULT_CORRECT_DELAY = 1.0
DEFAULT_INCORRECT_DELAY = 1.5


class RoundStatus(str, Enum):
    NO_DATA = 'no_data'
    AWAITING_GUESS = 'awaiting_guess'
    SHOWING_FEEDBACK = 'showing_feedback'
    TERMINATED = 'terminated'


@dataclass(frozen=True)
class Feedback:
    is_correct: bool
    city: str


@dataclass(frozen=True)
class Progress:
    position: int
    total: int


@dataclass(frozen=True)
class RoundState:
    status: RoundStatus = RoundStatus.AWAITING_GUESS
    position: int = 0
    streak: int = 0
    feedback: Optional[Feedback] = None
    final_score: Optional[int] = None
    offending_city: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status == RoundStatus.TERMINATED


def initial_state(sequence: PlaySequence) -> RoundState:
    if not sequence:
        return RoundState(status=RoundStatus.NO_DATA)
    return RoundState()


def evaluate_guess(state: RoundState, sequence: PlaySequence, guess: Coast) -> RoundState:
    """Open the feedback window for ``guess``; any state but awaiting_guess is returned unchanged."""
    if state.status != RoundStatus.AWAITING_GUESS or state.position >= len(sequence):
        return state
    image = sequence[state.position]
    return replace(
        state,
        status=RoundStatus.SHOWING_FEEDBACK,
        feedback=Feedback(is_correct=image.coast == guess, city=image.city),
    )


def resolve_feedback(state: RoundState, sequence: PlaySequence) -> RoundState:
    """Close the feedback window: advance, win or lose.

    A correct guess bumps the streak and either moves to the next image or,
    on the last image, terminates with no offending city. A wrong guess
    terminates with the streak as it stood before the guess.
    """
    if state.status != RoundStatus.SHOWING_FEEDBACK or state.feedback is None:
        return state
    if not state.feedback.is_correct:
        return replace(
            state,
            status=RoundStatus.TERMINATED,
            feedback=None,
            final_score=state.streak,
            offending_city=sequence[state.position].city,
        )
    streak = state.streak + 1
    if state.position + 1 == len(sequence):
        return replace(
            state,
            status=RoundStatus.TERMINATED,
            streak=streak,
            feedback=None,
            final_score=streak,
            offending_city=None,
        )
    return replace(
        state,
        status=RoundStatus.AWAITING_GUESS,
        position=state.position + 1,
        streak=streak,
        feedback=None,
    )


class RoundHandle:
    """One game in progress over a fixed play sequence."""

    def __init__(
        self,
        sequence: PlaySequence,
        *,
        scheduler: Scheduler,
        on_game_over: Optional[GameOverCallback] = None,
        on_state_change: Optional[StateChangeCallback] = None,
        correct_delay: float = DEFAULT_CORRECT_DELAY,
        incorrect_delay: float = DEFAULT_INCORRECT_DELAY,
    ) -> None:
        self.sequence = tuple(sequence)
        self.scheduler = scheduler
        self.on_game_over = on_game_over
        self.on_state_change = on_state_change
        self.correct_delay = correct_delay
        self.incorrect_delay = incorrect_delay
        self._state = initial_state(self.sequence)
        self._lock = threading.Lock()
        self._game_over_sent = False

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def current_image(self) -> Optional[ImageRecord]:
        state = self._state
        if state.status == RoundStatus.NO_DATA or state.position >= len(self.sequence):
            return None
        return self.sequence[state.position]

    @property
    def streak(self) -> int:
        return self._state.streak

    @property
    def progress(self) -> Progress:
        return Progress(position=self._state.position, total=len(self.sequence))

    def submit_guess(self, guess: Coast) -> bool:
        """Evaluate a guess against the current image.

        Returns False (and changes nothing) while a previous guess is still
        showing feedback, after the round ended, or when there is no image.
        """
        guess = Coast.parse(guess)
        with self._lock:
            before = self._state
            after = evaluate_guess(before, self.sequence, guess)
            if after is before:
                logger.debug("[guess-ignored] status=%s position=%s", before.status.value, before.position)
                return False
            self._state = after
            delay = self.correct_delay if after.feedback.is_correct else self.incorrect_delay
            logger.info(
                "[guess] position=%s guess=%s correct=%s delay=%ss",
                after.position, guess.value, after.feedback.is_correct, delay,
            )
        self._notify_state_change()
        self.scheduler.call_later(delay, self._resolve_feedback)
        return True

    def _resolve_feedback(self) -> None:
        with self._lock:
            self._state = resolve_feedback(self._state, self.sequence)
            state = self._state
            fire_game_over = state.is_terminal and not self._game_over_sent
            if fire_game_over:
                self._game_over_sent = True
        logger.info(
            "[feedback-resolve] status=%s position=%s streak=%s",
            state.status.value, state.position, state.streak,
        )
        self._notify_state_change()
        if fire_game_over and self.on_game_over is not None:
            self.on_game_over(state.final_score, state.offending_city)

    def _notify_state_change(self) -> None:
        if self.on_state_change is not None:
            self.on_state_change(self)

    def to_dict(self) -> Dict[str, Any]:
        state = self._state
        image = self.current_image
        return {
            'status': state.status.value,
            'position': state.position,
            'total': len(self.sequence),
            'streak': state.streak,
            'current_image': image.to_dict() if image else None,
            'feedback': (
                {'correct': state.feedback.is_correct, 'city': state.feedback.city}
                if state.feedback else None
            ),
            'final_score': state.final_score,
            'offending_city': state.offending_city,
        }
