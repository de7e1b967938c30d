"""Drives an :class:`IntervalTimer` through a planned list of exercises.

Round/rest policy
-----------------
A REST interval separates every two consecutive WORK intervals of the
run, both between rounds of the same exercise and between exercises.
No rest follows the very last round.  For ``[(A, 2), (B, 1)]`` the run is::

    A#1 work → rest → A#2 work → rest → B#1 work → completed

When a WORK interval ends, the round counts as completed; the position
moves to the next round (or the next exercise) *before* the rest starts,
so a rest always shows what comes next.

Planned exercises are immutable :class:`WorkoutExercise` records held in
an index-addressed tuple.  Only the sequencer replaces entries; callers
get the tuple, never a mutable list.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Callable

from loguru import logger
from PyQt6.QtCore import QObject, pyqtSignal

from .engine import IntervalTimer, TimerPhase


@dataclass(frozen=True)
class WorkoutExercise:
    """One catalog exercise planned for *rounds* rounds in this workout."""

    exercise: Any
    rounds: int
    completed_rounds: int = 0
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def is_completed(self) -> bool:
        return self.completed_rounds >= self.rounds

    @property
    def remaining_rounds(self) -> int:
        return max(0, self.rounds - self.completed_rounds)


class WorkoutSequencer(QObject):
    """Exercise/round bookkeeping on top of one interval timer.

    Signals
    -------
    position_changed(exercise_index: int, round_index: int)
        Emitted whenever either cursor moves.
    round_completed(exercise_index: int, completed_rounds: int)
        Emitted when a WORK interval finishes.
    workout_completed(session_duration: int)
        Emitted once, after the final round of the final exercise.
    """

    position_changed = pyqtSignal(int, int)
    round_completed = pyqtSignal(int, int)
    workout_completed = pyqtSignal(int)

    def __init__(
        self,
        timer: IntervalTimer,
        parent: QObject | None = None,
        *,
        exercises: list[WorkoutExercise] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(parent)
        self._timer = timer
        self._clock = clock
        self._exercises: tuple[WorkoutExercise, ...] = tuple(exercises or ())

        self._exercise_index: int = 0
        self._round_index: int = 0
        self._session_start: datetime | None = None
        self._session_duration: int = 0
        self._finished: bool = False
        self._disposed: bool = False

        self._timer.phase_boundary.connect(self._on_phase_boundary)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def timer(self) -> IntervalTimer:
        return self._timer

    @property
    def exercises(self) -> tuple[WorkoutExercise, ...]:
        return self._exercises

    @property
    def current_exercise_index(self) -> int:
        return self._exercise_index

    @property
    def current_round_index(self) -> int:
        return self._round_index

    @property
    def current_exercise(self) -> WorkoutExercise | None:
        if 0 <= self._exercise_index < len(self._exercises):
            return self._exercises[self._exercise_index]
        return None

    @property
    def total_rounds(self) -> int:
        """Planned rounds across the workout; never below 1."""
        return max(1, sum(item.rounds for item in self._exercises))

    @property
    def current_total_round(self) -> int:
        """1-based round number counted across all exercises."""
        before = sum(item.rounds for item in self._exercises[: self._exercise_index])
        return before + self._round_index + 1

    @property
    def session_start(self) -> datetime | None:
        return self._session_start

    @property
    def session_duration(self) -> int:
        """Seconds from first start to completion (0 until completed)."""
        return self._session_duration

    @property
    def is_started(self) -> bool:
        return self._session_start is not None

    @property
    def is_finished(self) -> bool:
        return self._finished

    def elapsed_seconds(self) -> int:
        """Wall-clock seconds since the first start; frozen once finished."""
        if self._finished:
            return self._session_duration
        if self._session_start is None:
            return 0
        return max(0, int((self._clock() - self._session_start).total_seconds()))

    # ══════════════════════════════════════════════════════════════════
    #  PLANNING
    # ══════════════════════════════════════════════════════════════════

    def add_exercise(self, exercise: Any, rounds: int = 1) -> WorkoutExercise | None:
        if self.is_started:
            logger.warning("Cannot add exercises once the workout has started")
            return None
        item = WorkoutExercise(exercise=exercise, rounds=max(1, int(rounds)))
        self._exercises = self._exercises + (item,)
        return item

    def remove_exercise(self, index: int) -> WorkoutExercise | None:
        if self.is_started:
            logger.warning("Cannot remove exercises once the workout has started")
            return None
        if not 0 <= index < len(self._exercises):
            return None
        removed = self._exercises[index]
        self._exercises = self._exercises[:index] + self._exercises[index + 1:]
        if self._exercise_index >= len(self._exercises):
            self._exercise_index = 0
            self._round_index = 0
        return removed

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        if not self._exercises:
            logger.warning("Ignoring start: no exercises planned")
            return
        if self._finished:
            logger.warning("Ignoring start: workout already completed, reset it first")
            return
        if self._session_start is None:
            self._session_start = self._clock()
            self._finished = False
            logger.info(
                "Workout started: {} exercises, {} rounds",
                len(self._exercises), self.total_rounds,
            )
        self._timer.start()

    def pause(self) -> None:
        self._timer.pause()

    def resume(self) -> None:
        self._timer.resume()

    def jump_to(self, exercise_index: int) -> None:
        """Move to the first round of another exercise; out of range is ignored."""
        if not 0 <= exercise_index < len(self._exercises):
            return
        self._set_position(exercise_index, 0)

    def next_exercise(self) -> None:
        self.jump_to(self._exercise_index + 1)

    def previous_exercise(self) -> None:
        self.jump_to(self._exercise_index - 1)

    def reset_current_round(self) -> None:
        """Reload the full duration of the current phase, stopped."""
        self._timer.pause()
        phase = self._timer.phase
        self._timer.reset_to(phase, self._timer.duration_for(phase))

    def reset_workout(self) -> None:
        """Back to the first round of the first exercise with nothing done."""
        self._timer.pause()
        self._timer.reset_to(TimerPhase.WORK, self._timer.work_duration)
        self._exercises = tuple(
            replace(item, completed_rounds=0) for item in self._exercises
        )
        self._session_start = None
        self._session_duration = 0
        self._finished = False
        self._set_position(0, 0)

    def dispose(self) -> None:
        """Stop ticking for good; call when the owning screen goes away."""
        self._timer.dispose()
        if not self._disposed:
            self._timer.phase_boundary.disconnect(self._on_phase_boundary)
            self._disposed = True

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: transitions
    # ══════════════════════════════════════════════════════════════════

    def _on_phase_boundary(self, phase: TimerPhase) -> None:
        if self._finished or self.current_exercise is None:
            self._timer.stop()
            return
        if phase == TimerPhase.REST:
            self._timer.reset_to(TimerPhase.WORK, self._timer.work_duration)
            self._timer.start()
            return
        self._complete_round()

    def _complete_round(self) -> None:
        index = self._exercise_index
        current = self._exercises[index]
        # A jump back to a finished exercise replays rounds without recounting.
        done = replace(
            current,
            completed_rounds=min(current.rounds, current.completed_rounds + 1),
        )
        self._exercises = (
            self._exercises[:index] + (done,) + self._exercises[index + 1:]
        )
        logger.debug(
            "Round {}/{} of exercise {} completed",
            done.completed_rounds, done.rounds, index,
        )
        self.round_completed.emit(index, done.completed_rounds)

        round_index = self._round_index + 1
        if round_index < current.rounds:
            self._set_position(index, round_index)
            self._begin_rest()
            return

        if index + 1 < len(self._exercises):
            self._set_position(index + 1, 0)
            self._begin_rest()
            return

        self._finish()

    def _begin_rest(self) -> None:
        self._timer.reset_to(TimerPhase.REST, self._timer.rest_duration)
        self._timer.start()

    def _finish(self) -> None:
        self._timer.reset_to(TimerPhase.WORK, self._timer.work_duration)
        self._finished = True
        start = self._session_start or self._clock()
        self._session_duration = max(
            0, int((self._clock() - start).total_seconds())
        )
        self._set_position(0, 0)
        logger.info("Workout completed in {} s", self._session_duration)
        self.workout_completed.emit(self._session_duration)

    def _set_position(self, exercise_index: int, round_index: int) -> None:
        if (exercise_index, round_index) == (self._exercise_index, self._round_index):
            return
        self._exercise_index = exercise_index
        self._round_index = round_index
        self.position_changed.emit(exercise_index, round_index)
