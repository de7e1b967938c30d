"""Turn a finished (or abandoned) workout into a saved session.

The record is built once, in memory, and handed to a ``save`` callable
(the SQLite store by default).  If saving fails the caller receives a
:class:`SessionSaveError` that still carries the record, so the same
record can be passed to :meth:`SessionRecorder.save` again.  Nothing is
retried automatically.

Duration apportioning
---------------------
Each exercise gets ``rounds × (session_duration // exercise_count)``
seconds, integer-truncated.  The figures are an estimate; their sum
is not guaranteed to equal ``session_duration``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable

from loguru import logger

from ..timer.sequencer import WorkoutExercise


@dataclass(frozen=True)
class ExerciseResultRecord:
    exercise_id: str
    exercise_name: str
    completed_rounds: int
    total_rounds: int
    duration: int


@dataclass(frozen=True)
class WorkoutSessionRecord:
    date: datetime
    total_duration: int
    results: tuple[ExerciseResultRecord, ...] = ()
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def completed_rounds(self) -> int:
        return sum(result.completed_rounds for result in self.results)


class SessionSaveError(Exception):
    """Saving a session failed; ``record`` can be saved again later."""

    def __init__(self, record: WorkoutSessionRecord, cause: Exception) -> None:
        super().__init__(f"Could not save workout session {record.id}: {cause}")
        self.record = record
        self.cause = cause


def build_session_record(
    exercises: Iterable[WorkoutExercise],
    session_duration: int,
    when: datetime | None = None,
) -> WorkoutSessionRecord:
    items = list(exercises)
    session_duration = max(0, int(session_duration))
    share = session_duration // len(items) if items else 0
    results = tuple(
        ExerciseResultRecord(
            exercise_id=str(item.exercise.id),
            exercise_name=item.exercise.name,
            completed_rounds=item.completed_rounds,
            total_rounds=item.rounds,
            duration=item.rounds * share,
        )
        for item in items
    )
    return WorkoutSessionRecord(
        date=when or datetime.now(),
        total_duration=session_duration,
        results=results,
    )


def _default_save(record: WorkoutSessionRecord) -> str:
    from .store import save_session

    return save_session(record)


class SessionRecorder:
    """Builds session records and hands them to the persistence store."""

    def __init__(
        self,
        save: Callable[[WorkoutSessionRecord], object] | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._save = save or _default_save
        self._clock = clock

    def record(
        self, exercises: Iterable[WorkoutExercise], session_duration: int
    ) -> WorkoutSessionRecord:
        """Build one record and save it.  Raises :class:`SessionSaveError`."""
        record = build_session_record(exercises, session_duration, self._clock())
        return self.save(record)

    def save(self, record: WorkoutSessionRecord) -> WorkoutSessionRecord:
        try:
            self._save(record)
        except Exception as exc:
            logger.exception("Saving workout session {} failed", record.id)
            raise SessionSaveError(record, exc) from exc
        logger.info(
            "Saved workout session {} ({} s, {} exercises)",
            record.id, record.total_duration, len(record.results),
        )
        return record
