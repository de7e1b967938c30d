"""Saved workout sessions."""

from .recorder import (
    ExerciseResultRecord,
    WorkoutSessionRecord,
    SessionRecorder,
    SessionSaveError,
    build_session_record,
)
from .store import (
    TrainingTotals,
    save_session,
    all_sessions,
    sessions_between,
    exercise_statistics,
    delete_session,
    training_totals,
)

__all__ = [
    "ExerciseResultRecord",
    "WorkoutSessionRecord",
    "SessionRecorder",
    "SessionSaveError",
    "build_session_record",
    "TrainingTotals",
    "save_session",
    "all_sessions",
    "sessions_between",
    "exercise_statistics",
    "delete_session",
    "training_totals",
]
