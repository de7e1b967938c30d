"""Timer package."""

from .engine import (
    IntervalTimer,
    TimerPhase,
    TimerRunState,
    format_duration,
    DEFAULT_WORK_DURATION,
    DEFAULT_REST_DURATION,
)
from .sequencer import WorkoutExercise, WorkoutSequencer
from .ticker import TickSource, QtTickSource, ManualTickSource

__all__ = [
    "IntervalTimer",
    "TimerPhase",
    "TimerRunState",
    "format_duration",
    "DEFAULT_WORK_DURATION",
    "DEFAULT_REST_DURATION",
    "WorkoutExercise",
    "WorkoutSequencer",
    "TickSource",
    "QtTickSource",
    "ManualTickSource",
]
