"""Shared test helpers for BoxingTimer."""

from datetime import datetime, timedelta

from boxingtimer.catalog import Difficulty, Exercise, ExerciseCategory
from boxingtimer.timer.engine import IntervalTimer


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


def make_exercise(exercise_id: str, name: str | None = None) -> Exercise:
    return Exercise(
        id=exercise_id,
        name=name or exercise_id.title(),
        description="",
        instructions="",
        category=ExerciseCategory.TECHNIQUE,
        difficulty=Difficulty.BEGINNER,
    )


def finish_phase(timer: IntervalTimer) -> None:
    """Tick a running timer until the current phase hits its boundary."""
    timer.ticker.fire(max(1, timer.remaining))
