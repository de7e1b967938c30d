"""Countdown engine for a single boxing round.

Run states
----------
STOPPED   Clock loaded but not advancing.
RUNNING   One tick per second decrements ``remaining``.
PAUSED    Clock frozen mid-phase; ``resume()`` continues it.

Phases
------
WORK      Counts down ``work_duration``.
REST      Counts down ``rest_duration``.

The engine never changes phase on its own.  When a tick leaves
``remaining`` at 0 it emits ``phase_boundary(phase)`` and leaves the
decision to its owner (see :mod:`boxingtimer.timer.sequencer`), which
usually answers with ``reset_to()`` followed by ``start()``.

Zero-length phases are allowed: with ``work_duration == 0`` the first
tick after ``start()`` reports the boundary.
"""

from __future__ import annotations

from enum import Enum

from loguru import logger
from PyQt6.QtCore import QObject, pyqtSignal

from .ticker import QtTickSource, TickSource


# ── enums ─────────────────────────────────────────────────────────────────


class TimerPhase(Enum):
    WORK = "work"
    REST = "rest"


class TimerRunState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_WORK_DURATION = 3 * 60
DEFAULT_REST_DURATION = 60


def format_duration(seconds: int) -> str:
    """Render *seconds* as ``m:ss`` (``125`` → ``"2:05"``)."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class IntervalTimer(QObject):
    """Work/rest countdown clock driven by an injectable tick source.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every tick that the engine processes.
    phase_changed(phase: TimerPhase)
        Emitted by ``reset_to()`` when the phase actually changes.
    state_changed(run_state: TimerRunState)
        Emitted on every run-state transition.
    phase_boundary(phase: TimerPhase)
        Emitted once per tick that observes ``remaining == 0``.
    """

    tick = pyqtSignal(int)
    phase_changed = pyqtSignal(object)
    state_changed = pyqtSignal(object)
    phase_boundary = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        ticker: TickSource | None = None,
        work_duration: int = DEFAULT_WORK_DURATION,
        rest_duration: int = DEFAULT_REST_DURATION,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._durations: dict[TimerPhase, int] = {
            TimerPhase.WORK: max(0, work_duration),
            TimerPhase.REST: max(0, rest_duration),
        }

        # ── countdown state ───────────────────────────────────────────
        self._phase: TimerPhase = TimerPhase.WORK
        self._run_state: TimerRunState = TimerRunState.STOPPED
        self._remaining: int = self._durations[TimerPhase.WORK]
        self._phase_duration: int = self._remaining

        # ── tick source ───────────────────────────────────────────────
        self._ticker: TickSource = ticker or QtTickSource(self)
        self._ticker.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def phase(self) -> TimerPhase:
        return self._phase

    @property
    def run_state(self) -> TimerRunState:
        return self._run_state

    @property
    def remaining(self) -> int:
        """Seconds left in the current phase."""
        return self._remaining

    @property
    def phase_duration(self) -> int:
        """Seconds the current phase was loaded with."""
        return self._phase_duration

    @property
    def work_duration(self) -> int:
        return self._durations[TimerPhase.WORK]

    @property
    def rest_duration(self) -> int:
        return self._durations[TimerPhase.REST]

    @property
    def is_running(self) -> bool:
        return self._run_state == TimerRunState.RUNNING

    @property
    def ticker(self) -> TickSource:
        return self._ticker

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current phase."""
        if self._phase_duration <= 0:
            return 1.0
        elapsed = self._phase_duration - self._remaining
        return max(0.0, min(1.0, elapsed / self._phase_duration))

    def duration_for(self, phase: TimerPhase) -> int:
        return self._durations[phase]

    def set_durations(
        self, work: int | None = None, rest: int | None = None
    ) -> None:
        """Change the phase lengths.  Negative values clamp to zero.

        While STOPPED the clock is reloaded with the new duration of the
        current phase; a running or paused countdown is left alone.
        """
        if work is not None:
            self._durations[TimerPhase.WORK] = max(0, int(work))
        if rest is not None:
            self._durations[TimerPhase.REST] = max(0, int(rest))
        if self._run_state == TimerRunState.STOPPED:
            self._remaining = self._durations[self._phase]
            self._phase_duration = self._remaining
            self.tick.emit(self._remaining)

    def format_remaining(self) -> str:
        return format_duration(self._remaining)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start (or resume) ticking.  No-op while already RUNNING."""
        if self._run_state == TimerRunState.RUNNING:
            return
        self._set_state(TimerRunState.RUNNING)
        self._ticker.start()

    def resume(self) -> None:
        """Continue a PAUSED countdown."""
        if self._run_state != TimerRunState.PAUSED:
            return
        self.start()

    def pause(self) -> None:
        if self._run_state != TimerRunState.RUNNING:
            return
        self._ticker.stop()
        self._set_state(TimerRunState.PAUSED)

    def stop(self) -> None:
        """Cancel ticking and return to STOPPED without touching the clock."""
        self._ticker.stop()
        if self._run_state != TimerRunState.STOPPED:
            self._set_state(TimerRunState.STOPPED)

    def reset_to(self, phase: TimerPhase, duration: int) -> None:
        """Load *phase* with *duration* seconds and stop."""
        self._ticker.stop()
        previous = self._phase
        self._phase = phase
        self._remaining = max(0, int(duration))
        self._phase_duration = self._remaining
        if self._run_state != TimerRunState.STOPPED:
            self._set_state(TimerRunState.STOPPED)
        if previous != phase:
            logger.debug("Phase {} -> {}", previous.value, phase.value)
            self.phase_changed.emit(phase)
        self.tick.emit(self._remaining)

    def dispose(self) -> None:
        """Cancel any pending tick; called when the owner is torn down."""
        self._ticker.stop()
        self._run_state = TimerRunState.STOPPED

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._run_state != TimerRunState.RUNNING:
            return
        if self._remaining > 0:
            self._remaining -= 1
        self.tick.emit(self._remaining)
        if self._remaining == 0:
            self.phase_boundary.emit(self._phase)

    def _set_state(self, new_state: TimerRunState) -> None:
        self._run_state = new_state
        self.state_changed.emit(new_state)
