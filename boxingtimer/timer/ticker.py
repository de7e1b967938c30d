"""One-second tick sources for the interval timer.

A tick source delivers a callback once per elapsed second while active.
Calling ``start()`` on an already active source never creates a second
tick stream, and no tick is delivered between ``stop()`` and the next
``start()``.

``QtTickSource`` rides the Qt event loop.  ``ManualTickSource`` lets tests
(and headless replays) drive ticks deterministically with ``fire()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from PyQt6.QtCore import QObject, QTimer


TICK_INTERVAL_MS = 1000


class TickSource(ABC):
    """Interface shared by every tick source."""

    @abstractmethod
    def connect(self, callback: Callable[[], None]) -> None:
        ...

    @abstractmethod
    def start(self) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        ...

    @property
    @abstractmethod
    def is_active(self) -> bool:
        ...


class QtTickSource(TickSource):
    """A single repeating ``QTimer`` with a one-second interval."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._qt_timer = QTimer(parent)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)

    def connect(self, callback: Callable[[], None]) -> None:
        self._qt_timer.timeout.connect(callback)

    def start(self) -> None:
        # QTimer.start() would restart the interval; keep the running phase.
        if not self._qt_timer.isActive():
            self._qt_timer.start()

    def stop(self) -> None:
        self._qt_timer.stop()

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()


class ManualTickSource(TickSource):
    """Tick source advanced explicitly by calling :meth:`fire`."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []
        self._active = False
        self.delivered = 0

    def connect(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def start(self) -> None:
        self._active = True

    def stop(self) -> None:
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def fire(self, count: int = 1) -> int:
        """Deliver up to *count* ticks; returns how many were delivered.

        Stops early if a callback deactivates the source.
        """
        fired = 0
        for _ in range(count):
            if not self._active:
                break
            for callback in list(self._callbacks):
                callback()
            fired += 1
        self.delivered += fired
        return fired
