"""Tests for the tick sources."""

import pytest
from PyQt6.QtCore import QCoreApplication, QElapsedTimer

from boxingtimer.timer.engine import IntervalTimer, TimerRunState
from boxingtimer.timer.ticker import (
    ManualTickSource, QtTickSource, TickSource, TICK_INTERVAL_MS,
)


class TestTickSourceInterface:

    def test_interface_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            TickSource()

    def test_partial_implementation_fails_at_construction(self):
        class StartOnly(TickSource):
            def start(self):
                pass

        with pytest.raises(TypeError):
            StartOnly()


class TestManualTickSource:

    def test_fire_requires_start(self):
        ticker = ManualTickSource()
        calls = []
        ticker.connect(lambda: calls.append(1))
        assert ticker.fire() == 0
        ticker.start()
        assert ticker.fire(3) == 3
        assert len(calls) == 3
        assert ticker.delivered == 3

    def test_stop_inside_callback_ends_burst(self):
        ticker = ManualTickSource()
        calls = []

        def once():
            calls.append(1)
            ticker.stop()

        ticker.connect(once)
        ticker.start()
        assert ticker.fire(5) == 1
        assert len(calls) == 1


class TestQtTickSource:

    def test_one_second_interval(self, qapp):
        assert QtTickSource().interval_ms == TICK_INTERVAL_MS == 1000

    def test_start_twice_keeps_single_timer(self, qapp):
        ticker = QtTickSource()
        ticker.start()
        ticker.start()
        assert ticker.is_active
        ticker.stop()
        assert not ticker.is_active

    def test_default_engine_ticker_is_qt(self, qapp):
        timer = IntervalTimer()
        assert isinstance(timer.ticker, QtTickSource)
        timer.start()
        timer.start()
        assert timer.ticker.is_active
        timer.dispose()
        assert not timer.ticker.is_active
        assert timer.run_state == TimerRunState.STOPPED

    def test_no_tick_before_a_second(self, qapp):
        timer = IntervalTimer(work_duration=10)
        timer.start()
        clock = QElapsedTimer()
        clock.start()
        while clock.elapsed() < 200:
            QCoreApplication.processEvents()
        assert timer.remaining == 10
        timer.dispose()
