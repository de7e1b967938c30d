"""Shared pytest fixtures for BoxingTimer tests."""

import sys
from datetime import datetime

import pytest

from PyQt6.QtCore import QCoreApplication

from boxingtimer.database.db import configure_engine, init_db
from boxingtimer.timer.engine import IntervalTimer
from boxingtimer.timer.sequencer import WorkoutSequencer
from boxingtimer.timer.ticker import ManualTickSource

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def ticker():
    return ManualTickSource()


@pytest.fixture
def timer(qapp, ticker):
    """IntervalTimer with 3 s work / 2 s rest on a manual clock."""
    return IntervalTimer(ticker=ticker, work_duration=3, rest_duration=2)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 14, 18, 0, 0))


@pytest.fixture
def sequencer(timer, clock):
    """Empty sequencer wired to the manual-clock timer."""
    return WorkoutSequencer(timer, clock=clock)
