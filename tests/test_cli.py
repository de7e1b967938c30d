"""Tests for the console runner: argument handling and workout runs."""

import signal

import pytest

from boxingtimer import __main__ as cli
from boxingtimer.__main__ import build_parser, parse_plan, print_catalog, run_workout
from boxingtimer.sessions.recorder import SessionRecorder
from boxingtimer.sessions.store import all_sessions
from boxingtimer.settings import Settings
from boxingtimer.timer.engine import IntervalTimer
from boxingtimer.timer.ticker import ManualTickSource

from helpers import finish_phase, make_exercise


class TestParsePlan:

    def test_id_and_rounds(self):
        (exercise, rounds), = parse_plan(["technique-3:2"], default_rounds=3)
        assert exercise.id == "technique-3"
        assert rounds == 2

    def test_default_rounds(self):
        (_, rounds), = parse_plan(["technique-1"], default_rounds=4)
        assert rounds == 4

    def test_unknown_id(self):
        with pytest.raises(ValueError):
            parse_plan(["uppercut:2"], default_rounds=3)


class TestParser:

    def test_repeated_exercise_flags(self):
        args = build_parser().parse_args(
            ["--exercise", "technique-1:3", "--exercise", "technique-2", "--rest", "30"]
        )
        assert args.exercise == ["technique-1:3", "technique-2"]
        assert args.rest == 30
        assert args.work is None
        assert args.no_save is False

    def test_print_catalog(self, capsys):
        print_catalog()
        out = capsys.readouterr().out
        assert "technique-3" in out
        assert "Shadow Boxing" in out


# ═══════════════════════════════════════════════════════════════════════════
#  RUNNING A WORKOUT
# ═══════════════════════════════════════════════════════════════════════════


class ScriptedApp:
    """Stands in for QCoreApplication: ``exec()`` runs *script* then returns."""

    def __init__(self, script=None):
        self.script = script
        self.quit_calls = 0

    def exec(self):
        if self.script is not None:
            self.script()
        return 0

    def quit(self):
        self.quit_calls += 1

    def setApplicationName(self, name):
        self.name = name


def press_ctrl_c():
    signal.getsignal(signal.SIGINT)(signal.SIGINT, None)


class TestRunWorkout:

    def _plan(self, sequencer):
        sequencer.add_exercise(make_exercise("a"), 2)
        sequencer.add_exercise(make_exercise("b"), 1)

    def test_interrupted_workout_is_saved(self, sequencer, clock, ticker):
        self._plan(sequencer)

        def script():
            clock.advance(20)
            finish_phase(sequencer.timer)   # A#1 work
            press_ctrl_c()

        app = ScriptedApp(script)
        assert run_workout(app, sequencer) == 0

        assert app.quit_calls == 1
        assert not ticker.is_active
        (record,) = all_sessions()
        assert record.total_duration == 20
        assert [r.completed_rounds for r in record.results] == [1, 0]

    def test_interrupt_handler_is_restored(self, sequencer):
        self._plan(sequencer)
        before = signal.getsignal(signal.SIGINT)
        run_workout(ScriptedApp(press_ctrl_c), sequencer, save=False)
        assert signal.getsignal(signal.SIGINT) is before

    def test_interrupted_workout_not_saved_with_no_save(self, sequencer):
        self._plan(sequencer)
        run_workout(ScriptedApp(press_ctrl_c), sequencer, save=False)
        assert all_sessions() == []

    def test_completed_workout_saved_once(self, sequencer, clock):
        self._plan(sequencer)

        def script():
            for _ in range(5):
                clock.advance(10)
                finish_phase(sequencer.timer)

        app = ScriptedApp(script)
        assert run_workout(app, sequencer) == 0

        assert app.quit_calls == 1
        (record,) = all_sessions()
        assert record.total_duration == 50
        assert [r.completed_rounds for r in record.results] == [2, 1]

    def test_save_failure_sets_exit_code(self, sequencer, monkeypatch):
        self._plan(sequencer)

        def broken(record):
            raise OSError("read-only database")

        monkeypatch.setattr(cli, "SessionRecorder", lambda: SessionRecorder(broken))
        assert run_workout(ScriptedApp(press_ctrl_c), sequencer) == 1


class TestMain:

    def test_ctrl_c_saves_partial_session(self, qapp, monkeypatch):
        timers = []

        def manual_timer(**kwargs):
            timer = IntervalTimer(ticker=ManualTickSource(), **kwargs)
            timers.append(timer)
            return timer

        def script():
            finish_phase(timers[0])   # first round of technique-1
            press_ctrl_c()

        app = ScriptedApp(script)

        class FakeCoreApplication:
            @staticmethod
            def instance():
                return app

        monkeypatch.setattr(cli, "load_settings", lambda: Settings(
            database_url="sqlite:///:memory:", log_file=None,
        ))
        monkeypatch.setattr(cli, "setup_logging", lambda level, log_file: None)
        monkeypatch.setattr(cli, "IntervalTimer", manual_timer)
        monkeypatch.setattr(cli, "QCoreApplication", FakeCoreApplication)

        exit_code = cli.main([
            "--exercise", "technique-1:2", "--exercise", "technique-2:1",
            "--work", "3", "--rest", "2",
        ])

        assert exit_code == 0
        (record,) = all_sessions()
        assert [(r.exercise_id, r.completed_rounds, r.total_rounds) for r in record.results] == [
            ("technique-1", 1, 2), ("technique-2", 0, 1),
        ]
        assert not timers[0].ticker.is_active
