"""Console runner: python -m boxingtimer.

Runs a workout against the real one-second Qt clock and logs the
countdown.  Examples::

    python -m boxingtimer --list
    python -m boxingtimer --exercise technique-1:3 --exercise technique-3:2
    python -m boxingtimer --work 120 --rest 30 --no-save
    python -m boxingtimer --history
"""

from __future__ import annotations

import argparse
import signal
import sys

from loguru import logger
from PyQt6.QtCore import QCoreApplication

from .catalog import EXERCISES, get_exercise
from .database.db import configure_engine, init_db
from .logger_config import setup_logging
from .sessions.recorder import SessionRecorder, SessionSaveError
from .sessions.store import all_sessions, training_totals
from .settings import load_settings
from .timer.engine import IntervalTimer, TimerPhase, format_duration
from .timer.sequencer import WorkoutSequencer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boxingtimer",
        description="Round/rest interval timer for boxing workouts",
    )
    parser.add_argument(
        "--exercise",
        action="append",
        default=[],
        metavar="ID:ROUNDS",
        help="Catalog exercise and round count; repeat to build a workout",
    )
    parser.add_argument("--work", type=int, default=None, help="Work seconds per round")
    parser.add_argument("--rest", type=int, default=None, help="Rest seconds between rounds")
    parser.add_argument("--no-save", action="store_true", help="Do not save the session")
    parser.add_argument("--list", action="store_true", help="List catalog exercises")
    parser.add_argument("--history", action="store_true", help="Show saved sessions")
    return parser


def parse_plan(entries: list[str], default_rounds: int) -> list[tuple[object, int]]:
    """Turn ``ID[:ROUNDS]`` strings into ``(exercise, rounds)`` pairs."""
    plan = []
    for entry in entries:
        exercise_id, _, rounds = entry.partition(":")
        exercise = get_exercise(exercise_id)
        if exercise is None:
            raise ValueError(f"Unknown exercise id: {exercise_id}")
        plan.append((exercise, int(rounds) if rounds else default_rounds))
    return plan


def print_catalog() -> None:
    for exercise in EXERCISES:
        print(f"{exercise.id:<16} {exercise.name:<20} {exercise.display_format}")


def print_history() -> None:
    sessions = all_sessions()
    if not sessions:
        print("No saved sessions")
        return
    for record in sessions:
        print(
            f"{record.date:%Y-%m-%d %H:%M}  {format_duration(record.total_duration):>6}  "
            f"{record.completed_rounds} rounds"
        )
    totals = training_totals()
    print(
        f"\n{totals.sessions} sessions, {format_duration(totals.total_seconds)} total, "
        f"{totals.completed_rounds} rounds"
    )


def run_workout(app, sequencer: WorkoutSequencer, *, save: bool = True) -> int:
    """Run *sequencer* inside *app*'s event loop and record the session.

    Ctrl+C quits the loop; an interrupted workout is saved with the
    time elapsed so far.  Returns the process exit code.
    """
    timer = sequencer.timer
    exit_code = 0
    recorder = SessionRecorder()

    def record(duration: int) -> None:
        nonlocal exit_code
        if not save:
            return
        try:
            recorder.record(sequencer.exercises, duration)
        except SessionSaveError:
            exit_code = 1

    def on_tick(remaining: int) -> None:
        current = sequencer.current_exercise
        if current is None:
            return
        label = "ROUND" if timer.phase == TimerPhase.WORK else "REST"
        logger.info(
            "{} {}/{} {} {}",
            label,
            sequencer.current_total_round,
            sequencer.total_rounds,
            current.exercise.name,
            format_duration(remaining),
        )

    def on_completed(duration: int) -> None:
        record(duration)
        app.quit()

    def on_interrupt(signum, frame) -> None:
        logger.info("Interrupted, stopping workout")
        app.quit()

    timer.tick.connect(on_tick)
    sequencer.workout_completed.connect(on_completed)
    previous_handler = signal.signal(signal.SIGINT, on_interrupt)
    try:
        sequencer.start()
        app.exec()
    finally:
        signal.signal(signal.SIGINT, previous_handler)
        sequencer.pause()

    if sequencer.is_started and not sequencer.is_finished:
        logger.info("Workout abandoned after {} s", sequencer.elapsed_seconds())
        record(sequencer.elapsed_seconds())
    sequencer.dispose()
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    configure_engine(settings.database_url)
    init_db()

    if args.list:
        print_catalog()
        return 0
    if args.history:
        print_history()
        return 0

    try:
        plan = parse_plan(args.exercise, settings.default_rounds)
    except ValueError as exc:
        logger.error("{}", exc)
        return 2
    if not plan:
        plan = [(exercise, settings.default_rounds) for exercise in EXERCISES[:2]]

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("BoxingTimer")

    timer = IntervalTimer(
        work_duration=args.work if args.work is not None else settings.work_duration,
        rest_duration=args.rest if args.rest is not None else settings.rest_duration,
    )
    sequencer = WorkoutSequencer(timer)
    for exercise, rounds in plan:
        sequencer.add_exercise(exercise, rounds)

    return run_workout(app, sequencer, save=not args.no_save)


if __name__ == "__main__":
    sys.exit(main())
