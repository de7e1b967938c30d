"""SQLite-backed storage for saved workout sessions.

Queries return immutable :class:`WorkoutSessionRecord` /
:class:`ExerciseResultRecord` values so nothing outside this module
holds a live ORM object.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func

from ..database.db import get_session
from ..database.models import ExerciseResult, WorkoutSession
from .recorder import ExerciseResultRecord, WorkoutSessionRecord


@dataclass(frozen=True)
class TrainingTotals:
    sessions: int
    total_seconds: int
    completed_rounds: int


def _to_result_record(row: ExerciseResult) -> ExerciseResultRecord:
    return ExerciseResultRecord(
        exercise_id=row.exercise_id,
        exercise_name=row.exercise_name,
        completed_rounds=row.completed_rounds,
        total_rounds=row.total_rounds,
        duration=row.duration,
    )


def _to_record(row: WorkoutSession) -> WorkoutSessionRecord:
    return WorkoutSessionRecord(
        id=row.id,
        date=row.date,
        total_duration=row.total_duration,
        results=tuple(_to_result_record(result) for result in row.results),
    )


def save_session(record: WorkoutSessionRecord) -> str:
    """Insert *record* and its results; returns the session id."""
    with get_session() as db:
        row = WorkoutSession(
            id=record.id,
            date=record.date,
            total_duration=record.total_duration,
        )
        for position, result in enumerate(record.results):
            row.results.append(ExerciseResult(
                position=position,
                exercise_id=result.exercise_id,
                exercise_name=result.exercise_name,
                completed_rounds=result.completed_rounds,
                total_rounds=result.total_rounds,
                duration=result.duration,
            ))
        db.add(row)
    return record.id


def all_sessions() -> list[WorkoutSessionRecord]:
    """Every saved session, newest first."""
    with get_session() as db:
        rows = db.query(WorkoutSession).order_by(WorkoutSession.date.desc()).all()
        return [_to_record(row) for row in rows]


def sessions_between(start: datetime, end: datetime) -> list[WorkoutSessionRecord]:
    """Sessions dated within ``[start, end]``, newest first."""
    with get_session() as db:
        rows = (
            db.query(WorkoutSession)
            .filter(WorkoutSession.date >= start, WorkoutSession.date <= end)
            .order_by(WorkoutSession.date.desc())
            .all()
        )
        return [_to_record(row) for row in rows]


def exercise_statistics(exercise_id: str) -> list[ExerciseResultRecord]:
    """All saved results for one exercise, oldest session first."""
    with get_session() as db:
        rows = (
            db.query(ExerciseResult)
            .join(WorkoutSession)
            .filter(ExerciseResult.exercise_id == exercise_id)
            .order_by(WorkoutSession.date.asc(), ExerciseResult.position.asc())
            .all()
        )
        return [_to_result_record(row) for row in rows]


def delete_session(session_id: str) -> bool:
    with get_session() as db:
        row = db.get(WorkoutSession, session_id)
        if row is None:
            return False
        db.delete(row)
        return True


def training_totals() -> TrainingTotals:
    with get_session() as db:
        sessions, seconds = db.query(
            func.count(WorkoutSession.id),
            func.coalesce(func.sum(WorkoutSession.total_duration), 0),
        ).one()
        rounds = db.query(
            func.coalesce(func.sum(ExerciseResult.completed_rounds), 0)
        ).scalar()
        return TrainingTotals(
            sessions=int(sessions),
            total_seconds=int(seconds),
            completed_rounds=int(rounds or 0),
        )
