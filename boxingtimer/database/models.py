"""SQLAlchemy ORM models for BoxingTimer."""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


def _new_id() -> str:
    return str(uuid.uuid4())


class WorkoutSession(Base):
    """One saved workout (finished or abandoned)."""

    __tablename__ = "workout_sessions"

    id = Column(String(36), primary_key=True, default=_new_id)
    date = Column(DateTime, nullable=False, default=datetime.now)
    total_duration = Column(Integer, nullable=False, default=0)  # seconds

    results = relationship(
        "ExerciseResult",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="ExerciseResult.position",
    )

    def __repr__(self) -> str:
        return (
            f"<WorkoutSession id={self.id} date={self.date} "
            f"duration={self.total_duration}s>"
        )


class ExerciseResult(Base):
    """Per-exercise outcome inside a saved workout."""

    __tablename__ = "exercise_results"

    id = Column(String(36), primary_key=True, default=_new_id)
    session_id = Column(
        String(36),
        ForeignKey("workout_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False, default=0)
    exercise_id = Column(String(64), nullable=False, index=True)
    exercise_name = Column(String(255), nullable=False, default="")
    completed_rounds = Column(Integer, nullable=False, default=0)
    total_rounds = Column(Integer, nullable=False, default=0)
    duration = Column(Integer, nullable=False, default=0)  # seconds

    session = relationship("WorkoutSession", back_populates="results")

    def __repr__(self) -> str:
        return (
            f"<ExerciseResult exercise={self.exercise_id} "
            f"rounds={self.completed_rounds}/{self.total_rounds}>"
        )
