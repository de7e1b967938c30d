"""Database connection and session management."""

from contextlib import contextmanager
from pathlib import Path

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from .models import Base

# ── defaults ─────────────────────────────────────────────────────────────────

APP_DIR = Path.home() / ".boxingtimer"
DB_PATH = APP_DIR / "boxingtimer.db"
DEFAULT_URL = f"sqlite:///{DB_PATH}"

# ── engine & session factory (created lazily) ─────────────────────────────

_engine = None
_SessionFactory = None


def _create(url: str):
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=False,
    )


def _get_engine():
    global _engine
    if _engine is None:
        _engine = _create(DEFAULT_URL)
    return _engine


def _get_session_factory():
    global _SessionFactory
    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=_get_engine(), expire_on_commit=False)
    return _SessionFactory


# ── public API ────────────────────────────────────────────────────────────


def configure_engine(url: str) -> None:
    """Override the database connection URL.  Used by tests to point at
    an in-memory SQLite database instead of the real one on disk."""
    global _engine, _SessionFactory
    _SessionFactory = None
    _engine = _create(url)


def init_db() -> None:
    """Create all tables."""
    engine = _get_engine()
    Base.metadata.create_all(engine)
    logger.debug("Database ready at {}", engine.url)


@contextmanager
def get_session():
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = _get_session_factory()
    session: OrmSession = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
