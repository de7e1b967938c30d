"""Application settings with JSON persistence.

Settings are stored at:
    ~/.boxingtimer/settings.json

Usage::

    settings = load_settings()
    settings.rest_duration = 45
    save_settings(settings)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from loguru import logger


APP_DIR = Path.home() / ".boxingtimer"
SETTINGS_PATH = APP_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: int = 3 * 60            # seconds
    rest_duration: int = 60
    default_rounds: int = 3

    # ── storage ───────────────────────────────────────────────────────
    database_url: str = f"sqlite:///{APP_DIR / 'boxingtimer.db'}"

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_file: str | None = str(APP_DIR / "logs" / "boxingtimer.log")


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    target = path or SETTINGS_PATH
    try:
        if target.exists():
            data = json.loads(target.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Ignoring unreadable settings file {}: {}", target, exc)
    return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    target = path or SETTINGS_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
