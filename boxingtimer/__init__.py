"""BoxingTimer: round/rest interval timer for boxing workouts."""

__version__ = "0.1.0"
