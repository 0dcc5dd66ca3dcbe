"""API module initialization."""

from . import auth, jobs, metrics

__all__ = ["auth", "jobs", "metrics"]
