"""Domain layer primitives (value objects, exceptions)."""

from . import exceptions, jobs
from .jobs import JOB_COLUMN_MAP, JobFilters

__all__ = ["exceptions", "jobs", "JOB_COLUMN_MAP", "JobFilters"]
