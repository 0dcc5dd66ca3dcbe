"""Service layer exposing domain-centric operations."""

from .job_service import JobService
from .user_service import UserService

__all__ = ["JobService", "UserService"]
