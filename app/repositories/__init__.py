"""Repository layer for persistence access."""

from .job_repository import JobRepository
from .user_repository import UserRepository

__all__ = ["JobRepository", "UserRepository"]
