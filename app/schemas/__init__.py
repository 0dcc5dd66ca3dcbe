"""Schemas module initialization."""

from .auth import RefreshTokenRequest, Token, TokenData, UserLogin, UserResponse
from .job import JobCreate, JobDeleted, JobEnvelope, JobListResponse, JobResponse, JobUpdate

__all__ = [
    "RefreshTokenRequest",
    "Token",
    "TokenData",
    "UserLogin",
    "UserResponse",
    "JobCreate",
    "JobDeleted",
    "JobEnvelope",
    "JobListResponse",
    "JobResponse",
    "JobUpdate",
]
