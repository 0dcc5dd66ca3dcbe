"""Shared FastAPI dependency factories."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.auth import require_admin
from app.db import User, get_db
from app.services import JobService, UserService


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_admin_user(user: User = Depends(require_admin)) -> User:
    return user


def get_job_service(session: Session = Depends(get_session)) -> JobService:
    return JobService(session)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)
