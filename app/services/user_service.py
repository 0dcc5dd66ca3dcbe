"""User authentication services."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.core.auth import verify_password
from app.db import User
from app.domain.exceptions import ForbiddenError, UnauthorizedError
from app.repositories import UserRepository


class UserService:
    """Credential checks for the login endpoints."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session)

    def authenticate(self, username: str, password: str) -> User:
        user: Optional[User] = self.users.get_by_username(username)
        if not user or not verify_password(password, user.hashed_password):
            raise UnauthorizedError("Incorrect username or password")
        if not user.is_active:
            raise ForbiddenError("Inactive user")
        return user
