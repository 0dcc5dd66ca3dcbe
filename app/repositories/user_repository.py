"""User persistence helpers."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.db import User
from app.repositories.base import SQLAlchemyRepository


class UserRepository(SQLAlchemyRepository[User]):
    """Encapsulates user-related queries."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.session.query(User).filter(User.username == username).first()
