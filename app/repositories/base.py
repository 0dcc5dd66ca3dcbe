"""Base repository utilities."""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy.orm import Session

from app.db.query import run_query

TModel = TypeVar("TModel")


class SQLAlchemyRepository(Generic[TModel]):
    """Minimal base repository storing the SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session


class SQLRepository:
    """Base for repositories that speak hand-written SQL."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def query(self, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
        return run_query(self.session, sql, values)

    def query_one(self, sql: str, values: Sequence[Any] = ()) -> dict[str, Any] | None:
        rows = self.query(sql, values)
        return rows[0] if rows else None
