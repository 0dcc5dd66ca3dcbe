"""Positional-parameter query execution on top of a SQLAlchemy session."""

from __future__ import annotations

import re
from typing import Any, Sequence

from sqlalchemy import text
from sqlalchemy.orm import Session

_PLACEHOLDER = re.compile(r"\$(\d+)")


def bind_positional(sql: str, values: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """Rewrite ``$n`` placeholders as named binds ``:pn``.

    Returns the rewritten statement and the parameter dict. Every
    placeholder must refer to a supplied value.
    """
    params: dict[str, Any] = {}

    def _named(match: re.Match) -> str:
        index = int(match.group(1))
        if not 1 <= index <= len(values):
            raise ValueError(f"Placeholder ${index} has no bound value")
        params[f"p{index}"] = values[index - 1]
        return f":p{index}"

    return _PLACEHOLDER.sub(_named, sql), params


def run_query(
    session: Session,
    sql: str,
    values: Sequence[Any] = (),
) -> list[dict[str, Any]]:
    """Execute one statement and return its rows as ordered field mappings.

    The statement is committed on success. Any failure, including errors the
    driver raises outside the DB-API hierarchy, rolls the session back and
    is re-raised unchanged.
    """
    statement, params = bind_positional(sql, values)
    try:
        result = session.execute(text(statement), params)
        rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
        session.commit()
    except Exception:
        session.rollback()
        raise
    return rows
