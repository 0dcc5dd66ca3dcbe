"""Job persistence: hand-built, fully parameterized SQL over the jobs table."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from app.db.sql import WhereClause, sql_for_partial_update
from app.domain.jobs import JOB_COLUMN_MAP, JobFilters
from app.repositories.base import SQLRepository

JOB_PROJECTION = 'title, salary, equity, company_handle AS "companyHandle"'


def _equity_text(value: Any) -> Optional[str]:
    """Render a stored equity as its decimal text ("0.5", "1").

    PostgreSQL drivers hand back ``Decimal``, whose text is kept as stored.
    SQLite hands back int or float.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, float):
        value = Decimal(repr(value))
        if value == value.to_integral_value():
            return str(value.quantize(Decimal(1)))
        return str(value)
    return str(value)


def _like_pattern(fragment: str) -> str:
    """Lower-cased ``%fragment%`` with LIKE wildcards escaped by ``\\``."""
    escaped = fragment.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _to_record(row: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if row is None:
        return None
    row["equity"] = _equity_text(row.get("equity"))
    return row


class JobRepository(SQLRepository):
    """Direct SQL access for job postings.

    Lookups return ``None`` for a missing id; raising is left to the service.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def create(
        self,
        title: str,
        salary: Optional[int],
        equity: Optional[str],
        company_handle: str,
    ) -> dict[str, Any]:
        row = self.query_one(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_PROJECTION}""",
            [title, salary, equity, company_handle],
        )
        return _to_record(row)

    def find_all(self, filters: Optional[JobFilters] = None) -> list[dict[str, Any]]:
        """List jobs matching every active filter, ordered by title.

        The title filter is a literal, case-insensitive substring match.
        SQLite's ``lower()`` folds ASCII letters only, so non-ASCII titles
        match case-sensitively there; PostgreSQL folds them per its locale.
        """
        where = WhereClause()
        if filters is not None and filters.active:
            if filters.title:
                where.add("lower(title) LIKE {} ESCAPE '\\'", _like_pattern(filters.title))
            if filters.min_salary is not None:
                where.add("salary >= {}", filters.min_salary)
            if filters.has_equity:
                where.add("equity > 0")

        rows = self.query(
            f"SELECT {JOB_PROJECTION} FROM jobs{where} ORDER BY title",
            where.values,
        )
        return [_to_record(row) for row in rows]

    def get(self, job_id: int) -> Optional[dict[str, Any]]:
        row = self.query_one(
            f"SELECT {JOB_PROJECTION} FROM jobs WHERE id = $1",
            [job_id],
        )
        return _to_record(row)

    def update(self, job_id: int, data: Mapping[str, Any]) -> Optional[dict[str, Any]]:
        set_cols, values = sql_for_partial_update(data, JOB_COLUMN_MAP)
        id_idx = f"${len(values) + 1}"
        row = self.query_one(
            f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_idx}
                RETURNING {JOB_PROJECTION}""",
            [*values, job_id],
        )
        return _to_record(row)

    def remove(self, job_id: int) -> Optional[int]:
        row = self.query_one("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
        return row["id"] if row else None
