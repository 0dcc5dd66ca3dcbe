"""Job posting service layer."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.domain.exceptions import BadRequestError, NotFoundError
from app.domain.jobs import JOB_COLUMN_MAP, JOB_UPDATABLE_FIELDS, JobFilters
from app.repositories import JobRepository

logger = get_logger(__name__)


class JobService:
    """CRUD and filtered listing for job postings.

    Every record returned has the shape
    ``{"title", "salary", "equity", "companyHandle"}``.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.jobs = JobRepository(session)

    # -------------------------------------------------------------------------
    # Queries

    def find_all(self, filters: Optional[JobFilters] = None) -> list[dict[str, Any]]:
        """List jobs ordered by title.

        ``title`` matches case-insensitively anywhere in the job title,
        ``min_salary`` is an inclusive lower bound and ``has_equity=True``
        keeps only jobs with equity above zero. Active filters are AND-ed.
        """
        return self.jobs.find_all(filters)

    def get(self, job_id: int) -> dict[str, Any]:
        job = self.jobs.get(job_id)
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        return job

    # -------------------------------------------------------------------------
    # Mutations

    def create(
        self,
        *,
        title: str,
        company_handle: str,
        salary: Optional[int] = None,
        equity: Optional[str] = None,
    ) -> dict[str, Any]:
        """Insert a job; the store's own constraints decide whether it is valid."""
        job = self.jobs.create(title, salary, equity, company_handle)
        logger.info("Job created", extra={"company_handle": company_handle})
        return job

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Partially update a job; only the supplied fields change.

        Raises:
            BadRequestError: ``data`` is empty, tries to move the job to
                another company, or names a field that is not updatable.
            NotFoundError: no job has ``job_id``.
        """
        if not data:
            raise BadRequestError("No data")
        if "companyHandle" in data or JOB_COLUMN_MAP["companyHandle"] in data:
            raise BadRequestError("companyHandle cannot be changed")
        unknown = sorted(set(data) - JOB_UPDATABLE_FIELDS)
        if unknown:
            raise BadRequestError(f"Cannot update fields: {', '.join(unknown)}")

        job = self.jobs.update(job_id, data)
        if not job:
            raise NotFoundError(f"No job: {job_id}")
        logger.info("Job updated", extra={"job_id": job_id, "fields": sorted(data)})
        return job

    def remove(self, job_id: int) -> None:
        if self.jobs.remove(job_id) is None:
            raise NotFoundError(f"No id: {job_id}")
        logger.info("Job deleted", extra={"job_id": job_id})
