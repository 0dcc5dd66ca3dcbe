"""Job-specific domain helpers."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

# Logical field name -> physical column for the jobs table. Applied to
# partial updates and mirrored by the read-back projection.
JOB_COLUMN_MAP = MappingProxyType({"companyHandle": "company_handle"})

# Fields a partial update may change.
JOB_UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})


@dataclass(slots=True)
class JobFilters:
    """Filters accepted by the job listing endpoint."""

    title: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: Optional[bool] = None

    @property
    def active(self) -> bool:
        return bool(self.title) or self.min_salary is not None or bool(self.has_equity)
