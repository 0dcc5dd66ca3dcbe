"""Job posting API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.core.audit import AuditAction, AuditOutcome, audit_log
from app.core.metrics import record_job_mutation
from app.db import User
from app.dependencies import get_admin_user, get_job_service
from app.domain.jobs import JobFilters
from app.schemas.job import JobCreate, JobDeleted, JobEnvelope, JobListResponse, JobUpdate
from app.services import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job(
    request: Request,
    payload: JobCreate,
    service: JobService = Depends(get_job_service),
    admin: User = Depends(get_admin_user),
) -> JobEnvelope:
    """Create a job posting (admin only)."""
    job = service.create(**payload.model_dump())
    record_job_mutation("create")
    audit_log(
        AuditAction.JOB_CREATE,
        AuditOutcome.SUCCESS,
        request=request,
        user=admin,
        resource_type="job",
        new_value=job,
    )
    return JobEnvelope(job=job)


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None, min_length=1),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    service: JobService = Depends(get_job_service),
) -> JobListResponse:
    """List job postings, optionally filtered. Open to anonymous callers."""
    filters = JobFilters(title=title, min_salary=min_salary, has_equity=has_equity)
    return JobListResponse(jobs=service.find_all(filters))


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(
    job_id: int,
    service: JobService = Depends(get_job_service),
) -> JobEnvelope:
    """Get a job posting. Open to anonymous callers."""
    return JobEnvelope(job=service.get(job_id))


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: Request,
    payload: JobUpdate,
    service: JobService = Depends(get_job_service),
    admin: User = Depends(get_admin_user),
) -> JobEnvelope:
    """Partially update a job posting (admin only)."""
    job = service.update(job_id, payload.model_dump(exclude_unset=True))
    record_job_mutation("update")
    audit_log(
        AuditAction.JOB_UPDATE,
        AuditOutcome.SUCCESS,
        request=request,
        user=admin,
        resource_type="job",
        resource_id=str(job_id),
        new_value=job,
    )
    return JobEnvelope(job=job)


@router.delete("/{job_id}", response_model=JobDeleted)
def delete_job(
    job_id: int,
    request: Request,
    service: JobService = Depends(get_job_service),
    admin: User = Depends(get_admin_user),
) -> JobDeleted:
    """Delete a job posting (admin only)."""
    service.remove(job_id)
    record_job_mutation("delete")
    audit_log(
        AuditAction.JOB_DELETE,
        AuditOutcome.SUCCESS,
        request=request,
        user=admin,
        resource_type="job",
        resource_id=str(job_id),
    )
    return JobDeleted(deleted=str(job_id))
