"""Job posting schemas."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def validate_equity(value):
    """Equity is a decimal string between 0 and 1 inclusive ("0", "0.25", "1")."""
    if value is None:
        return value
    if isinstance(value, bool):
        raise ValueError("equity must be a number between 0 and 1")
    if isinstance(value, (int, float, Decimal)):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError("equity must be a number between 0 and 1")
    try:
        amount = Decimal(value.strip())
    except InvalidOperation:
        raise ValueError("equity must be a number between 0 and 1")
    if not amount.is_finite() or amount < 0 or amount > 1:
        raise ValueError("equity must be between 0 and 1")
    return value.strip()


class JobCreate(BaseModel):
    """Job creation schema."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = None
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)

    @field_validator("equity", mode="before")
    @classmethod
    def check_equity(cls, value):
        return validate_equity(value)


class JobUpdate(BaseModel):
    """Job update schema.

    ``companyHandle`` is not accepted: a job never moves between companies.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[str] = None

    @field_validator("equity", mode="before")
    @classmethod
    def check_equity(cls, value):
        return validate_equity(value)


class JobResponse(BaseModel):
    """Job response schema."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(..., alias="companyHandle")


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: list[JobResponse]


class JobDeleted(BaseModel):
    deleted: str
