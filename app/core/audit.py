"""Audit logging for privileged operations.

Every login attempt and every job posting mutation is written as a
structured event on the ``app.audit`` logger. Events carry who acted, from
where, on which resource, and the resulting state.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from .logging import get_logger


class AuditAction(str, Enum):
    """Types of auditable actions."""

    LOGIN_SUCCESS = "auth.login.success"
    LOGIN_FAILURE = "auth.login.failure"
    TOKEN_REFRESH = "auth.token.refresh"

    JOB_CREATE = "job.create"
    JOB_UPDATE = "job.update"
    JOB_DELETE = "job.delete"


class AuditOutcome(str, Enum):
    """Outcome of an audited action."""

    SUCCESS = "success"
    FAILURE = "failure"
    DENIED = "denied"


@dataclass
class AuditContext:
    """Who performed the action and from where."""

    user_id: Optional[int] = None
    username: Optional[str] = None
    user_role: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    request_id: Optional[str] = None


@dataclass
class AuditEvent:
    """A single audit log entry."""

    action: AuditAction
    outcome: AuditOutcome
    context: AuditContext
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)
    new_value: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "audit": True,
            "timestamp": self.timestamp.isoformat(),
            "action": self.action.value,
            "outcome": self.outcome.value,
            "context": asdict(self.context),
        }
        if self.resource_type:
            data["resource"] = {"type": self.resource_type, "id": self.resource_id}
        if self.details:
            data["details"] = self.details
        if self.new_value is not None:
            data["new_value"] = self.new_value
        return data


class AuditLogger:
    """Writes audit events to a dedicated logger."""

    def __init__(self, logger_name: str = "audit") -> None:
        self._logger = get_logger(f"app.{logger_name}")
        # Audit records are kept even when the root level is WARNING.
        self._logger.setLevel(logging.INFO)

    def log(self, event: AuditEvent) -> None:
        message = f"AUDIT: {event.action.value} - {event.outcome.value}"
        extra = {"audit_event": event.to_dict()}
        if event.outcome == AuditOutcome.SUCCESS:
            self._logger.info(message, extra=extra)
        else:
            self._logger.warning(message, extra=extra)


_audit_logger: Optional[AuditLogger] = None


def get_audit_logger() -> AuditLogger:
    """Return the process-wide AuditLogger."""
    global _audit_logger
    if _audit_logger is None:
        _audit_logger = AuditLogger()
    return _audit_logger


def client_ip(request: Any) -> Optional[str]:
    """Extract the client address, honouring ``X-Forwarded-For``."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else None


def audit_log(
    action: AuditAction,
    outcome: AuditOutcome,
    *,
    request: Any = None,
    user: Any = None,
    username: Optional[str] = None,
    resource_type: Optional[str] = None,
    resource_id: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
    new_value: Optional[dict[str, Any]] = None,
) -> None:
    """Log an audit event using the global logger.

    Example:
        >>> audit_log(
        ...     AuditAction.JOB_DELETE,
        ...     AuditOutcome.SUCCESS,
        ...     request=request,
        ...     user=admin,
        ...     resource_type="job",
        ...     resource_id="7",
        ... )
    """
    context = AuditContext(
        user_id=user.id if user else None,
        username=user.username if user else username,
        user_role=user.role if user else None,
    )
    if request is not None:
        context.ip_address = client_ip(request)
        context.user_agent = request.headers.get("user-agent")
        context.request_id = request.headers.get("x-request-id")

    get_audit_logger().log(
        AuditEvent(
            action=action,
            outcome=outcome,
            context=context,
            resource_type=resource_type,
            resource_id=resource_id,
            details=details or {},
            new_value=new_value,
        )
    )
