"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core import settings
from app.core.audit import AuditAction, AuditOutcome, audit_log
from app.core.auth import (
    create_access_token,
    create_refresh_token,
    get_current_user,
    verify_refresh_token,
)
from app.core.metrics import record_login_attempt
from app.db import User
from app.dependencies import get_user_service
from app.domain.exceptions import DomainError, UnauthorizedError
from app.schemas.auth import RefreshTokenRequest, Token, UserLogin, UserResponse
from app.services import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

# Rate limiter for auth endpoints - disabled during testing
limiter = Limiter(key_func=get_remote_address, enabled=not settings.testing)


@router.post("/login", response_model=Token)
@limiter.limit("5/minute")
def login(
    request: Request,
    user_login: UserLogin,
    service: UserService = Depends(get_user_service),
) -> Token:
    """Exchange username and password for an access/refresh token pair.

    Rate limited to 5 attempts per minute per IP.
    """
    try:
        user = service.authenticate(user_login.username, user_login.password)
    except DomainError as exc:
        record_login_attempt(success=False)
        audit_log(
            AuditAction.LOGIN_FAILURE,
            AuditOutcome.FAILURE if isinstance(exc, UnauthorizedError) else AuditOutcome.DENIED,
            request=request,
            username=user_login.username,
            details={"reason": exc.message},
        )
        raise

    record_login_attempt(success=True)
    audit_log(AuditAction.LOGIN_SUCCESS, AuditOutcome.SUCCESS, request=request, user=user)
    return Token(
        access_token=create_access_token(data={"sub": user.username}),
        refresh_token=create_refresh_token(data={"sub": user.username}),
    )


@router.post("/refresh", response_model=Token)
@limiter.limit("30/minute")
def refresh_token(request: Request, payload: RefreshTokenRequest) -> Token:
    """Issue a fresh token pair from a valid refresh token."""
    username = verify_refresh_token(payload.refresh_token)
    audit_log(AuditAction.TOKEN_REFRESH, AuditOutcome.SUCCESS, request=request, username=username)
    return Token(
        access_token=create_access_token(data={"sub": username}),
        refresh_token=create_refresh_token(data={"sub": username}),
    )


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    """Get current user."""
    return UserResponse.model_validate(current_user)
