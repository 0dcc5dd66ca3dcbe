"""Tests for authentication endpoints."""

import os
from datetime import timedelta

from app.core.auth import create_access_token, create_refresh_token

DEFAULT_ADMIN_PASSWORD = os.getenv("ADMIN_DEFAULT_PASSWORD", "Admin123!")


def test_root_endpoint(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Jobs API"
    assert "version" in data


def test_login_success(client, admin_user):
    """Test successful login."""
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "admin", "password": DEFAULT_ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert "refresh_token" in data
    assert data["token_type"] == "bearer"


def test_login_token_grants_admin_access(client, admin_user, companies):
    """A token from /login is accepted by admin-only endpoints."""
    token = client.post(
        "/api/v1/auth/login",
        json={"username": "admin", "password": DEFAULT_ADMIN_PASSWORD},
    ).json()["access_token"]

    response = client.post(
        "/api/v1/jobs",
        headers={"Authorization": f"Bearer {token}"},
        json={"title": "from login", "companyHandle": "c2"},
    )
    assert response.status_code == 201


def test_login_invalid_credentials(client, admin_user):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "admin", "password": "wrongpassword"},
    )
    assert response.status_code == 401


def test_login_nonexistent_user(client):
    """Test login with nonexistent user."""
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "nonexistent", "password": "password"},
    )
    assert response.status_code == 401


def test_login_inactive_user(client, db_session, viewer_user):
    """Inactive accounts cannot log in."""
    viewer_user.is_active = False
    db_session.commit()

    response = client.post(
        "/api/v1/auth/login",
        json={"username": "viewer", "password": "Viewer123!"},
    )
    assert response.status_code == 403


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "admin"
    assert data["role"] == "admin"
    assert data["is_active"] is True


def test_get_current_user_no_token(client):
    """Test getting current user without token."""
    response = client.get("/api/v1/auth/me")
    assert response.status_code == 401


def test_get_current_user_bad_token(client):
    """A malformed token is rejected."""
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_expired_token_rejected(client, admin_user):
    """An expired access token is rejected."""
    token = create_access_token({"sub": "admin"}, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_refresh_token_not_accepted_as_access(client, admin_user):
    """Refresh tokens cannot authenticate API calls."""
    token = create_refresh_token({"sub": "admin"})
    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_refresh_issues_new_pair(client, admin_user):
    """A refresh token yields a new access token."""
    response = client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": create_refresh_token({"sub": "admin"})},
    )
    assert response.status_code == 200
    access = response.json()["access_token"]

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {access}"})
    assert me.json()["username"] == "admin"


def test_refresh_rejects_access_token(client, admin_user):
    """An access token cannot be used as a refresh token."""
    response = client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": create_access_token({"sub": "admin"})},
    )
    assert response.status_code == 401
