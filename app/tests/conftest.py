"""Test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # Disable rate limiting in tests
DEFAULT_ADMIN_PASSWORD = os.environ.setdefault("ADMIN_DEFAULT_PASSWORD", "Admin123!")

from app.core.auth import create_access_token, get_password_hash  # noqa: E402
from app.db import Base, get_db, run_query  # noqa: E402
from app.db.models import Company, User  # noqa: E402
from app.main import app  # noqa: E402 - must set env vars before importing
from app.repositories import JobRepository  # noqa: E402

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def companies(db_session):
    """Three companies; c1 and c2 get jobs from the ``jobs`` fixture."""
    rows = [
        Company(handle="c1", name="C1", description="Desc1", num_employees=1),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def jobs(db_session, companies):
    """Two jobs; returns a mapping of title to id."""
    repo = JobRepository(db_session)
    repo.create("title1", 50000, "0.5", "c1")
    repo.create("title2", 60000, "0", "c2")
    rows = run_query(db_session, "SELECT id, title FROM jobs ORDER BY title")
    return {row["title"]: row["id"] for row in rows}


@pytest.fixture
def missing_job_id(jobs):
    """An id no job has."""
    return max(jobs.values()) + 100


@pytest.fixture
def admin_user(db_session):
    """Create an admin user for testing."""
    user = User(
        username="admin",
        hashed_password=get_password_hash(DEFAULT_ADMIN_PASSWORD),
        role="admin",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def viewer_user(db_session):
    """Create a non-admin user for testing."""
    user = User(
        username="viewer",
        hashed_password=get_password_hash("Viewer123!"),
        role="viewer",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(admin_user):
    """Bearer headers for the admin user."""
    token = create_access_token(data={"sub": admin_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def viewer_headers(viewer_user):
    """Bearer headers for the non-admin user."""
    token = create_access_token(data={"sub": viewer_user.username})
    return {"Authorization": f"Bearer {token}"}
