"""Database utility helpers."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from app.core import settings
from app.core.logging import get_logger
from app.db.models import Base, User

logger = get_logger(__name__)


def seed_default_data(db_session) -> None:
    """Create tables and the default admin account (idempotent).

    Skipped entirely in production, where schema and accounts are managed
    out of band.
    """
    if settings.environment.lower() == "production":
        logger.info("Skipping default seed in production environment")
        return

    bind = db_session.get_bind()
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError:
        logger.warning("Skipping table creation during seed", exc_info=True)
        return

    admin = db_session.query(User).filter(User.username == "admin").first()
    if admin:
        return

    from app.core.auth import get_password_hash  # avoid circular import at module load

    db_session.add(
        User(
            username="admin",
            hashed_password=get_password_hash(settings.admin_default_password),
            role="admin",
            is_active=True,
        )
    )
    db_session.commit()
    logger.info("Created default admin user (username: admin)")
