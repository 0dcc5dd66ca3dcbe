"""Database module initialization."""

from .models import Base, Company, Job, User
from .query import run_query
from .session import SessionLocal, engine, get_db
from .sql import PartialUpdate, WhereClause, sql_for_partial_update
from .utils import seed_default_data

__all__ = [
    "Base",
    "Company",
    "Job",
    "User",
    "run_query",
    "get_db",
    "engine",
    "SessionLocal",
    "PartialUpdate",
    "WhereClause",
    "sql_for_partial_update",
    "seed_default_data",
]
