"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides
small helpers used by the application, the seed script and tests.
"""

from sqlmodel import SQLModel, create_engine, Session

from . import models  # noqa: F401  registers the tables on SQLModel.metadata
from .config import settings

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Every resource owns exactly one table, so `create_all` is enough for
    local development and tests.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes; anything left uncommitted is rolled back.
    """
    with Session(engine) as session:
        yield session
