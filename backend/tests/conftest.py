import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before anything imports it.
_DB_DIR = Path(tempfile.mkdtemp(prefix="tracker-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ["ENV"] = "dev"

from sqlmodel import SQLModel, Session  # noqa: E402
from tracker_api.database import engine  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Ensure every test starts with empty tables."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s
