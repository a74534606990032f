"""Shared fixtures: a throwaway SQLite database and user factories."""

from __future__ import annotations

import itertools
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "ludium_portal_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.application.use_cases.users import create_user  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)


@pytest.fixture()
def anyio_backend():
    """Run async tests on asyncio, the event loop the application targets."""

    return "asyncio"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Return a factory creating users with unique emails."""

    counter = itertools.count(1)

    def _make(**kwargs):
        index = next(counter)
        kwargs.setdefault("email", f"user{index}@example.com")
        kwargs.setdefault("first_name", f"User {index}")
        return create_user(session, **kwargs)

    return _make


@pytest.fixture()
def people(make_user):
    """Creator, validator, builder and an unrelated outsider."""

    return {
        "creator": make_user(email="creator@example.com"),
        "validator": make_user(email="validator@example.com"),
        "builder": make_user(email="builder@example.com"),
        "outsider": make_user(email="outsider@example.com"),
    }
