"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from app.config import Settings
from domain.models import Database
from main import create_app


@pytest.fixture
def database():
    """
    Fresh in-memory SQLite database per test.

    Foreign keys are enforced (PRAGMA foreign_keys=ON), so delete
    restrictions behave like they do on PostgreSQL.
    """
    db = Database("sqlite://")
    db.init()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session(database):
    """Session bound to the per-test database, for repository and service tests"""
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(database):
    """TestClient running the full app (lifespan included) on the per-test database"""
    app = create_app(
        Settings(environment="testing", api_prefix="/api", db_init_attempts=1),
        database=database,
    )
    with TestClient(app) as test_client:
        yield test_client
