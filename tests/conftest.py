"""Shared fixtures: in-memory database, temporary upload dir, API clients."""

import os

# Settings are loaded at import time and require a signing key
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import select

from app.core.config import Settings
from app.db.session import Database
from app.main import create_app
from app.services.upload_service import UploadHandler

ADMIN_EMAIL = "admin@portfolio.com"
ADMIN_PASSWORD = "correct-horse-battery"
MAX_UPLOAD_SIZE_BYTES = 10 * 1024 * 1024


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        _env_file=None,
        SECRET_KEY="test-secret-key",
        DATABASE_URL="sqlite://",
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        MAX_UPLOAD_SIZE_BYTES=MAX_UPLOAD_SIZE_BYTES,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def uploads(tmp_path):
    return UploadHandler(tmp_path / "uploads", "/uploads", max_bytes=1024)


@pytest.fixture
def client(test_settings):
    """Anonymous client; the lifespan has created tables and the admin user."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    """Client holding a valid admin session cookie."""
    response = client.post("/api/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def row_count(client):
    """Count rows of a table in the running application's store."""

    def _count(model) -> int:
        with client.app.state.db.session() as session:
            return len(session.exec(select(model)).all())

    return _count
