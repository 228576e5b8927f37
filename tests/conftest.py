"""Shared fixtures.

Settings are read at import time, so the environment is pointed at a
throwaway SQLite file before anything from app is imported.
"""
import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="waterlily-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.db'}"
os.environ["APP_ENV"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_DEMO_SURVEY"] = "false"
os.environ["RECORD_RESPONDENT_ID"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts with empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    with SessionLocal() as session:
        yield session


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def credentials():
    return {"email": "me@test.com", "password": "secret123"}


@pytest.fixture
def auth_headers(client, credentials):
    """Register + login, return a bearer header."""
    client.post("/auth/register", json=credentials)
    token = client.post("/auth/login", json=credentials).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_survey():
    return {
        "title": "Care intake",
        "questions": [
            {"text": "How did you discover us?", "description": "Open text"},
            {"text": "Hours per day doing care tasks?"},
            {"text": "Do you have LTC insurance?", "description": "true/false"},
        ],
    }
