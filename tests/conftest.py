# tests/conftest.py
import os

# Must be set before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import get_db, init_db
from app.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test, shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register a user through the API and return its id, token and auth headers."""

    def _make(email="a@x.com", password="secret1", full_name="Alice Example"):
        r = client.post(
            "/auth/signup",
            json={"fullName": full_name, "email": email, "password": password},
        )
        assert r.status_code == 201, r.text
        data = r.json()["data"]
        return {
            "id": data["user"]["id"],
            "token": data["token"],
            "headers": {"Authorization": f"Bearer {data['token']}"},
        }

    return _make


@pytest.fixture
def make_project(client):
    def _make(headers, name="P1", description="d"):
        r = client.post("/projects", json={"name": name, "description": description}, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make


@pytest.fixture
def make_task(client):
    def _make(headers, project_id, **body):
        body.setdefault("title", "T1")
        r = client.post(f"/projects/{project_id}/tasks", json=body, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make
