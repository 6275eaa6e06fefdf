import os

# must be set before reflect_server.db.database is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("APP_TIMEZONE", "UTC")

import pytest
from fastapi.testclient import TestClient

from reflect_server.db.database import Base, engine, SessionLocal
from reflect_server.main import app
from reflect_server.auth import dependencies

USER_ID = "user_test_1"
AUTH_HEADERS = {"Authorization": "Bearer test-token"}


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def token_subject(monkeypatch):
    """Every bearer token is accepted; the subject can be switched per test."""
    state = {"sub": USER_ID, "email": "tester@example.com", "name": "Test User"}

    def fake_verify(token):
        if token == "bad-token":
            return None
        return dict(state)

    monkeypatch.setattr(dependencies, "verify_access_token", fake_verify)
    return state


@pytest.fixture
def client(token_subject):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
