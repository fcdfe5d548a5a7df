import pytest
from fastapi.testclient import TestClient

from reminder.core.config import Settings
from reminder.main import create_app

SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DB_CREDS=f"sqlite:///{tmp_path / 'reminder.db'}",
        SECRET_KEY=SECRET,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def signup(client):
    """Register a user and return ready-to-use bearer headers."""

    def _signup(username="alice", password="s3cret-pass"):
        r = client.post("/signup", json={"username": username, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}

    return _signup
