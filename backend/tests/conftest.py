from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from app.config import Settings
from app.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "nexo2024"
TEST_SECRET = "test-secret-key"


@pytest.fixture
def nexo_settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test_nexo.db'}",
        JWT_SECRET=TEST_SECRET,
        ADMIN_USERNAME=ADMIN_USERNAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def nexo_app(nexo_settings):
    return create_app(nexo_settings)


@pytest.fixture
def client(nexo_app):
    # entering the client runs the lifespan: tables + seeded admin
    with TestClient(nexo_app) as c:
        yield c


@pytest.fixture
def db(nexo_app, client):
    session = nexo_app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def upload_dir(nexo_settings):
    return Path(nexo_settings.UPLOAD_DIR)


def get_token(client, username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


def auth_headers(client) -> dict:
    return {"Authorization": f"Bearer {get_token(client)}"}


def create_post(client, headers, title: str = "Title", body: str = "Body", path: str = "/api/posts", files=None):
    resp = client.post(path, data={"title": title, "body": body}, files=files, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]
