"""로그인부터 게시물 생성·삭제까지의 전체 흐름과 오류 응답 형태를 검증하는 자동화 테스트입니다."""

from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.repositories import PostRepository
from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def test_login_create_list_delete_flow(client):
    login = client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    created = client.post("/api/posts", data={"title": "Launch", "body": "We are live"}, headers=headers)
    assert created.status_code == 201
    post_id = created.json()["id"]

    assert post_id in [p["id"] for p in client.get("/api/posts").json()]

    deleted = client.delete(f"/api/posts/{post_id}", headers=headers)
    assert deleted.status_code == 200
    assert post_id not in [p["id"] for p in client.get("/api/posts").json()]


def test_flow_without_token_is_rejected(client, db):
    created = client.post("/api/posts", data={"title": "Launch", "body": "We are live"})
    assert created.status_code == 401

    post_id = PostRepository(db).create(title="Existing", body="x", date="01/01/2026")
    deleted = client.delete(f"/api/posts/{post_id}")
    assert deleted.status_code == 401
    assert [p["id"] for p in client.get("/api/posts").json()] == [post_id]


def test_unexpected_error_is_masked(nexo_app, monkeypatch):
    def explode(self):
        raise RuntimeError("disk on fire at /var/lib/nexo.db")

    monkeypatch.setattr(PostRepository, "get_all", explode)
    with TestClient(nexo_app, raise_server_exceptions=False) as c:
        resp = c.get("/api/posts")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "disk on fire" not in resp.text


def test_malformed_json_body_is_400(client):
    resp = client.post(
        "/api/comentarios",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_landing_page_is_served(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Nexo" in resp.text


def test_upload_dir_is_created_on_startup(tmp_path):
    upload_dir = tmp_path / "lazy_uploads"
    app_settings = Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'startup.db'}",
        JWT_SECRET="startup-secret",
        UPLOAD_DIR=str(upload_dir),
        LOG_LEVEL="WARNING",
    )
    startup_app = create_app(app_settings)
    assert not upload_dir.exists()

    with TestClient(startup_app) as c:
        assert upload_dir.is_dir()
        assert c.get("/api/health").status_code == 200
