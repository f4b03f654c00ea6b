"""다운로드(downloads) API의 파일/외부 링크 규칙을 검증하는 자동화 테스트입니다."""

from app.models.content import Download
from tests.conftest import auth_headers

FIELDS = {"name": "Nexo Client", "version": "1.2.0", "description": "Desktop client"}
ZIP_FILE = {"file": ("client.zip", b"PK\x03\x04fake-zip", "application/zip")}


def test_create_with_external_link(client):
    headers = auth_headers(client)
    resp = client.post("/api/downloads", data={**FIELDS, "externalLink": "https://example.com/c.zip"}, headers=headers)
    assert resp.status_code == 201
    assert resp.json()["attachmentPath"] is None

    items = client.get("/api/downloads").json()
    assert len(items) == 1
    assert items[0]["externalLink"] == "https://example.com/c.zip"
    assert items[0]["attachmentPath"] is None
    assert items[0]["version"] == "1.2.0"


def test_create_with_file(client, upload_dir):
    headers = auth_headers(client)
    resp = client.post("/api/downloads", data=FIELDS, files=ZIP_FILE, headers=headers)
    assert resp.status_code == 201
    path = resp.json()["attachmentPath"]
    assert path.startswith("/uploads/") and path.endswith(".zip")

    item = client.get(f"/api/downloads/{resp.json()['id']}").json()
    assert item["attachmentPath"] == path
    assert item["attachmentMimeType"] == "application/zip"
    assert item["externalLink"] is None
    assert (upload_dir / path.rsplit("/", 1)[-1]).exists()


def test_create_without_file_or_link_fails(client, db):
    headers = auth_headers(client)
    for link in (None, "", "   "):
        data = dict(FIELDS)
        if link is not None:
            data["externalLink"] = link
        resp = client.post("/api/downloads", data=data, headers=headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Either a file or an external link is required"}
    assert db.query(Download).count() == 0


def test_create_with_file_and_link_fails(client, db, upload_dir):
    headers = auth_headers(client)
    resp = client.post(
        "/api/downloads",
        data={**FIELDS, "externalLink": "https://example.com/c.zip"},
        files=ZIP_FILE,
        headers=headers,
    )
    assert resp.status_code == 400
    assert db.query(Download).count() == 0
    assert list(upload_dir.iterdir()) == []


def test_create_missing_fields(client):
    headers = auth_headers(client)
    resp = client.post(
        "/api/downloads",
        data={"name": "Only name", "externalLink": "https://example.com"},
        headers=headers,
    )
    assert resp.status_code == 400


def test_create_requires_auth(client):
    resp = client.post("/api/downloads", data={**FIELDS, "externalLink": "https://example.com"})
    assert resp.status_code == 401


def test_delete_removes_attachment_file(client, upload_dir):
    headers = auth_headers(client)
    resp = client.post("/api/downloads", data=FIELDS, files=ZIP_FILE, headers=headers)
    stored = upload_dir / resp.json()["attachmentPath"].rsplit("/", 1)[-1]
    assert stored.exists()

    delete_resp = client.delete(f"/api/downloads/{resp.json()['id']}", headers=headers)
    assert delete_resp.status_code == 200
    assert not stored.exists()
    assert client.get("/api/downloads").json() == []


def test_delete_missing_returns_404(client):
    resp = client.delete("/api/downloads/77", headers=auth_headers(client))
    assert resp.status_code == 404
    assert resp.json() == {"error": "Download not found"}
