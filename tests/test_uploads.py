"""Tests for the image serving and upload endpoints."""

import os

from app.services.storage_service import resolve_upload, safe_owner_id


def test_missing_image_is_404(client):
    response = client.get("/api/image/nothing-here.png")

    assert response.status_code == 404
    assert response.text == "File not found"


def test_serves_stored_image_with_type_and_cache_header(client, upload_dir):
    with open(os.path.join(upload_dir, "look.png"), "wb") as fh:
        fh.write(b"\x89PNG-data")

    response = client.get("/api/image/look.png")

    assert response.status_code == 200
    assert response.content == b"\x89PNG-data"
    assert response.headers["content-type"] == "image/png"
    assert response.headers["cache-control"] == "public, max-age=3600"


def test_unknown_extension_is_served_as_octet_stream(client, upload_dir):
    with open(os.path.join(upload_dir, "notes.bin"), "wb") as fh:
        fh.write(b"raw")

    response = client.get("/api/image/notes.bin")

    assert response.headers["content-type"] == "application/octet-stream"


def test_resolve_upload_stays_inside_upload_dir(upload_dir, tmp_path):
    (tmp_path / "secret.txt").write_text("nope")

    assert resolve_upload(upload_dir, "../secret.txt") is None
    assert resolve_upload(upload_dir, "") is None


def test_safe_owner_id():
    assert safe_owner_id("user-42") == "user-42"
    assert safe_owner_id("../../etc") == "______etc"
    assert safe_owner_id("") == "anonymous"


def test_upload_requires_authentication(client):
    response = client.post("/api/uploads", files={"file": ("a.png", b"x", "image/png")})

    assert response.status_code == 401


def test_upload_writes_file_under_generated_name(client, upload_dir, auth_headers):
    response = client.post(
        "/api/uploads",
        files={"file": ("portrait.jpg", b"jpeg-bytes", "image/jpeg")},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["url"] == f"/uploads/{body['filename']}"
    assert body["filename"].startswith("user-42-")
    assert body["filename"].endswith(".jpg")
    with open(os.path.join(upload_dir, body["filename"]), "rb") as fh:
        assert fh.read() == b"jpeg-bytes"
