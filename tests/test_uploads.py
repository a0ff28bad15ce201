"""Image upload tests."""

import re

import pytest

from src.config import get_settings
from src.exceptions import ValidationError
from src.services.uploads import (
    DEFAULT_MAX_UPLOAD_BYTES,
    ImageStorage,
    generate_filename,
    validate_image,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_upload_image(client, auth_headers, upload_dir):
    """Test uploading a PNG stores it and returns its URL."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("rainbow.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    assert re.fullmatch(r"http://testserver/uploads/\d+-[0-9a-f]{16}\.png", image_url)

    filename = image_url.rsplit("/", 1)[1]
    assert (upload_dir / filename).read_bytes() == PNG_BYTES


def test_upload_then_create_pony(client, auth_headers, pony_fields):
    """Test the upload-then-create flow used by the front end."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("fluttershy.webp", b"RIFF0000WEBP", "image/webp")},
    )
    pony_fields["imageUrl"] = response.json()["imageUrl"]

    response = client.post("/ponies", headers=auth_headers, json=pony_fields)
    assert response.status_code == 201
    assert response.json()["imageUrl"].endswith(".webp")


def test_upload_rejects_text_file(client, auth_headers, upload_dir):
    """Test that non-image media types are rejected even when tiny."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("notes.txt", b"hi", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["statusCode"] == 400
    assert not upload_dir.exists() or not any(upload_dir.iterdir())


def test_upload_rejects_large_file(client, auth_headers):
    """Test that files over the size ceiling are rejected."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("big.jpg", b"\xff" * (DEFAULT_MAX_UPLOAD_BYTES + 1), "image/jpeg")},
    )
    assert response.status_code == 400
    assert "too large" in response.json()["message"]


def test_upload_accepts_file_at_limit(client, auth_headers):
    """Test that a file exactly at the ceiling is accepted."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("edge.gif", b"\x00" * DEFAULT_MAX_UPLOAD_BYTES, "image/gif")},
    )
    assert response.status_code == 200


def test_upload_without_file(client, auth_headers):
    """Test that a request without a file is a validation error."""
    response = client.post("/ponies/upload", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "No file was uploaded"


def test_upload_requires_auth(client):
    """Test that uploads need a token."""
    response = client.post(
        "/ponies/upload",
        files={"file": ("rainbow.png", PNG_BYTES, "image/png")},
    )
    assert response.status_code == 401


def test_uploaded_file_is_served(client):
    """Test that stored images can be fetched from the uploads path without a token."""
    storage = ImageStorage(get_settings().upload_dir, "http://testserver")
    filename = storage.save(PNG_BYTES, "served.png", "image/png")

    response = client.get(f"/uploads/{filename}")
    assert response.status_code == 200
    assert response.content == PNG_BYTES


class TestValidateImage:
    @pytest.mark.parametrize(
        "content_type",
        ["image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp", "IMAGE/PNG"],
    )
    def test_allowed_types(self, content_type):
        validate_image(content_type, 10, DEFAULT_MAX_UPLOAD_BYTES)

    @pytest.mark.parametrize("content_type", ["text/plain", "image/svg+xml", "", None])
    def test_rejected_types(self, content_type):
        with pytest.raises(ValidationError):
            validate_image(content_type, 10, DEFAULT_MAX_UPLOAD_BYTES)

    def test_size_ceiling(self):
        with pytest.raises(ValidationError):
            validate_image("image/png", DEFAULT_MAX_UPLOAD_BYTES + 1, DEFAULT_MAX_UPLOAD_BYTES)


class TestGenerateFilename:
    def test_keeps_original_extension(self):
        assert generate_filename("Pony.JPEG", "image/jpeg").endswith(".jpeg")

    def test_falls_back_to_media_type(self):
        assert generate_filename("blob", "image/png").endswith(".png")

    @pytest.mark.parametrize("name", ["evil.html", "page.svg", "run.js", "photo.png.exe"])
    def test_replaces_non_image_extension(self, name):
        assert generate_filename(name, "image/jpeg").endswith(".jpg")

    def test_names_differ(self):
        names = {generate_filename("a.png", "image/png") for _ in range(200)}
        assert len(names) == 200


def test_save_retries_on_collision(image_storage, monkeypatch):
    """Test that an existing file is never overwritten."""
    names = iter(["taken.png", "taken.png", "free.png"])
    monkeypatch.setattr("src.services.uploads.generate_filename", lambda *args: next(names))

    assert image_storage.save(b"first", "a.png", "image/png") == "taken.png"
    assert image_storage.save(b"second", "b.png", "image/png") == "free.png"
    assert (image_storage.upload_dir / "taken.png").read_bytes() == b"first"


def test_upload_replaces_non_image_extension(client, auth_headers, upload_dir):
    """Test that a declared image keeps an image extension whatever its name says."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("evil.html", b"<script>alert(1)</script>", "image/png")},
    )
    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    filename = image_url.rsplit("/", 1)[1]
    assert filename.endswith(".png")
    assert [path.name for path in upload_dir.iterdir()] == [filename]


def test_stored_image_served_as_image(client):
    """Test that a stored upload is served with an image content type."""
    storage = ImageStorage(get_settings().upload_dir, "http://testserver")
    filename = storage.save(b"<script>alert(1)</script>", "evil.html", "image/png")

    response = client.get(f"/uploads/{filename}")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"


def test_upload_rejects_empty_file(client, auth_headers, upload_dir):
    """Test that a zero-byte upload counts as no file."""
    response = client.post(
        "/ponies/upload",
        headers=auth_headers,
        files={"file": ("empty.png", b"", "image/png")},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "No file was uploaded"
    assert not upload_dir.exists() or not any(upload_dir.iterdir())
