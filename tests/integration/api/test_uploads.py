"""Integration tests for image uploads."""

import pytest
from cloudinary.exceptions import Error as CloudinaryError
from httpx import AsyncClient

from qrmenu.config import settings
from qrmenu.core.storage import UploadedImage


pytestmark = pytest.mark.integration


class FakeImageHost:
    """Stands in for the image host client."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.uploads: list[tuple[bytes, str, str]] = []

    async def upload(self, content: bytes, filename: str, content_type: str) -> UploadedImage:
        if self.error:
            raise self.error
        self.uploads.append((content, filename, content_type))
        return UploadedImage(url=f"https://img.example.com/qr-menu/{filename}")


class TestUpload:
    """Tests for POST /api/upload."""

    async def test_upload_returns_url(self, client: AsyncClient, owner_headers, override_image_host):
        fake = FakeImageHost()
        override_image_host(fake)

        response = await client.post(
            "/api/upload",
            files={"image": ("latte.png", b"\x89PNG data", "image/png")},
            headers=owner_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "url": "https://img.example.com/qr-menu/latte.png",
        }
        assert fake.uploads == [(b"\x89PNG data", "latte.png", "image/png")]

    async def test_requires_authentication(self, client: AsyncClient, override_image_host):
        override_image_host(FakeImageHost())

        response = await client.post(
            "/api/upload", files={"image": ("latte.png", b"data", "image/png")}
        )

        assert response.status_code == 401

    async def test_missing_file(self, client: AsyncClient, owner_headers, override_image_host):
        override_image_host(FakeImageHost())

        response = await client.post("/api/upload", headers=owner_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "no_image"

    async def test_rejects_non_image(self, client: AsyncClient, owner_headers, override_image_host):
        fake = FakeImageHost()
        override_image_host(fake)

        response = await client.post(
            "/api/upload",
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=owner_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_image"
        assert fake.uploads == []

    async def test_rejects_large_file(
        self, client: AsyncClient, owner_headers, override_image_host, monkeypatch
    ):
        monkeypatch.setattr(settings, "max_upload_bytes", 10)
        override_image_host(FakeImageHost())

        response = await client.post(
            "/api/upload",
            files={"image": ("big.png", b"x" * 11, "image/png")},
            headers=owner_headers,
        )

        assert response.status_code == 413
        assert response.json()["code"] == "image_too_large"

    async def test_host_failure(self, client: AsyncClient, owner_headers, override_image_host):
        override_image_host(FakeImageHost(error=CloudinaryError("Server returned status 500")))

        response = await client.post(
            "/api/upload",
            files={"image": ("latte.png", b"data", "image/png")},
            headers=owner_headers,
        )

        assert response.status_code == 502
        assert response.json()["code"] == "upload_failed"
