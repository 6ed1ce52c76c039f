"""Cloudinary image uploads.

The SDK is synchronous, so each call runs in a worker thread. Nothing is
stored locally; the returned URL is what ends up on items and shop logos.
"""

import asyncio
import io
from typing import Any

import cloudinary
import cloudinary.uploader
import structlog
from pydantic import BaseModel

from qrmenu.config import Settings, settings


logger = structlog.get_logger()


class UploadedImage(BaseModel):
    """Result of a successful upload."""

    url: str
    public_id: str | None = None
    bytes: int | None = None


class ImageHostClient:
    """Async wrapper around ``cloudinary.uploader``.

    Credentials are passed on every call rather than through the
    SDK's global config, so clients built from different settings do
    not interfere.

    Args:
        config: Settings to read credentials from (defaults to the global settings)
    """

    def __init__(self, config: Settings | None = None) -> None:
        self.config = config or settings

    @property
    def is_configured(self) -> bool:
        """Check that all three credentials are set."""
        return bool(
            self.config.cloudinary_cloud_name
            and self.config.cloudinary_api_key
            and self.config.cloudinary_api_secret
        )

    def upload_options(self, filename: str) -> dict[str, Any]:
        """Options passed to ``cloudinary.uploader.upload``."""
        return {
            "folder": self.config.image_upload_folder,
            "resource_type": "image",
            "filename": filename,
            "timeout": self.config.image_upload_timeout,
            "cloud_name": self.config.cloudinary_cloud_name,
            "api_key": self.config.cloudinary_api_key,
            "api_secret": self.config.cloudinary_api_secret,
        }

    async def upload(
        self,
        content: bytes,
        filename: str,
        content_type: str,
    ) -> UploadedImage:
        """Upload image bytes into the configured folder.

        Args:
            content: Raw image bytes
            filename: Original filename, forwarded to Cloudinary
            content_type: MIME type of the image

        Returns:
            The hosted image

        Raises:
            RuntimeError: If credentials are missing
            cloudinary.exceptions.Error: If Cloudinary rejects the upload
                or cannot be reached
            ValueError: If the response carries no URL
        """
        if not self.is_configured:
            raise RuntimeError("Cloudinary credentials are not configured")

        result = await asyncio.to_thread(
            cloudinary.uploader.upload,
            io.BytesIO(content),
            **self.upload_options(filename),
        )

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise ValueError("Cloudinary response did not include a URL")

        logger.info(
            "image_uploaded",
            public_id=result.get("public_id"),
            content_type=content_type,
            size=len(content),
        )
        return UploadedImage(url=url, public_id=result.get("public_id"), bytes=result.get("bytes"))
