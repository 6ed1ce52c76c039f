"""Image upload service."""

from typing import Annotated

import structlog
from cloudinary.exceptions import Error as CloudinaryError
from fastapi import Depends, UploadFile

from qrmenu.config import settings
from qrmenu.core.constants import IMAGE_CONTENT_TYPE_PREFIX
from qrmenu.core.errors import BadRequestError, PayloadTooLargeError, UpstreamServiceError
from qrmenu.core.storage import ImageHostClient


logger = structlog.get_logger()


def get_image_host() -> ImageHostClient:
    """Provide the image host client. Overridden in tests."""
    return ImageHostClient()


ImageHost = Annotated[ImageHostClient, Depends(get_image_host)]


class UploadService:
    """Validates uploaded files and forwards them to the image host."""

    def __init__(self, image_host: ImageHost) -> None:
        self.image_host = image_host
        self.max_bytes = settings.max_upload_bytes

    async def upload_image(self, file: UploadFile | None) -> str:
        """Upload an image and return its hosted URL.

        Raises:
            BadRequestError: If no file was sent or it is not an image
            PayloadTooLargeError: If the file exceeds the configured limit
            UpstreamServiceError: If the image host fails
        """
        if file is None or not file.filename:
            raise BadRequestError("No image file provided", error_code="no_image")

        content_type = file.content_type or ""
        if not content_type.startswith(IMAGE_CONTENT_TYPE_PREFIX):
            raise BadRequestError(
                "Only image files are allowed",
                error_code="invalid_image",
                details={"content_type": content_type},
            )

        # One byte past the limit is enough to know it is too large
        content = await file.read(self.max_bytes + 1)
        if len(content) > self.max_bytes:
            raise PayloadTooLargeError(
                "Image exceeds the upload size limit",
                error_code="image_too_large",
                details={"max_bytes": self.max_bytes},
            )
        if not content:
            raise BadRequestError("No image file provided", error_code="no_image")

        try:
            uploaded = await self.image_host.upload(content, file.filename, content_type)
        except (CloudinaryError, RuntimeError, ValueError) as e:
            logger.error("image_upload_failed", error=str(e), error_type=type(e).__name__)
            raise UpstreamServiceError(
                "Failed to upload image",
                error_code="upload_failed",
            ) from e

        return uploaded.url


# Type alias for dependency injection
UploadSvc = Annotated[UploadService, Depends(UploadService)]
