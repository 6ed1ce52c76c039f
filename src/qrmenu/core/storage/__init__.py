"""Image storage on Cloudinary."""

from qrmenu.core.storage.client import ImageHostClient, UploadedImage


__all__ = [
    "ImageHostClient",
    "UploadedImage",
]
