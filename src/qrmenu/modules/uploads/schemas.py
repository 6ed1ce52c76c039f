"""Pydantic schemas for image uploads."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Hosted URL of an uploaded image."""

    success: bool = True
    url: str
