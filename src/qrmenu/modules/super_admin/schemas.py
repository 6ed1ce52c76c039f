"""Pydantic schemas for platform-admin shop management."""

import re
from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field, field_validator

from qrmenu.core.constants import (
    MAX_NAME_LENGTH,
    MAX_PASSWORD_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_URL_LENGTH,
    MIN_PASSWORD_LENGTH,
    SLUG_PATTERN,
)


def validate_slug(value: str) -> str:
    """Normalize a slug and check it is URL-safe.

    Raises:
        ValueError: If the slug is empty or contains anything but
            lowercase letters, digits and single hyphens
    """
    slug = value.strip().lower()
    if not slug or len(slug) > MAX_SLUG_LENGTH or not re.fullmatch(SLUG_PATTERN, slug):
        raise ValueError(
            "Slug must be lowercase letters, digits and single hyphens "
            f"(at most {MAX_SLUG_LENGTH} characters)"
        )
    return slug


class OwnerSummary(BaseModel):
    """Owner shown next to a shop in the admin console."""

    id: UUID
    email: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ShopCreateRequest(BaseModel):
    """Schema for creating a shop and, if needed, its owner account.

    A missing slug is generated from the name. Owner name and password
    are only used when no account exists for ``owner_email``.
    """

    slug: str | None = None
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    owner_email: EmailStr = Field(
        ..., validation_alias=AliasChoices("owner_email", "ownerEmail")
    )
    owner_name: str | None = Field(
        None,
        max_length=MAX_NAME_LENGTH,
        validation_alias=AliasChoices("owner_name", "ownerName"),
    )
    owner_password: str | None = Field(
        None,
        min_length=MIN_PASSWORD_LENGTH,
        max_length=MAX_PASSWORD_LENGTH,
        validation_alias=AliasChoices("owner_password", "ownerPassword"),
    )

    @field_validator("slug")
    @classmethod
    def slug_format(cls, v: str | None) -> str | None:
        """Normalize and validate an explicit slug."""
        if v is None or not v.strip():
            return None
        return validate_slug(v)


class ShopAdminUpdate(BaseModel):
    """Platform-admin update. The slug is deliberately absent."""

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    logo: str | None = Field(None, max_length=MAX_URL_LENGTH)


class AdminShopResponse(BaseModel):
    """A shop as listed in the admin console."""

    id: UUID
    slug: str
    name: str
    logo: str
    is_active: bool
    owner: OwnerSummary | None = None
    created_at: datetime


class ShopToggleResponse(BaseModel):
    """Result of toggling a shop's active flag."""

    id: UUID
    is_active: bool


class SweepResponse(BaseModel):
    """Rows removed by the orphan sweep."""

    categories_deleted: int
    items_deleted: int
