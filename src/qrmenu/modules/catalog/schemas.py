"""Pydantic schemas for categories and items."""

from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from qrmenu.core.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_ICON_LENGTH,
    MAX_NAME_LENGTH,
    MAX_URL_LENGTH,
)


# ============================================================
# Category Schemas
# ============================================================


class CategoryCreate(BaseModel):
    """Schema for creating a category. ``order`` is always assigned."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    icon: str | None = Field(None, max_length=MAX_ICON_LENGTH)


class CategoryUpdate(BaseModel):
    """Schema for updating a category.

    ``order`` overwrites this category's position only; siblings keep
    theirs.
    """

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    icon: str | None = Field(None, max_length=MAX_ICON_LENGTH)
    order: int | None = None


class CategoryResponse(BaseModel):
    """Schema for category response data."""

    id: UUID
    name: str
    icon: str
    order: int

    model_config = ConfigDict(from_attributes=True)


# ============================================================
# Item Schemas
# ============================================================


class ItemCreate(BaseModel):
    """Schema for creating an item.

    ``price`` is taken as-is and parsed by the service; malformed input
    becomes 0.
    """

    category_id: UUID = Field(
        ..., validation_alias=AliasChoices("category_id", "categoryId")
    )
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    price: Any = None
    image: str | None = Field(None, max_length=MAX_URL_LENGTH)
    available: bool | None = None


class ItemUpdate(BaseModel):
    """Schema for updating an item. Omitted fields are left unchanged."""

    category_id: UUID | None = Field(
        None, validation_alias=AliasChoices("category_id", "categoryId")
    )
    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
    price: Any = None
    image: str | None = Field(None, max_length=MAX_URL_LENGTH)
    available: bool | None = None


class ItemResponse(BaseModel):
    """Schema for item response data."""

    id: UUID
    category_id: UUID
    name: str
    description: str
    price: float
    image: str
    available: bool

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
