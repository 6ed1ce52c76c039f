"""Pydantic schemas for shops and the public menu."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from qrmenu.core.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_THEME,
    MAX_NAME_LENGTH,
    MAX_SETTING_LENGTH,
    MAX_URL_LENGTH,
)
from qrmenu.modules.catalog.schemas import CategoryResponse, ItemResponse


class ShopSettings(BaseModel):
    """Display settings of a shop."""

    currency: str = Field(DEFAULT_CURRENCY, max_length=MAX_SETTING_LENGTH)
    theme: str = Field(DEFAULT_THEME, max_length=MAX_SETTING_LENGTH)

    model_config = ConfigDict(extra="allow")


class ShopSettingsPatch(BaseModel):
    """Partial settings; only supplied keys are merged.

    Keys beyond currency and theme are stored as sent.
    """

    currency: str | None = Field(None, max_length=MAX_SETTING_LENGTH)
    theme: str | None = Field(None, max_length=MAX_SETTING_LENGTH)

    model_config = ConfigDict(extra="allow")


class ShopProfile(BaseModel):
    """Public face of a shop. No owner, ID or internal flags."""

    slug: str
    name: str
    logo: str
    settings: ShopSettings

    model_config = ConfigDict(from_attributes=True)


class ShopSummary(BaseModel):
    """Shop reference returned alongside an account."""

    id: UUID
    slug: str
    name: str
    logo: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class ShopSettingsUpdate(BaseModel):
    """Owner-facing update of name, logo and display settings.

    Empty strings keep the current name or logo.
    """

    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    logo: str | None = Field(None, max_length=MAX_URL_LENGTH)
    settings: ShopSettingsPatch | None = None

    def settings_changes(self) -> dict[str, Any]:
        """Settings keys the caller actually supplied."""
        if self.settings is None:
            return {}
        return self.settings.model_dump(exclude_none=True)


class PublicMenu(BaseModel):
    """Everything a customer's phone needs to render a menu."""

    shop: ShopProfile
    categories: list[CategoryResponse]
    items: list[ItemResponse]
