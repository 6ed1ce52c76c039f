"""Shop service: public profile, public menu and owner settings."""

from typing import Annotated

import structlog
from fastapi import Depends

from qrmenu.api.dependencies import DBSession
from qrmenu.core.errors import NotFoundError
from qrmenu.modules.catalog.repos import CategoryRepository, ItemRepository
from qrmenu.modules.catalog.schemas import CategoryResponse, ItemResponse
from qrmenu.modules.shops.models import Shop
from qrmenu.modules.shops.repos import ShopRepository
from qrmenu.modules.shops.schemas import PublicMenu, ShopProfile, ShopSettingsUpdate


logger = structlog.get_logger()


class ShopService:
    """Service for shop reads and owner-side shop updates."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.shop_repo = ShopRepository(db)
        self.category_repo = CategoryRepository(db)
        self.item_repo = ItemRepository(db)

    async def get_active_shop(self, slug: str) -> Shop:
        """Get a shop for public display.

        Raises:
            NotFoundError: If the slug is unknown or the shop is inactive;
                the two cases are indistinguishable to callers.
        """
        shop = await self.shop_repo.get_active_by_slug(slug)
        if shop is None:
            raise NotFoundError(
                "Shop not found",
                error_code="shop_not_found",
                resource="shop",
                resource_id=slug,
            )
        return shop

    async def get_public_profile(self, slug: str) -> ShopProfile:
        """Public profile of an active shop."""
        return ShopProfile.model_validate(await self.get_active_shop(slug))

    async def get_public_menu(self, slug: str) -> PublicMenu:
        """Profile, ordered categories and items of an active shop."""
        shop = await self.get_active_shop(slug)
        categories = await self.category_repo.list_for_shop(shop.id)
        items = await self.item_repo.list_for_shop(shop.id)

        return PublicMenu(
            shop=ShopProfile.model_validate(shop),
            categories=[CategoryResponse.model_validate(c) for c in categories],
            items=[ItemResponse.model_validate(i) for i in items],
        )

    async def update_settings(self, shop: Shop, data: ShopSettingsUpdate) -> Shop:
        """Update name, logo and display settings of a shop.

        Empty name or logo keep the current value; settings are merged
        key by key. The slug is never touched.
        """
        if data.name:
            shop.name = data.name
        if data.logo:
            shop.logo = data.logo

        changes = data.settings_changes()
        if changes:
            shop.settings = {**(shop.settings or {}), **changes}

        shop = await self.shop_repo.update(shop)
        logger.info("shop_settings_updated", shop_id=str(shop.id))
        return shop


# Type alias for dependency injection
ShopSvc = Annotated[ShopService, Depends(ShopService)]
