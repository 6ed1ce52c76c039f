"""Catalog service: categories and items of a single shop."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, Any
from uuid import UUID

import structlog
from fastapi import Depends

from qrmenu.api.dependencies import DBSession
from qrmenu.core.constants import DEFAULT_CATEGORY_ICON
from qrmenu.core.errors import NotFoundError, ValidationError
from qrmenu.core.utils.money import MAX_PRICE, parse_price, price_in_range
from qrmenu.modules.catalog.models import Category, Item
from qrmenu.modules.catalog.repos import CategoryRepository, ItemRepository
from qrmenu.modules.catalog.schemas import (
    CategoryCreate,
    CategoryUpdate,
    ItemCreate,
    ItemUpdate,
)
from qrmenu.modules.shops.models import Shop


logger = structlog.get_logger()


@dataclass(frozen=True)
class SweepResult:
    """Rows removed by an orphan sweep."""

    categories_deleted: int
    items_deleted: int


def _invalid_price(message: str) -> ValidationError:
    return ValidationError(
        message,
        error_code="invalid_price",
        errors=[{"field": "price", "message": message}],
    )


def _check_range(price: Decimal) -> Decimal:
    if price < 0:
        raise _invalid_price("Price cannot be negative")
    if not price_in_range(price):
        raise _invalid_price(f"Price cannot exceed {MAX_PRICE}")
    return price


def price_for_create(raw: Any) -> Decimal:
    """Price of a new item: unparseable input becomes 0."""
    price = parse_price(raw)
    if price is None:
        return Decimal("0.00")
    return _check_range(price)


def price_for_update(raw: Any) -> Decimal | None:
    """Price change of an item, or None to leave the price untouched."""
    price = parse_price(raw)
    if price is None:
        return None
    return _check_range(price)


class CatalogService:
    """Service for catalog operations.

    Every method takes the shop already resolved by the access-control
    chain, and every query is restricted to that shop.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.category_repo = CategoryRepository(db)
        self.item_repo = ItemRepository(db)

    # ============================================================
    # Categories
    # ============================================================

    async def list_categories(self, shop: Shop) -> list[Category]:
        """List a shop's categories in menu order."""
        return await self.category_repo.list_for_shop(shop.id)

    async def get_category(self, shop: Shop, category_id: UUID) -> Category:
        """Get a category of this shop.

        Raises:
            NotFoundError: If the category does not exist in this shop
        """
        category = await self.category_repo.get(shop.id, category_id)
        if category is None:
            raise NotFoundError(
                "Category not found",
                error_code="category_not_found",
                resource="category",
                resource_id=str(category_id),
            )
        return category

    async def create_category(self, shop: Shop, data: CategoryCreate) -> Category:
        """Create a category at the end of the menu.

        ``order`` is the current number of categories plus one. Gaps
        left by deletions are not backfilled.
        """
        count = await self.category_repo.count_for_shop(shop.id)
        category = await self.category_repo.create(
            Category(
                shop_id=shop.id,
                name=data.name,
                icon=data.icon or DEFAULT_CATEGORY_ICON,
                order=count + 1,
            )
        )
        logger.info("category_created", category_id=str(category.id), order=category.order)
        return category

    async def update_category(
        self, shop: Shop, category_id: UUID, data: CategoryUpdate
    ) -> Category:
        """Update name, icon or order of a category."""
        category = await self.get_category(shop, category_id)

        if data.name is not None:
            category.name = data.name
        if data.icon is not None:
            category.icon = data.icon
        if data.order is not None:
            category.order = data.order

        return await self.category_repo.update(category)

    async def delete_category(self, shop: Shop, category_id: UUID) -> int:
        """Delete a category and its items.

        Returns:
            Number of items deleted with the category
        """
        category = await self.get_category(shop, category_id)

        items_deleted = await self.item_repo.delete_for_category(shop.id, category.id)
        await self.category_repo.delete(category)

        logger.info(
            "category_deleted",
            category_id=str(category_id),
            items_deleted=items_deleted,
        )
        return items_deleted

    # ============================================================
    # Items
    # ============================================================

    async def list_items(self, shop: Shop) -> list[Item]:
        """List a shop's items."""
        return await self.item_repo.list_for_shop(shop.id)

    async def get_item(self, shop: Shop, item_id: UUID) -> Item:
        """Get an item of this shop.

        Raises:
            NotFoundError: If the item does not exist in this shop
        """
        item = await self.item_repo.get(shop.id, item_id)
        if item is None:
            raise NotFoundError(
                "Item not found",
                error_code="item_not_found",
                resource="item",
                resource_id=str(item_id),
            )
        return item

    async def create_item(self, shop: Shop, data: ItemCreate) -> Item:
        """Create an item in one of this shop's categories.

        Raises:
            NotFoundError: If the category is not in this shop
            ValidationError: If the price is negative or too large
        """
        category = await self.get_category(shop, data.category_id)

        item = await self.item_repo.create(
            Item(
                shop_id=shop.id,
                category_id=category.id,
                name=data.name,
                description=data.description or "",
                price=price_for_create(data.price),
                image=data.image or "",
                available=data.available is not False,
            )
        )
        logger.info("item_created", item_id=str(item.id), category_id=str(category.id))
        return item

    async def update_item(self, shop: Shop, item_id: UUID, data: ItemUpdate) -> Item:
        """Update the supplied fields of an item.

        An unparseable price is dropped from the update.

        Raises:
            NotFoundError: If the item, or a new category, is not in this shop
            ValidationError: If the price is negative or too large
        """
        item = await self.get_item(shop, item_id)
        price = price_for_update(data.price)

        if data.category_id is not None and data.category_id != item.category_id:
            category = await self.get_category(shop, data.category_id)
            item.category_id = category.id
        if data.name is not None:
            item.name = data.name
        if data.description is not None:
            item.description = data.description
        if data.image is not None:
            item.image = data.image
        if data.available is not None:
            item.available = data.available

        if price is not None:
            item.price = price

        return await self.item_repo.update(item)

    async def delete_item(self, shop: Shop, item_id: UUID) -> None:
        """Delete one item of this shop."""
        item = await self.get_item(shop, item_id)
        await self.item_repo.delete(item)
        logger.info("item_deleted", item_id=str(item_id))

    # ============================================================
    # Cascades and reconciliation
    # ============================================================

    async def purge_shop(self, shop_id: UUID) -> tuple[int, int]:
        """Delete all catalog rows of a shop, items first.

        Returns:
            Tuple of (categories_deleted, items_deleted)
        """
        items_deleted = await self.item_repo.delete_for_shop(shop_id)
        categories_deleted = await self.category_repo.delete_for_shop(shop_id)
        return categories_deleted, items_deleted

    async def sweep_orphans(self) -> SweepResult:
        """Delete catalog rows whose parents are gone.

        Safe to run repeatedly; a second run finds nothing to delete.
        """
        categories_deleted = await self.category_repo.delete_orphans()
        items_deleted = await self.item_repo.delete_orphans()

        result = SweepResult(
            categories_deleted=categories_deleted,
            items_deleted=items_deleted,
        )
        logger.info(
            "orphans_swept",
            categories_deleted=categories_deleted,
            items_deleted=items_deleted,
        )
        return result


# Type alias for dependency injection
CatalogSvc = Annotated[CatalogService, Depends(CatalogService)]
