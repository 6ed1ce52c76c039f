"""Catalog repositories for categories and items.

Every lookup and mutation takes the owning shop's ID so that a caller
authorized for one shop can never reach another shop's rows by ID.
"""

from uuid import UUID

from sqlalchemy import delete, func, select

from qrmenu.api.dependencies import DBSession
from qrmenu.modules.catalog.models import Category, Item
from qrmenu.modules.shops.models import Shop


class CategoryRepository:
    """Repository for Category database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, category: Category) -> Category:
        """Create a new category."""
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def count_for_shop(self, shop_id: UUID) -> int:
        """Count a shop's categories."""
        stmt = select(func.count()).select_from(Category).where(Category.shop_id == shop_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get(self, shop_id: UUID, category_id: UUID) -> Category | None:
        """Get a category by ID within a shop.

        Args:
            shop_id: The owning shop's UUID
            category_id: The category's UUID

        Returns:
            Category if it exists in that shop, None otherwise
        """
        stmt = select(Category).where(
            Category.id == category_id,
            Category.shop_id == shop_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_shop(self, shop_id: UUID) -> list[Category]:
        """List a shop's categories by ``order``, ties in insertion order."""
        stmt = (
            select(Category)
            .where(Category.shop_id == shop_id)
            .order_by(Category.order, Category.created_at, Category.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, category: Category) -> Category:
        """Persist changes made to a category."""
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def delete(self, category: Category) -> None:
        """Delete a single category row."""
        await self.session.delete(category)
        await self.session.flush()

    async def delete_for_shop(self, shop_id: UUID) -> int:
        """Delete every category of a shop.

        Returns:
            Number of categories deleted
        """
        stmt = (
            delete(Category)
            .where(Category.shop_id == shop_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_orphans(self) -> int:
        """Delete categories whose shop no longer exists.

        Returns:
            Number of categories deleted
        """
        stmt = (
            delete(Category)
            .where(Category.shop_id.not_in(select(Shop.id)))
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0


class ItemRepository:
    """Repository for Item database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, item: Item) -> Item:
        """Create a new item."""
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get(self, shop_id: UUID, item_id: UUID) -> Item | None:
        """Get an item by ID within a shop."""
        stmt = select(Item).where(Item.id == item_id, Item.shop_id == shop_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_shop(self, shop_id: UUID) -> list[Item]:
        """List a shop's items. No ordering is promised to callers."""
        stmt = select(Item).where(Item.shop_id == shop_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, item: Item) -> Item:
        """Persist changes made to an item."""
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete(self, item: Item) -> None:
        """Delete a single item row."""
        await self.session.delete(item)
        await self.session.flush()

    async def delete_for_category(self, shop_id: UUID, category_id: UUID) -> int:
        """Delete a category's items, restricted to the given shop.

        Returns:
            Number of items deleted
        """
        stmt = (
            delete(Item)
            .where(Item.shop_id == shop_id, Item.category_id == category_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_for_shop(self, shop_id: UUID) -> int:
        """Delete every item of a shop.

        Returns:
            Number of items deleted
        """
        stmt = (
            delete(Item)
            .where(Item.shop_id == shop_id)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_orphans(self) -> int:
        """Delete items whose shop or category no longer exists.

        Returns:
            Number of items deleted
        """
        stmt = (
            delete(Item)
            .where(
                Item.shop_id.not_in(select(Shop.id))
                | Item.category_id.not_in(select(Category.id))
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0
