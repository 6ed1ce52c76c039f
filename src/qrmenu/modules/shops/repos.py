"""Shop repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from qrmenu.api.dependencies import DBSession
from qrmenu.modules.accounts.models import Account
from qrmenu.modules.shops.models import Shop


class ShopRepository:
    """Repository for Shop database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, shop: Shop) -> Shop:
        """Create a new shop.

        Args:
            shop: Shop instance to create

        Returns:
            The created shop with ID populated
        """
        self.session.add(shop)
        await self.session.flush()
        await self.session.refresh(shop)
        return shop

    async def get_by_id(self, shop_id: UUID) -> Shop | None:
        """Get a shop by ID, active or not."""
        return await self.session.get(Shop, shop_id)

    async def get_by_slug(self, slug: str) -> Shop | None:
        """Get a shop by slug, active or not.

        Used by owner and admin paths, which keep working while a shop
        is deactivated.
        """
        stmt = select(Shop).where(Shop.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_slug(self, slug: str) -> Shop | None:
        """Get a shop by slug only if it is active (public paths)."""
        stmt = select(Shop).where(Shop.slug == slug, Shop.is_active.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_first_owned_by(self, owner_id: UUID) -> Shop | None:
        """Get the oldest shop owned by an account, if any."""
        stmt = (
            select(Shop)
            .where(Shop.owner_id == owner_id)
            .order_by(Shop.created_at, Shop.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_owners(self) -> list[tuple[Shop, Account | None]]:
        """List every shop with its owner account, oldest first."""
        stmt = (
            select(Shop, Account)
            .outerjoin(Account, Account.id == Shop.owner_id)
            .order_by(Shop.created_at, Shop.id)
        )
        result = await self.session.execute(stmt)
        return [(shop, owner) for shop, owner in result.all()]

    async def update(self, shop: Shop) -> Shop:
        """Persist changes made to a shop."""
        await self.session.flush()
        await self.session.refresh(shop)
        return shop

    async def delete(self, shop: Shop) -> None:
        """Delete a shop row. Catalog rows must be removed first."""
        await self.session.delete(shop)
        await self.session.flush()
