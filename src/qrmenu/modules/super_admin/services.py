"""Platform-admin service for shop tenancy and accounts."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from qrmenu.api.dependencies import DBSession
from qrmenu.config import settings
from qrmenu.core.auth.backend import hash_password
from qrmenu.core.auth.policy import AccountRole
from qrmenu.core.constants import DEFAULT_OWNER_NAME
from qrmenu.core.errors import ConflictError, NotFoundError, ValidationError
from qrmenu.core.utils.text import generate_slug
from qrmenu.modules.accounts.models import Account
from qrmenu.modules.accounts.repos import AccountRepository
from qrmenu.modules.catalog.services import CatalogService, SweepResult
from qrmenu.modules.shops.models import Shop
from qrmenu.modules.shops.repos import ShopRepository
from qrmenu.modules.super_admin.schemas import (
    ShopAdminUpdate,
    ShopCreateRequest,
    validate_slug,
)


logger = structlog.get_logger()


def _slug_taken(slug: str) -> ConflictError:
    return ConflictError(
        "Shop slug already exists",
        error_code="slug_exists",
        details={"slug": slug},
    )


class PlatformAdminService:
    """Service for shop lifecycle operations.

    Callers must already be authorized as platform admins.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.account_repo = AccountRepository(db)
        self.shop_repo = ShopRepository(db)
        self.catalog = CatalogService(db)

    async def list_shops(self) -> list[tuple[Shop, Account | None]]:
        """List every shop with its owner, oldest first."""
        return await self.shop_repo.list_with_owners()

    async def get_shop(self, shop_id: UUID) -> Shop:
        """Get a shop by ID.

        Raises:
            NotFoundError: If the shop does not exist
        """
        shop = await self.shop_repo.get_by_id(shop_id)
        if shop is None:
            raise NotFoundError(
                "Shop not found",
                error_code="shop_not_found",
                resource="shop",
                resource_id=str(shop_id),
            )
        return shop

    async def create_shop(self, data: ShopCreateRequest) -> tuple[Shop, Account]:
        """Create a shop, creating its owner account when needed.

        An existing account for the owner email is reused as is; its
        password and role are left alone.

        Returns:
            Tuple of (shop, owner)

        Raises:
            ConflictError: If the slug is taken, or the owner email was
                registered while this request ran
            ValidationError: If no usable slug can be derived from the name
        """
        slug = data.slug or self._slug_from_name(data.name)

        if await self.shop_repo.get_by_slug(slug):
            raise _slug_taken(slug)

        owner = await self.account_repo.get_by_email(data.owner_email)
        if owner is None:
            account = Account(
                email=data.owner_email,
                password_hash=hash_password(
                    data.owner_password or settings.default_owner_password
                ),
                name=data.owner_name or DEFAULT_OWNER_NAME,
                role=AccountRole.OWNER,
            )
            try:
                owner = await self.account_repo.create(account)
            except IntegrityError as e:
                # Another request registered the email since the lookup
                raise ConflictError(
                    "Email already registered",
                    error_code="email_exists",
                ) from e
            logger.info("owner_account_created", account_id=str(owner.id))

        try:
            shop = await self.shop_repo.create(
                Shop(slug=slug, name=data.name, owner_id=owner.id, is_active=True)
            )
        except IntegrityError as e:
            raise _slug_taken(slug) from e
        logger.info("shop_created", shop_id=str(shop.id), slug=slug, owner_id=str(owner.id))
        return shop, owner

    async def get_owner(self, shop: Shop) -> Account | None:
        """Load the account that owns a shop."""
        return await self.account_repo.get_by_id(shop.owner_id)

    async def update_shop(self, shop_id: UUID, data: ShopAdminUpdate) -> Shop:
        """Change a shop's name and logo. The slug cannot change."""
        shop = await self.get_shop(shop_id)

        if data.name is not None:
            shop.name = data.name
        if data.logo is not None:
            shop.logo = data.logo

        return await self.shop_repo.update(shop)

    async def toggle_shop(self, shop_id: UUID) -> Shop:
        """Flip a shop's active flag. Catalog data is untouched."""
        shop = await self.get_shop(shop_id)
        shop.is_active = not shop.is_active
        shop = await self.shop_repo.update(shop)

        logger.info("shop_toggled", shop_id=str(shop.id), is_active=shop.is_active)
        return shop

    async def delete_shop(self, shop_id: UUID) -> None:
        """Delete a shop with its categories and items.

        Children go first (items, then categories, then the shop) so an
        interrupted run only ever leaves orphans that ``sweep_orphans``
        removes. The owner account is kept.
        """
        shop = await self.get_shop(shop_id)

        categories_deleted, items_deleted = await self.catalog.purge_shop(shop.id)
        await self.shop_repo.delete(shop)

        logger.info(
            "shop_deleted",
            shop_id=str(shop_id),
            categories_deleted=categories_deleted,
            items_deleted=items_deleted,
        )

    async def list_accounts(self) -> list[Account]:
        """List every account."""
        return await self.account_repo.list_all()

    async def sweep_orphans(self) -> SweepResult:
        """Remove catalog rows left behind by interrupted cascades."""
        return await self.catalog.sweep_orphans()

    @staticmethod
    def _slug_from_name(name: str) -> str:
        try:
            return validate_slug(generate_slug(name))
        except ValueError as e:
            raise ValidationError(
                "Cannot derive a slug from the shop name; provide one",
                error_code="invalid_slug",
                errors=[{"field": "slug", "message": str(e)}],
            ) from e


# Type alias for dependency injection
PlatformAdminSvc = Annotated[PlatformAdminService, Depends(PlatformAdminService)]
