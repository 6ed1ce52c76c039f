"""Platform-admin API routes.

Every route depends on ``PlatformAdmin``; owners get 403
``platform_admin_required``.
"""

from uuid import UUID

from fastapi import APIRouter, status

from qrmenu.core.auth.dependencies import PlatformAdmin
from qrmenu.modules.accounts.models import Account
from qrmenu.modules.accounts.schemas import AccountResponse
from qrmenu.modules.catalog.schemas import MessageResponse
from qrmenu.modules.shops.models import Shop
from qrmenu.modules.super_admin.schemas import (
    AdminShopResponse,
    OwnerSummary,
    ShopAdminUpdate,
    ShopCreateRequest,
    ShopToggleResponse,
    SweepResponse,
)
from qrmenu.modules.super_admin.services import PlatformAdminSvc


router = APIRouter(prefix="/super-admin", tags=["super-admin"])


def _shop_response(shop: Shop, owner: Account | None) -> AdminShopResponse:
    return AdminShopResponse(
        id=shop.id,
        slug=shop.slug,
        name=shop.name,
        logo=shop.logo,
        is_active=shop.is_active,
        owner=OwnerSummary.model_validate(owner) if owner else None,
        created_at=shop.created_at,
    )


# ============================================================
# Shop Routes
# ============================================================


@router.get(
    "/shops",
    response_model=list[AdminShopResponse],
    summary="List shops",
    description="Every shop with its owner, oldest first.",
)
async def list_shops(
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> list[AdminShopResponse]:
    """List all shops."""
    rows = await service.list_shops()
    return [_shop_response(shop, owner) for shop, owner in rows]


@router.post(
    "/shops",
    response_model=AdminShopResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create shop",
    description=(
        "Creates an active shop. The owner account is reused when the email "
        "exists, otherwise it is created with the given or default password."
    ),
)
async def create_shop(
    data: ShopCreateRequest,
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> AdminShopResponse:
    """Create a shop."""
    shop, owner = await service.create_shop(data)
    return _shop_response(shop, owner)


@router.put(
    "/shops/{shop_id}",
    response_model=AdminShopResponse,
    summary="Update shop",
    description="Changes name and logo. The slug cannot be changed.",
)
async def update_shop(
    shop_id: UUID,
    data: ShopAdminUpdate,
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> AdminShopResponse:
    """Update a shop."""
    shop = await service.update_shop(shop_id, data)
    return _shop_response(shop, await service.get_owner(shop))


@router.patch(
    "/shops/{shop_id}/toggle",
    response_model=ShopToggleResponse,
    summary="Toggle shop",
    description="Activates or deactivates a shop. Inactive shops disappear from the public menu.",
)
async def toggle_shop(
    shop_id: UUID,
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> ShopToggleResponse:
    """Flip a shop's active flag."""
    shop = await service.toggle_shop(shop_id)
    return ShopToggleResponse(id=shop.id, is_active=shop.is_active)


@router.delete(
    "/shops/{shop_id}",
    response_model=MessageResponse,
    summary="Delete shop",
    description="Deletes the shop with its categories and items. The owner account is kept.",
)
async def delete_shop(
    shop_id: UUID,
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> MessageResponse:
    """Delete a shop and its catalog."""
    await service.delete_shop(shop_id)
    return MessageResponse(message="Shop deleted")


# ============================================================
# Account & Maintenance Routes
# ============================================================


@router.get(
    "/users",
    response_model=list[AccountResponse],
    summary="List accounts",
)
async def list_accounts(
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> list[AccountResponse]:
    """List all accounts."""
    accounts = await service.list_accounts()
    return [AccountResponse.model_validate(a) for a in accounts]


@router.post(
    "/maintenance/sweep",
    response_model=SweepResponse,
    summary="Sweep orphans",
    description="Deletes items and categories whose shop or category no longer exists. Idempotent.",
)
async def sweep_orphans(
    _admin: PlatformAdmin,
    service: PlatformAdminSvc,
) -> SweepResponse:
    """Remove orphaned catalog rows."""
    result = await service.sweep_orphans()
    return SweepResponse(
        categories_deleted=result.categories_deleted,
        items_deleted=result.items_deleted,
    )
