"""Shop API routes: the public menu and owner settings."""

from fastapi import APIRouter

from qrmenu.core.auth.dependencies import OwnedShop
from qrmenu.modules.shops.schemas import PublicMenu, ShopProfile, ShopSettingsUpdate
from qrmenu.modules.shops.services import ShopSvc


router = APIRouter(prefix="/shops", tags=["shops"])


@router.get(
    "/{slug}",
    response_model=ShopProfile,
    summary="Get shop profile",
    description="Public profile of an active shop. Inactive shops are reported as not found.",
)
async def get_shop(slug: str, service: ShopSvc) -> ShopProfile:
    """Get a shop's public profile."""
    return await service.get_public_profile(slug)


@router.get(
    "/{slug}/menu",
    response_model=PublicMenu,
    summary="Get shop menu",
    description="Public menu behind a shop's QR code: profile, categories in order, and items.",
)
async def get_menu(slug: str, service: ShopSvc) -> PublicMenu:
    """Get a shop's public menu."""
    return await service.get_public_menu(slug)


@router.put(
    "/{slug}/settings",
    response_model=ShopProfile,
    summary="Update shop settings",
    description="Update name, logo and display settings. Owner or platform admin.",
)
async def update_settings(
    data: ShopSettingsUpdate,
    shop: OwnedShop,
    service: ShopSvc,
) -> ShopProfile:
    """Update a shop's settings."""
    shop = await service.update_settings(shop, data)
    return ShopProfile.model_validate(shop)
