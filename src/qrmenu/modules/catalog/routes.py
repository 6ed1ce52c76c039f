"""Catalog API routes for shop owners and platform admins.

Every route resolves the shop through ``OwnedShop``, so the caller has
already been authenticated and authorized for the slug in the path.
"""

from uuid import UUID

from fastapi import APIRouter, status

from qrmenu.core.auth.dependencies import OwnedShop
from qrmenu.modules.catalog.schemas import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    ItemCreate,
    ItemResponse,
    ItemUpdate,
    MessageResponse,
)
from qrmenu.modules.catalog.services import CatalogSvc


router = APIRouter(prefix="/shops/{slug}", tags=["catalog"])


# ============================================================
# Category Routes
# ============================================================


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="List categories",
    description="All categories of the shop in menu order, including for inactive shops.",
)
async def list_categories(shop: OwnedShop, service: CatalogSvc) -> list[CategoryResponse]:
    """List categories."""
    categories = await service.list_categories(shop)
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="Appends a category; its order is the current category count plus one.",
)
async def create_category(
    data: CategoryCreate,
    shop: OwnedShop,
    service: CatalogSvc,
) -> CategoryResponse:
    """Create a category."""
    category = await service.create_category(shop, data)
    return CategoryResponse.model_validate(category)


@router.put(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    summary="Update category",
)
async def update_category(
    category_id: UUID,
    data: CategoryUpdate,
    shop: OwnedShop,
    service: CatalogSvc,
) -> CategoryResponse:
    """Update a category."""
    category = await service.update_category(shop, category_id, data)
    return CategoryResponse.model_validate(category)


@router.delete(
    "/categories/{category_id}",
    response_model=MessageResponse,
    summary="Delete category",
    description="Deletes the category and every item in it.",
)
async def delete_category(
    category_id: UUID,
    shop: OwnedShop,
    service: CatalogSvc,
) -> MessageResponse:
    """Delete a category and its items."""
    await service.delete_category(shop, category_id)
    return MessageResponse(message="Category deleted")


# ============================================================
# Item Routes
# ============================================================


@router.get(
    "/items",
    response_model=list[ItemResponse],
    summary="List items",
)
async def list_items(shop: OwnedShop, service: CatalogSvc) -> list[ItemResponse]:
    """List items."""
    items = await service.list_items(shop)
    return [ItemResponse.model_validate(i) for i in items]


@router.post(
    "/items",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create item",
    description="Creates an item in one of the shop's categories. Malformed prices become 0.",
)
async def create_item(
    data: ItemCreate,
    shop: OwnedShop,
    service: CatalogSvc,
) -> ItemResponse:
    """Create an item."""
    item = await service.create_item(shop, data)
    return ItemResponse.model_validate(item)


@router.put(
    "/items/{item_id}",
    response_model=ItemResponse,
    summary="Update item",
    description="Updates supplied fields. An unparseable price is ignored.",
)
async def update_item(
    item_id: UUID,
    data: ItemUpdate,
    shop: OwnedShop,
    service: CatalogSvc,
) -> ItemResponse:
    """Update an item."""
    item = await service.update_item(shop, item_id, data)
    return ItemResponse.model_validate(item)


@router.delete(
    "/items/{item_id}",
    response_model=MessageResponse,
    summary="Delete item",
)
async def delete_item(
    item_id: UUID,
    shop: OwnedShop,
    service: CatalogSvc,
) -> MessageResponse:
    """Delete an item."""
    await service.delete_item(shop, item_id)
    return MessageResponse(message="Item deleted")
