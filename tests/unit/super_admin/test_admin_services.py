"""Unit tests for PlatformAdminService."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from qrmenu.core.errors import ConflictError
from qrmenu.modules.super_admin.schemas import ShopCreateRequest
from qrmenu.modules.super_admin.services import PlatformAdminService


def make_service() -> PlatformAdminService:
    """PlatformAdminService with its repositories mocked."""
    service = PlatformAdminService(db=AsyncMock())
    service.account_repo = AsyncMock()
    service.shop_repo = AsyncMock()
    service.catalog = AsyncMock()
    return service


def unique_violation() -> IntegrityError:
    return IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))


def create_request(**overrides) -> ShopCreateRequest:
    values = {
        "slug": "coffee-kings",
        "name": "Coffee Kings",
        "owner_email": "kings@example.com",
    }
    values.update(overrides)
    return ShopCreateRequest(**values)


class TestCreateShop:
    """Tests for PlatformAdminService.create_shop."""

    async def test_taken_slug_conflicts(self):
        service = make_service()
        service.shop_repo.get_by_slug.return_value = SimpleNamespace(id=uuid4())

        with pytest.raises(ConflictError) as exc_info:
            await service.create_shop(create_request())

        assert exc_info.value.error_code == "slug_exists"
        service.shop_repo.create.assert_not_called()

    async def test_slug_taken_during_insert_conflicts(self):
        """A unique violation on the shop insert is still slug_exists."""
        service = make_service()
        service.shop_repo.get_by_slug.return_value = None
        service.account_repo.get_by_email.return_value = SimpleNamespace(id=uuid4())
        service.shop_repo.create.side_effect = unique_violation()

        with pytest.raises(ConflictError) as exc_info:
            await service.create_shop(create_request())

        assert exc_info.value.error_code == "slug_exists"
        assert exc_info.value.details == {"slug": "coffee-kings"}

    async def test_owner_email_taken_during_insert_conflicts(self):
        service = make_service()
        service.shop_repo.get_by_slug.return_value = None
        service.account_repo.get_by_email.return_value = None
        service.account_repo.create.side_effect = unique_violation()

        with (
            patch(
                "qrmenu.modules.super_admin.services.hash_password",
                return_value="hashed",
            ),
            pytest.raises(ConflictError) as exc_info,
        ):
            await service.create_shop(create_request())

        assert exc_info.value.error_code == "email_exists"
        service.shop_repo.create.assert_not_called()
