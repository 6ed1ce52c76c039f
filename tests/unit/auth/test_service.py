"""Unit tests for AuthService."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from qrmenu.core.auth.service import AuthService
from qrmenu.core.errors import ConflictError, UnauthorizedError


def make_service() -> AuthService:
    """AuthService with both repositories mocked."""
    service = AuthService(db=AsyncMock())
    service.account_repo = AsyncMock()
    service.shop_repo = AsyncMock()
    return service


def unique_violation() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO accounts", {}, Exception("UNIQUE constraint failed")
    )


class TestRegister:
    """Tests for AuthService.register."""

    async def test_existing_email_conflicts(self):
        service = make_service()
        service.account_repo.get_by_email.return_value = object()

        with pytest.raises(ConflictError) as exc_info:
            await service.register("owner@example.com", "secret123", "Owner")

        assert exc_info.value.error_code == "email_exists"
        service.account_repo.create.assert_not_called()

    async def test_concurrent_registration_conflicts(self):
        """A unique violation on insert is reported like a duplicate email."""
        service = make_service()
        service.account_repo.get_by_email.return_value = None
        service.account_repo.create.side_effect = unique_violation()

        with (
            patch("qrmenu.core.auth.service.hash_password", return_value="hashed"),
            pytest.raises(ConflictError) as exc_info,
        ):
            await service.register("owner@example.com", "secret123", "Owner")

        assert exc_info.value.error_code == "email_exists"
        assert isinstance(exc_info.value.__cause__, IntegrityError)


class TestLogin:
    """Tests for AuthService.login."""

    async def test_unknown_email_spends_a_hash_check(self):
        service = make_service()
        service.account_repo.get_by_email.return_value = None

        with (
            patch("qrmenu.core.auth.service.dummy_verify_password") as dummy,
            pytest.raises(UnauthorizedError) as exc_info,
        ):
            await service.login("nobody@example.com", "whatever")

        assert exc_info.value.error_code == "invalid_credentials"
        dummy.assert_called_once_with()
