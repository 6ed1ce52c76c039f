"""FastAPI dependencies implementing the access-control chain.

Routes compose three checks:

1. ``CurrentIdentity`` authenticates the bearer token.
2. ``OwnedShop`` resolves the shop named by the ``slug`` path parameter
   and checks that the identity may manage it.
3. ``PlatformAdmin`` requires the platform-admin role.

Ownership is always re-read from the shop row; token claims only say
who the caller is.
"""

from typing import TYPE_CHECKING, Annotated, Any

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from qrmenu.api.dependencies import DBSession
from qrmenu.core.auth.backend import decode_token
from qrmenu.core.auth.policy import can_manage_shop, is_platform_admin
from qrmenu.core.auth.schemas import TokenData
from qrmenu.core.errors import ForbiddenError, NotFoundError, UnauthorizedError


if TYPE_CHECKING:
    from qrmenu.modules.shops.models import Shop


logger = structlog.get_logger()

# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Authenticate the bearer token and attach the identity to the request.

    Args:
        request: The incoming request
        credentials: Bearer token credentials from the request

    Returns:
        Decoded token data

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired
    """
    if not credentials:
        raise UnauthorizedError(
            "Authentication required",
            error_code="authentication_required",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data or token_data.type != "access":
        raise UnauthorizedError(
            "Invalid or expired credential",
            error_code="invalid_credential",
        )

    request.state.identity = token_data
    return token_data


CurrentIdentity = Annotated[TokenData, Depends(get_token_data)]


async def get_current_account(identity: CurrentIdentity, db: DBSession) -> Any:
    """Load the account behind the token.

    Raises:
        UnauthorizedError: If the account no longer exists
    """
    from qrmenu.modules.accounts.repos import AccountRepository  # noqa: PLC0415

    account = await AccountRepository(db).get_by_id(identity.account_id)
    if account is None:
        raise UnauthorizedError(
            "Account not found",
            error_code="invalid_credential",
        )
    return account


# Use Any for Account to avoid circular imports at runtime
CurrentAccount = Annotated[Any, Depends(get_current_account)]


async def get_owned_shop(
    slug: str,
    request: Request,
    identity: CurrentIdentity,
    db: DBSession,
) -> "Shop":
    """Resolve the shop in the path and check the caller may manage it.

    Inactive shops are resolved too: owners keep managing a hidden menu.

    Args:
        slug: Shop slug from the path
        request: The incoming request
        identity: The authenticated caller
        db: Database session

    Returns:
        The shop, also stored on ``request.state.shop``

    Raises:
        NotFoundError: If no shop has this slug
        ForbiddenError: If the caller is neither the owner nor a platform admin
    """
    from qrmenu.modules.shops.repos import ShopRepository  # noqa: PLC0415

    shop = await ShopRepository(db).get_by_slug(slug)
    if shop is None:
        raise NotFoundError(
            "Shop not found",
            error_code="shop_not_found",
            resource="shop",
            resource_id=slug,
        )

    if not can_manage_shop(identity.role, identity.account_id, shop):
        logger.warning(
            "shop_access_denied",
            account_id=str(identity.account_id),
            shop_slug=slug,
        )
        raise ForbiddenError(
            "Not authorized for this shop",
            error_code="not_authorized_for_shop",
        )

    request.state.shop = shop
    structlog.contextvars.bind_contextvars(shop_id=str(shop.id))
    return shop


OwnedShop = Annotated[Any, Depends(get_owned_shop)]


async def require_platform_admin(identity: CurrentIdentity) -> TokenData:
    """Require the platform-admin role.

    Raises:
        ForbiddenError: If the caller is not a platform admin
    """
    if not is_platform_admin(identity.role):
        raise ForbiddenError(
            "Platform-admin access required",
            error_code="platform_admin_required",
        )
    return identity


PlatformAdmin = Annotated[TokenData, Depends(require_platform_admin)]
