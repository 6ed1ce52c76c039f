"""Authentication: password hashing, access tokens and access control.

Routes and the service are imported from their own modules to keep
this package importable from the models.
"""

from qrmenu.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from qrmenu.core.auth.dependencies import (
    CurrentAccount,
    CurrentIdentity,
    OwnedShop,
    PlatformAdmin,
    get_current_account,
    get_owned_shop,
    get_token_data,
    require_platform_admin,
)
from qrmenu.core.auth.middleware import IdentityContextMiddleware, RequestIdMiddleware
from qrmenu.core.auth.policy import AccountRole, can_manage_shop, is_platform_admin
from qrmenu.core.auth.schemas import TokenData


__all__ = [
    "AccountRole",
    # Dependencies
    "CurrentAccount",
    "CurrentIdentity",
    # Middleware
    "IdentityContextMiddleware",
    "OwnedShop",
    "PlatformAdmin",
    "RequestIdMiddleware",
    # Schemas
    "TokenData",
    # Policy
    "can_manage_shop",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_account",
    "get_owned_shop",
    "get_token_data",
    # Password utilities
    "hash_password",
    "is_platform_admin",
    "require_platform_admin",
    "verify_password",
]
