"""Roles and the shop access policy.

Roles form a closed set. Every check below covers each member
explicitly, so adding a role means revisiting this module.
"""

from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID


if TYPE_CHECKING:
    from qrmenu.modules.shops.models import Shop


class AccountRole(str, Enum):
    """Role carried by an account and by its access tokens."""

    OWNER = "owner"
    PLATFORM_ADMIN = "platform_admin"


def is_platform_admin(role: AccountRole) -> bool:
    """Return True if the role may manage every shop and account."""
    if role is AccountRole.PLATFORM_ADMIN:
        return True
    if role is AccountRole.OWNER:
        return False
    raise ValueError(f"Unknown role: {role!r}")


def can_manage_shop(role: AccountRole, account_id: UUID, shop: "Shop") -> bool:
    """Decide whether an identity may mutate a shop's catalog and settings.

    Ownership comes from the persisted shop row passed in, never from
    token claims.
    """
    if role is AccountRole.PLATFORM_ADMIN:
        return True
    if role is AccountRole.OWNER:
        return shop.owner_id == account_id
    raise ValueError(f"Unknown role: {role!r}")
