"""Authentication schemas for token handling."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from qrmenu.core.auth.policy import AccountRole


class TokenData(BaseModel):
    """Identity extracted from a verified access token.

    Attributes:
        account_id: The account's UUID
        email: The account's email at issue time
        role: The account's role at issue time
        exp: Token expiration time
        type: Token type (always "access")
        jti: Unique token identifier
    """

    account_id: UUID
    email: str
    role: AccountRole
    exp: datetime
    type: str = "access"
    jti: str | None = None

    @property
    def is_platform_admin(self) -> bool:
        return self.role is AccountRole.PLATFORM_ADMIN
