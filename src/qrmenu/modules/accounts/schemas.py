"""Pydantic schemas for accounts and authentication."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from qrmenu.core.auth.policy import AccountRole
from qrmenu.core.constants import MAX_NAME_LENGTH, MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from qrmenu.modules.shops.schemas import ShopSummary


class AccountResponse(BaseModel):
    """Public view of an account. Never carries the password hash."""

    id: UUID
    email: str
    name: str
    role: AccountRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================================
# Authentication Schemas
# ============================================================


class RegisterRequest(BaseModel):
    """Schema for self-service owner registration."""

    email: EmailStr
    password: str = Field(
        ..., min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class LoginRequest(BaseModel):
    """Schema for email/password login."""

    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Token issued by register and login.

    ``shop`` is the account's first owned shop, or null.
    """

    success: bool = True
    token: str
    token_type: str = "bearer"
    account: AccountResponse
    shop: ShopSummary | None = None


class MeResponse(BaseModel):
    """The authenticated account and its first owned shop."""

    account: AccountResponse
    shop: ShopSummary | None = None
