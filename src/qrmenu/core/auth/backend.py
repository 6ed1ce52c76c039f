"""Authentication backend for JWT and password handling.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- JWT access token creation and verification
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from qrmenu.config import settings
from qrmenu.core.auth.policy import AccountRole
from qrmenu.core.auth.schemas import TokenData
from qrmenu.core.constants import ACCESS_TOKEN_JTI_LENGTH


# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.password_hash_rounds,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt with a fresh random salt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash.

    A missing or unreadable hash is a mismatch, not an error, so callers
    cannot tell a broken record from a wrong password.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def dummy_verify_password() -> None:
    """Spend the time of one bcrypt check without a real hash.

    Called when the email is unknown so login takes as long as it
    does for a wrong password.
    """
    pwd_context.dummy_verify()


# ============================================================
# JWT Token Utilities
# ============================================================


def create_access_token(
    account_id: UUID,
    email: str,
    role: AccountRole,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for an account.

    Args:
        account_id: The account's UUID
        email: The account's email
        role: The account's role
        expires_delta: Optional custom lifetime (defaults to the configured days)

    Returns:
        Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.access_token_expire_days)

    to_encode: dict[str, Any] = {
        "sub": str(account_id),
        "email": email,
        "role": role.value,
        "exp": now + expires_delta,
        "iat": now,
        "type": "access",
        "jti": secrets.token_urlsafe(ACCESS_TOKEN_JTI_LENGTH),
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenData | None:
    """Decode and validate an access token.

    Fails closed: a bad signature, an expired token, a missing claim or
    an unknown role all yield None.

    Args:
        token: The JWT token to decode

    Returns:
        TokenData if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )

        account_id = payload.get("sub")
        email = payload.get("email")
        role = payload.get("role")
        exp = payload.get("exp")

        if not account_id or not email or not role or exp is None:
            return None

        return TokenData(
            account_id=UUID(account_id),
            email=email,
            role=AccountRole(role),
            exp=datetime.fromtimestamp(exp, tz=UTC),
            type=payload.get("type", "access"),
            jti=payload.get("jti"),
        )

    except (JWTError, ValueError, TypeError):
        return None
