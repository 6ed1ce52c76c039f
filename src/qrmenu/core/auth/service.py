"""Authentication service for registration, login and session lookup."""

from typing import Annotated

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from qrmenu.api.dependencies import DBSession
from qrmenu.core.auth.backend import (
    create_access_token,
    dummy_verify_password,
    hash_password,
    verify_password,
)
from qrmenu.core.auth.policy import AccountRole
from qrmenu.core.errors import ConflictError, UnauthorizedError
from qrmenu.modules.accounts.models import Account
from qrmenu.modules.accounts.repos import AccountRepository
from qrmenu.modules.shops.models import Shop
from qrmenu.modules.shops.repos import ShopRepository


logger = structlog.get_logger()


def _email_taken() -> ConflictError:
    return ConflictError("Email already registered", error_code="email_exists")


class AuthService:
    """Service for authentication operations.

    Tokens are stateless: nothing is stored at login and nothing can be
    revoked before expiry.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.account_repo = AccountRepository(db)
        self.shop_repo = ShopRepository(db)

    async def register(
        self,
        email: str,
        password: str,
        name: str,
    ) -> tuple[Account, str]:
        """Register a new owner account.

        The account owns no shop until a platform admin assigns one.

        Args:
            email: Account email address
            password: Plain text password
            name: Display name

        Returns:
            Tuple of (account, access_token)

        Raises:
            ConflictError: If email already exists
        """
        if await self.account_repo.get_by_email(email):
            raise _email_taken()

        account = Account(
            email=email,
            password_hash=hash_password(password),
            name=name,
            role=AccountRole.OWNER,
        )
        try:
            account = await self.account_repo.create(account)
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            raise _email_taken() from e
        logger.info("account_registered", account_id=str(account.id))

        return account, self.issue_token(account)

    async def login(self, email: str, password: str) -> tuple[Account, str, Shop | None]:
        """Authenticate an account with email and password.

        Unknown email and wrong password fail identically.

        Args:
            email: Account email address
            password: Plain text password

        Returns:
            Tuple of (account, access_token, first owned shop or None)

        Raises:
            UnauthorizedError: If credentials are invalid
        """
        account = await self.account_repo.get_by_email(email)
        if account is None:
            dummy_verify_password()
        if account is None or not verify_password(password, account.password_hash):
            logger.info("login_failed")
            raise UnauthorizedError(
                "Invalid email or password",
                error_code="invalid_credentials",
            )

        shop = await self.shop_repo.get_first_owned_by(account.id)
        logger.info("login_succeeded", account_id=str(account.id))

        return account, self.issue_token(account), shop

    async def first_owned_shop(self, account: Account) -> Shop | None:
        """The shop shown for an account in login and /me responses."""
        return await self.shop_repo.get_first_owned_by(account.id)

    @staticmethod
    def issue_token(account: Account) -> str:
        """Create an access token for an account."""
        return create_access_token(account.id, account.email, account.role)


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
