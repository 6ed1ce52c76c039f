"""Account repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from qrmenu.api.dependencies import DBSession
from qrmenu.modules.accounts.models import Account


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookups."""
    return email.strip().lower()


class AccountRepository:
    """Repository for Account database operations.

    Accounts are global, so nothing here is shop-scoped.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, account: Account) -> Account:
        """Create a new account.

        Args:
            account: Account instance to create

        Returns:
            The created account with ID populated
        """
        account.email = normalize_email(account.email)
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def get_by_id(self, account_id: UUID) -> Account | None:
        """Get an account by ID."""
        return await self.session.get(Account, account_id)

    async def get_by_email(self, email: str) -> Account | None:
        """Get an account by email address (case-insensitive).

        Args:
            email: The account's email

        Returns:
            Account if found, None otherwise
        """
        stmt = select(Account).where(Account.email == normalize_email(email))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Account]:
        """List every account, oldest first."""
        stmt = select(Account).order_by(Account.created_at, Account.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, account: Account) -> Account:
        """Persist changes made to an account."""
        await self.session.flush()
        await self.session.refresh(account)
        return account
