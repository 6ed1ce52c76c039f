"""Account database models."""

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from qrmenu.core.auth.policy import AccountRole
from qrmenu.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from qrmenu.core.database.base import Base, TimestampMixin, UUIDMixin


class Account(Base, UUIDMixin, TimestampMixin):
    """An authenticated person: a shop owner or a platform admin.

    Accounts are global, not tenant-scoped. A shop points at its owner
    account; an account may own zero, one or several shops.

    Attributes:
        email: Globally unique, stored lowercase
        password_hash: Bcrypt hash, never serialized in responses
        name: Display name
        role: Closed role set, see AccountRole
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        default="",
    )
    role: Mapped[AccountRole] = mapped_column(
        Enum(
            AccountRole,
            name="account_role",
            native_enum=False,
            length=32,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        nullable=False,
        default=AccountRole.OWNER,
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email}, role={self.role.value})>"
