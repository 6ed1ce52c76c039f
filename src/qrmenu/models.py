"""Every ORM model, imported in one place.

Alembic autogenerate, ``qrmenu init-db`` and the tests need all tables
registered on ``Base.metadata`` before they touch the schema.
"""

from qrmenu.core.database.base import Base
from qrmenu.modules.accounts.models import Account
from qrmenu.modules.catalog.models import Category, Item
from qrmenu.modules.shops.models import Shop


__all__ = [
    "Account",
    "Base",
    "Category",
    "Item",
    "Shop",
]
