"""Demo dataset and operator tasks shared by the CLI and the tests.

Every function takes an open ``AsyncSession`` and leaves committing to
the caller.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from qrmenu.core.auth.backend import hash_password
from qrmenu.core.auth.policy import AccountRole
from qrmenu.modules.accounts.models import Account
from qrmenu.modules.accounts.repos import AccountRepository
from qrmenu.modules.catalog.models import Category, Item
from qrmenu.modules.catalog.repos import CategoryRepository, ItemRepository
from qrmenu.modules.shops.models import Shop
from qrmenu.modules.shops.repos import ShopRepository


logger = structlog.get_logger()


DEMO_ADMIN: dict[str, str] = {
    "email": "admin@brifsoft.com",
    "password": "admin123",
    "name": "Super Admin",
}

DEMO_SHOPS: list[dict[str, Any]] = [
    {
        "slug": "espresso-shots",
        "name": "Espresso Shot's",
        "owner_email": "espresso@example.com",
        "owner_password": "espresso123",
        "owner_name": "Espresso Owner",
        "categories": [
            {"name": "Hot Drinks", "icon": "☕"},
            {"name": "Cold Drinks", "icon": "🧊"},
            {"name": "Pastries", "icon": "🥐"},
        ],
        "items": [
            ("Hot Drinks", "Espresso", "Rich and bold single shot", "3.50"),
            ("Hot Drinks", "Cappuccino", "Espresso with steamed milk and foam", "4.50"),
            ("Hot Drinks", "Latte", "Smooth espresso with creamy milk", "4.75"),
            ("Hot Drinks", "Turkish Coffee", "Strong traditional coffee", "4.00"),
            ("Cold Drinks", "Iced Latte", "Chilled espresso with cold milk", "5.00"),
            ("Cold Drinks", "Cold Brew", "Slow-steeped for 20 hours", "4.50"),
            ("Pastries", "Butter Croissant", "Flaky French croissant", "3.25"),
            ("Pastries", "Chocolate Muffin", "Rich chocolate muffin", "3.50"),
        ],
    },
    {
        "slug": "coffee-kings",
        "name": "Coffee Kings",
        "owner_email": "kings@example.com",
        "owner_password": "kings123",
        "owner_name": "Coffee Kings Owner",
        "categories": [
            {"name": "Specialty Coffee", "icon": "👑"},
            {"name": "Iced Beverages", "icon": "❄️"},
            {"name": "Food", "icon": "🍔"},
        ],
        "items": [
            ("Specialty Coffee", "Royal Espresso", "Double shot of premium beans", "4.00"),
            ("Specialty Coffee", "King Latte", "Our signature creamy latte", "5.50"),
            ("Specialty Coffee", "Mocha Supreme", "Chocolate meets espresso", "5.75"),
            ("Iced Beverages", "Frozen Caramel", "Blended caramel coffee", "6.00"),
            ("Iced Beverages", "Iced Americano", "Classic cold americano", "4.00"),
            ("Food", "Royal Sandwich", "Turkey, cheese, and veggies", "8.50"),
            ("Food", "Caesar Salad", "Fresh romaine with dressing", "7.50"),
        ],
    },
]


@dataclass
class SeedSummary:
    """What a seed run created or skipped."""

    admin_created: bool = False
    shops_created: list[str] = field(default_factory=list)
    shops_skipped: list[str] = field(default_factory=list)
    categories_created: int = 0
    items_created: int = 0


async def ensure_platform_admin(
    session: AsyncSession,
    email: str,
    password: str,
    name: str,
) -> tuple[Account, bool]:
    """Create a platform admin, or promote and re-key an existing account.

    Returns:
        Tuple of (account, created)
    """
    repo = AccountRepository(session)
    account = await repo.get_by_email(email)

    if account is None:
        account = await repo.create(
            Account(
                email=email,
                password_hash=hash_password(password),
                name=name,
                role=AccountRole.PLATFORM_ADMIN,
            )
        )
        logger.info("platform_admin_created", account_id=str(account.id))
        return account, True

    account.role = AccountRole.PLATFORM_ADMIN
    account.password_hash = hash_password(password)
    if name:
        account.name = name
    account = await repo.update(account)
    logger.info("platform_admin_promoted", account_id=str(account.id))
    return account, False


async def reset_database(session: AsyncSession) -> None:
    """Delete every row, leaf tables first."""
    for model in (Item, Category, Shop, Account):
        await session.execute(delete(model))
    await session.flush()
    logger.warning("database_reset")


async def seed_demo(session: AsyncSession, reset: bool = False) -> SeedSummary:
    """Load the demo admin and shops.

    Existing shops (by slug) are left untouched, so running the seed
    twice does not duplicate anything.

    Args:
        session: Open database session
        reset: Wipe all data first
    """
    if reset:
        await reset_database(session)

    summary = SeedSummary()
    _, summary.admin_created = await _ensure_demo_admin(session)

    accounts = AccountRepository(session)
    shops = ShopRepository(session)
    categories = CategoryRepository(session)
    items = ItemRepository(session)

    for data in DEMO_SHOPS:
        if await shops.get_by_slug(data["slug"]):
            summary.shops_skipped.append(data["slug"])
            continue

        owner = await accounts.get_by_email(data["owner_email"])
        if owner is None:
            owner = await accounts.create(
                Account(
                    email=data["owner_email"],
                    password_hash=hash_password(data["owner_password"]),
                    name=data["owner_name"],
                    role=AccountRole.OWNER,
                )
            )

        shop = await shops.create(Shop(slug=data["slug"], name=data["name"], owner_id=owner.id))

        category_ids = {}
        for order, category_data in enumerate(data["categories"], start=1):
            category = await categories.create(
                Category(shop_id=shop.id, order=order, **category_data)
            )
            category_ids[category.name] = category.id
            summary.categories_created += 1

        for category_name, name, description, price in data["items"]:
            await items.create(
                Item(
                    shop_id=shop.id,
                    category_id=category_ids[category_name],
                    name=name,
                    description=description,
                    price=Decimal(price),
                    available=True,
                )
            )
            summary.items_created += 1

        summary.shops_created.append(shop.slug)

    logger.info(
        "demo_seeded",
        shops_created=summary.shops_created,
        shops_skipped=summary.shops_skipped,
    )
    return summary


async def _ensure_demo_admin(session: AsyncSession) -> tuple[Account, bool]:
    existing = await AccountRepository(session).get_by_email(DEMO_ADMIN["email"])
    if existing is not None:
        return existing, False
    return await ensure_platform_admin(session, **DEMO_ADMIN)
