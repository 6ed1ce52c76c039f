"""Pytest configuration and shared fixtures."""

import os


# Settings are read at import time, so the test environment must be in
# place before anything from qrmenu is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///./qrmenu-test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from qrmenu.core.auth.backend import create_access_token, hash_password  # noqa: E402
from qrmenu.core.auth.policy import AccountRole  # noqa: E402
from qrmenu.core.database import get_db  # noqa: E402
from qrmenu.main import create_app  # noqa: E402
from qrmenu.models import Account, Base, Shop  # noqa: E402
from qrmenu.modules.uploads.services import get_image_host  # noqa: E402
from tests.factories import AccountFactory  # noqa: E402


TEST_PASSWORD = "secret123"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide the session shared by the test and the app under test."""
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def override_image_host(app):
    """Swap the image host client used by the upload route."""

    def override(fake) -> None:
        app.dependency_overrides[get_image_host] = lambda: fake

    return override


# ============================================================
# Account and Shop Fixtures
# ============================================================


@pytest.fixture
def make_account(db: AsyncSession) -> Callable[..., Awaitable[Account]]:
    """Factory fixture persisting an account with ``TEST_PASSWORD``."""

    async def make(role: AccountRole = AccountRole.OWNER, **overrides) -> Account:
        password = overrides.pop("password", TEST_PASSWORD)
        data = AccountFactory.build(**overrides)
        account = Account(
            email=data.email,
            name=data.name,
            password_hash=hash_password(password),
            role=role,
        )
        db.add(account)
        await db.flush()
        return account

    return make


@pytest.fixture
def make_shop(db: AsyncSession) -> Callable[..., Awaitable[Shop]]:
    """Factory fixture persisting a shop for an owner."""

    async def make(owner: Account, slug: str, name: str | None = None, **fields) -> Shop:
        shop = Shop(
            slug=slug,
            name=name or slug.replace("-", " ").title(),
            owner_id=owner.id,
            **fields,
        )
        db.add(shop)
        await db.flush()
        return shop

    return make


@pytest.fixture
async def owner(make_account) -> Account:
    """An owner account."""
    return await make_account(email="owner@example.com", name="Owner")


@pytest.fixture
async def other_owner(make_account) -> Account:
    """An owner of a different shop."""
    return await make_account(email="other@example.com", name="Other Owner")


@pytest.fixture
async def admin(make_account) -> Account:
    """A platform admin."""
    return await make_account(
        role=AccountRole.PLATFORM_ADMIN, email="admin@example.com", name="Admin"
    )


@pytest.fixture
async def shop(make_shop, owner: Account) -> Shop:
    """An active shop owned by ``owner``."""
    return await make_shop(owner, "espresso-shots", name="Espresso Shot's")


def headers_for(account: Account) -> dict[str, str]:
    """Authorization headers carrying a token for ``account``."""
    token = create_access_token(account.id, account.email, account.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner_headers(owner: Account) -> dict[str, str]:
    """Authorization headers for ``owner``."""
    return headers_for(owner)


@pytest.fixture
def other_headers(other_owner: Account) -> dict[str, str]:
    """Authorization headers for ``other_owner``."""
    return headers_for(other_owner)


@pytest.fixture
def admin_headers(admin: Account) -> dict[str, str]:
    """Authorization headers for ``admin``."""
    return headers_for(admin)
