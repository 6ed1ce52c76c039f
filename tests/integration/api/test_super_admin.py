"""Integration tests for platform-admin shop management."""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from qrmenu.core.auth.backend import verify_password
from qrmenu.models import Account, Category, Item, Shop


pytestmark = pytest.mark.integration


class TestAccess:
    """Owners never reach platform-admin routes."""

    async def test_owner_rejected(self, client: AsyncClient, owner_headers):
        for method, url in [
            ("GET", "/api/super-admin/shops"),
            ("GET", "/api/super-admin/users"),
            ("POST", "/api/super-admin/maintenance/sweep"),
        ]:
            response = await client.request(method, url, headers=owner_headers)
            assert response.status_code == 403
            assert response.json()["code"] == "platform_admin_required"


class TestCreateShop:
    """Tests for POST /api/super-admin/shops."""

    async def test_creates_owner_with_defaults(self, client: AsyncClient, db, admin_headers):
        response = await client.post(
            "/api/super-admin/shops",
            json={"slug": " Coffee-Kings ", "name": "Coffee Kings", "owner_email": "new@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["slug"] == "coffee-kings"
        assert data["is_active"] is True
        assert data["owner"]["email"] == "new@example.com"
        assert data["owner"]["name"] == "Shop Owner"

        account = (
            await db.execute(select(Account).where(Account.email == "new@example.com"))
        ).scalar_one()
        assert verify_password("changeme123", account.password_hash)

    async def test_reuses_existing_account_untouched(
        self, client: AsyncClient, owner, admin_headers
    ):
        old_hash = owner.password_hash

        response = await client.post(
            "/api/super-admin/shops",
            json={
                "slug": "second",
                "name": "Second",
                "ownerEmail": "owner@example.com",
                "ownerPassword": "ignored-password",
                "ownerName": "Ignored",
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["owner"]["id"] == str(owner.id)
        assert owner.password_hash == old_hash
        assert owner.name == "Owner"

    async def test_duplicate_slug(self, client: AsyncClient, shop, admin_headers):
        response = await client.post(
            "/api/super-admin/shops",
            json={"slug": "espresso-shots", "name": "Again", "owner_email": "x@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "slug_exists"

    async def test_slug_generated_from_name(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/super-admin/shops",
            json={"name": "Café Crème", "owner_email": "creme@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["slug"] == "cafe-creme"

    async def test_invalid_slug(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/super-admin/shops",
            json={"slug": "no spaces!", "name": "Bad", "owner_email": "bad@example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 422


class TestManageShops:
    """Tests for list, update, toggle and delete."""

    async def test_list_with_owners(self, client: AsyncClient, shop, admin_headers):
        response = await client.get("/api/super-admin/shops", headers=admin_headers)

        assert response.status_code == 200
        [row] = response.json()
        assert row["slug"] == "espresso-shots"
        assert row["owner"]["email"] == "owner@example.com"

    async def test_update_keeps_slug(self, client: AsyncClient, shop, admin_headers):
        response = await client.put(
            f"/api/super-admin/shops/{shop.id}",
            json={"name": "Renamed", "slug": "ignored"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        assert response.json()["slug"] == "espresso-shots"

    async def test_toggle_twice_restores(self, client: AsyncClient, shop, admin_headers):
        url = f"/api/super-admin/shops/{shop.id}/toggle"

        first = await client.patch(url, headers=admin_headers)
        second = await client.patch(url, headers=admin_headers)

        assert first.json()["is_active"] is False
        assert second.json()["is_active"] is True

    async def test_unknown_shop(self, client: AsyncClient, admin_headers):
        response = await client.patch(
            f"/api/super-admin/shops/{uuid4()}/toggle", headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "shop_not_found"

    async def test_delete_cascades_but_keeps_owner(
        self, client: AsyncClient, db, owner, shop, owner_headers, admin_headers
    ):
        response = await client.post(
            "/api/shops/espresso-shots/categories", json={"name": "Drinks"}, headers=owner_headers
        )
        await client.post(
            "/api/shops/espresso-shots/items",
            json={"category_id": response.json()["id"], "name": "Latte"},
            headers=owner_headers,
        )

        response = await client.delete(f"/api/super-admin/shops/{shop.id}", headers=admin_headers)

        assert response.status_code == 200
        for model in (Shop, Category, Item):
            count = (await db.execute(select(func.count()).select_from(model))).scalar_one()
            assert count == 0, model.__name__
        assert await db.get(Account, owner.id) is not None

    async def test_list_accounts_hides_hashes(self, client: AsyncClient, owner, admin_headers):
        response = await client.get("/api/super-admin/users", headers=admin_headers)

        assert response.status_code == 200
        emails = {a["email"] for a in response.json()}
        assert {"owner@example.com", "admin@example.com"} <= emails
        assert all("password_hash" not in a for a in response.json())


class TestSweep:
    """Tests for the orphan sweep."""

    async def test_sweep_is_idempotent(
        self, client: AsyncClient, db, owner, shop, admin_headers
    ):
        kept = Category(shop_id=shop.id, name="Kept", icon="☕", order=1)
        db.add(kept)
        await db.flush()

        # Orphans as left by an interrupted cascade
        ghost_shop_id = uuid4()
        orphan_category = Category(shop_id=ghost_shop_id, name="Ghost", icon="👻", order=1)
        db.add(orphan_category)
        await db.flush()
        db.add_all(
            [
                Item(shop_id=ghost_shop_id, category_id=orphan_category.id, name="Ghost Item"),
                Item(shop_id=shop.id, category_id=uuid4(), name="Lost Item"),
                Item(shop_id=shop.id, category_id=kept.id, name="Kept Item"),
            ]
        )
        await db.flush()

        first = await client.post("/api/super-admin/maintenance/sweep", headers=admin_headers)
        second = await client.post("/api/super-admin/maintenance/sweep", headers=admin_headers)

        assert first.json() == {"categories_deleted": 1, "items_deleted": 2}
        assert second.json() == {"categories_deleted": 0, "items_deleted": 0}
        names = (await db.execute(select(Item.name))).scalars().all()
        assert names == ["Kept Item"]
