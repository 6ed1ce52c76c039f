"""Integration tests for the owner catalog endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from qrmenu.models import Item


pytestmark = pytest.mark.integration

BASE = "/api/shops/espresso-shots"


async def create_category(client: AsyncClient, headers, name: str, slug="espresso-shots"):
    response = await client.post(
        f"/api/shops/{slug}/categories", json={"name": name}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


async def create_item(client: AsyncClient, headers, category_id: str, slug="espresso-shots", **fields):
    response = await client.post(
        f"/api/shops/{slug}/items",
        json={"category_id": category_id, "name": "Latte", **fields},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


class TestAccessControl:
    """Every mutating catalog call is refused to a foreign owner."""

    async def test_foreign_owner_rejected_everywhere(
        self, client: AsyncClient, shop, owner_headers, other_headers
    ):
        category = await create_category(client, owner_headers, "Drinks")
        item = await create_item(client, owner_headers, category["id"], price="4.00")

        calls = [
            ("POST", f"{BASE}/categories", {"name": "X"}),
            ("PUT", f"{BASE}/categories/{category['id']}", {"name": "X"}),
            ("DELETE", f"{BASE}/categories/{category['id']}", None),
            ("POST", f"{BASE}/items", {"category_id": category["id"], "name": "X"}),
            ("PUT", f"{BASE}/items/{item['id']}", {"name": "X"}),
            ("DELETE", f"{BASE}/items/{item['id']}", None),
            ("PUT", f"{BASE}/settings", {"name": "X"}),
        ]

        for method, url, body in calls:
            response = await client.request(method, url, json=body, headers=other_headers)
            assert response.status_code == 403, (method, url)
            assert response.json()["code"] == "not_authorized_for_shop"

        # Nothing changed
        menu = (await client.get(f"{BASE}/menu")).json()
        assert [c["name"] for c in menu["categories"]] == ["Drinks"]
        assert [i["name"] for i in menu["items"]] == ["Latte"]

    async def test_anonymous_rejected(self, client: AsyncClient, shop):
        response = await client.post(f"{BASE}/categories", json={"name": "X"})

        assert response.status_code == 401
        assert response.json()["code"] == "authentication_required"

    async def test_unknown_shop_is_404_not_403(self, client: AsyncClient, owner_headers):
        response = await client.post(
            "/api/shops/nowhere/categories", json={"name": "X"}, headers=owner_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "shop_not_found"

    async def test_admin_can_manage_any_shop(self, client: AsyncClient, shop, admin_headers):
        category = await create_category(client, admin_headers, "Admin Made")

        assert category["order"] == 1


class TestCategories:
    """Tests for category create, update and delete."""

    async def test_orders_are_sequential_and_stable(
        self, client: AsyncClient, shop, owner_headers
    ):
        created = [await create_category(client, owner_headers, f"C{i}") for i in range(1, 5)]

        assert [c["order"] for c in created] == [1, 2, 3, 4]

        response = await client.delete(
            f"{BASE}/categories/{created[1]['id']}", headers=owner_headers
        )
        assert response.status_code == 200
        assert response.json() == {"message": "Category deleted"}

        remaining = (await client.get(f"{BASE}/categories", headers=owner_headers)).json()
        assert [(c["name"], c["order"]) for c in remaining] == [("C1", 1), ("C3", 3), ("C4", 4)]

    async def test_icon_default_and_update(self, client: AsyncClient, shop, owner_headers):
        category = await create_category(client, owner_headers, "Drinks")
        assert category["icon"] == "📋"

        response = await client.put(
            f"{BASE}/categories/{category['id']}",
            json={"icon": "☕"},
            headers=owner_headers,
        )

        assert response.status_code == 200
        assert response.json()["icon"] == "☕"
        assert response.json()["name"] == "Drinks"

    async def test_update_unknown_category(self, client: AsyncClient, shop, owner_headers):
        response = await client.put(
            f"{BASE}/categories/{uuid4()}", json={"name": "X"}, headers=owner_headers
        )

        assert response.status_code == 404
        assert response.json()["code"] == "category_not_found"

    async def test_delete_category_removes_only_its_items(
        self, client: AsyncClient, db, make_shop, owner, shop, owner_headers
    ):
        await make_shop(owner, "second-shop")
        drinks = await create_category(client, owner_headers, "Drinks")
        food = await create_category(client, owner_headers, "Food")
        other = await create_category(client, owner_headers, "Drinks", slug="second-shop")

        await create_item(client, owner_headers, drinks["id"], name="Latte")
        await create_item(client, owner_headers, drinks["id"], name="Mocha")
        kept = await create_item(client, owner_headers, food["id"], name="Bagel")
        kept_other = await create_item(
            client, owner_headers, other["id"], slug="second-shop", name="Tea"
        )

        response = await client.delete(
            f"{BASE}/categories/{drinks['id']}", headers=owner_headers
        )
        assert response.status_code == 200

        remaining = (await db.execute(select(Item.id))).scalars().all()
        assert {str(i) for i in remaining} == {kept["id"], kept_other["id"]}

    async def test_category_of_other_shop_not_reachable(
        self, client: AsyncClient, make_shop, other_owner, shop, owner_headers, other_headers
    ):
        await make_shop(other_owner, "coffee-kings")
        foreign = await create_category(client, other_headers, "Theirs", slug="coffee-kings")

        response = await client.delete(
            f"{BASE}/categories/{foreign['id']}", headers=owner_headers
        )

        assert response.status_code == 404


class TestItems:
    """Tests for item create, update and delete."""

    async def test_create_accepts_camel_case(self, client: AsyncClient, shop, owner_headers):
        category = await create_category(client, owner_headers, "Drinks")

        response = await client.post(
            f"{BASE}/items",
            json={"categoryId": category["id"], "name": "Latte", "price": "4.75"},
            headers=owner_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["price"] == 4.75
        assert data["available"] is True
        assert data["category_id"] == category["id"]

    async def test_malformed_price_becomes_zero(self, client: AsyncClient, shop, owner_headers):
        category = await create_category(client, owner_headers, "Drinks")

        item = await create_item(client, owner_headers, category["id"], price="4.75abc")

        assert item["price"] == 0

    async def test_negative_price_rejected(self, client: AsyncClient, shop, owner_headers):
        category = await create_category(client, owner_headers, "Drinks")

        response = await client.post(
            f"{BASE}/items",
            json={"category_id": category["id"], "name": "Latte", "price": -1},
            headers=owner_headers,
        )

        assert response.status_code == 422
        assert response.json()["code"] == "invalid_price"

    @pytest.mark.parametrize("price", ["1e50", "123456789012"])
    async def test_oversized_price_rejected_on_create(
        self, client: AsyncClient, shop, owner_headers, price
    ):
        category = await create_category(client, owner_headers, "Drinks")

        response = await client.post(
            f"{BASE}/items",
            json={"category_id": category["id"], "name": "Latte", "price": price},
            headers=owner_headers,
        )

        assert response.status_code == 422
        assert response.json()["code"] == "invalid_price"

    async def test_oversized_price_rejected_on_update(
        self, client: AsyncClient, shop, owner_headers, db
    ):
        category = await create_category(client, owner_headers, "Drinks")
        item = await create_item(client, owner_headers, category["id"], price=4.75)

        response = await client.put(
            f"{BASE}/items/{item['id']}",
            json={"price": 1e30},
            headers=owner_headers,
        )

        assert response.status_code == 422
        assert response.json()["code"] == "invalid_price"
        stored = await db.scalar(select(Item.price).where(Item.name == "Latte"))
        assert float(stored) == 4.75

    async def test_update_ignores_unparseable_price(
        self, client: AsyncClient, shop, owner_headers
    ):
        category = await create_category(client, owner_headers, "Drinks")
        item = await create_item(client, owner_headers, category["id"], price=4.75)

        response = await client.put(
            f"{BASE}/items/{item['id']}",
            json={"price": "free", "available": False},
            headers=owner_headers,
        )

        assert response.status_code == 200
        assert response.json()["price"] == 4.75
        assert response.json()["available"] is False

    async def test_item_in_foreign_category_rejected(
        self, client: AsyncClient, make_shop, other_owner, shop, owner_headers, other_headers
    ):
        await make_shop(other_owner, "coffee-kings")
        foreign = await create_category(client, other_headers, "Theirs", slug="coffee-kings")

        response = await client.post(
            f"{BASE}/items",
            json={"category_id": foreign["id"], "name": "Sneaky"},
            headers=owner_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "category_not_found"

    async def test_delete_item(self, client: AsyncClient, shop, owner_headers):
        category = await create_category(client, owner_headers, "Drinks")
        item = await create_item(client, owner_headers, category["id"])

        response = await client.delete(f"{BASE}/items/{item['id']}", headers=owner_headers)
        assert response.status_code == 200

        response = await client.delete(f"{BASE}/items/{item['id']}", headers=owner_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "item_not_found"


class TestCoffeeKingsScenario:
    """Register, get a shop, build a menu and read it publicly."""

    async def test_end_to_end(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/auth/register",
            json={"email": "kings@example.com", "password": "kings123", "name": "Kings"},
        )
        assert response.status_code == 201

        response = await client.post(
            "/api/super-admin/shops",
            json={"slug": "coffee-kings", "name": "Coffee Kings", "ownerEmail": "kings@example.com"},
            headers=admin_headers,
        )
        assert response.status_code == 201

        response = await client.post(
            "/api/auth/login", json={"email": "kings@example.com", "password": "kings123"}
        )
        assert response.json()["shop"]["slug"] == "coffee-kings"
        headers = {"Authorization": f"Bearer {response.json()['token']}"}

        drinks = await create_category(client, headers, "Drinks", slug="coffee-kings")
        response = await client.put(
            f"/api/shops/coffee-kings/categories/{drinks['id']}",
            json={"icon": "☕"},
            headers=headers,
        )
        assert response.status_code == 200
        await create_item(client, headers, drinks["id"], slug="coffee-kings", price="4.75")

        response = await client.get("/api/shops/coffee-kings/menu")

        assert response.status_code == 200
        menu = response.json()
        assert menu["shop"]["slug"] == "coffee-kings"
        assert menu["categories"] == [
            {"id": drinks["id"], "name": "Drinks", "icon": "☕", "order": 1}
        ]
        assert len(menu["items"]) == 1
        latte = menu["items"][0]
        assert latte["name"] == "Latte"
        assert latte["price"] == 4.75
        assert latte["available"] is True
        assert latte["category_id"] == drinks["id"]
