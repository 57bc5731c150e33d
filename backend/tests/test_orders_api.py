"""Tests for GET /get-client-orders and POST /create-order."""

import pytest
from httpx import ASGITransport, AsyncClient

from client_orders.core.exceptions import StoreUnavailable
from client_orders.db.gateway import ORDERS
from client_orders.main import create_app


async def register(client, email="a@x.com", name="A"):
    response = await client.post("/add-client", json={"data": {"email": email, "name": name}})
    assert response.status_code == 200


async def create_order(client, email="a@x.com", total=50):
    return await client.post("/create-order", json={"data": {"email": email, "total": total}})


class TestGetClientOrders:

    async def test_unknown_client(self, client):
        response = await client.get("/get-client-orders", params={"email": "nobody@x.com"})

        assert response.status_code == 404
        body = response.json()
        assert "message" in body
        assert "orders" not in body

    async def test_client_without_orders(self, client):
        await register(client)
        response = await client.get("/get-client-orders", params={"email": "a@x.com"})

        assert response.status_code == 200
        assert response.json() == {"is_new_client": False, "orders": []}

    async def test_provisioned_client_is_reported_as_not_new(self, client):
        await client.get("/company-info", params={"email": "p@x.com"})
        response = await client.get("/get-client-orders", params={"email": "p@x.com"})

        assert response.status_code == 200
        assert response.json()["is_new_client"] is False


class TestCreateOrder:

    async def test_first_order_has_id_one(self, client):
        await register(client)
        response = await create_order(client, total=50)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["message"]
        assert body["order"] == {"order_id": 1, "email": "a@x.com", "status": "processing", "total": 50}

    async def test_zero_total_is_accepted(self, client):
        await register(client)
        response = await create_order(client, total=0)

        assert response.status_code == 200
        assert response.json()["order"]["total"] == 0

    async def test_null_total_is_accepted(self, client):
        """An explicit null total is a value; only an absent total is rejected."""
        await register(client)
        response = await create_order(client, total=None)

        assert response.status_code == 200
        assert response.json()["order"]["total"] is None

    async def test_integer_total_is_echoed_as_integer(self, client):
        await register(client)
        response = await create_order(client, total=50)

        assert '"total":50}' in response.text
        assert isinstance(response.json()["order"]["total"], int)

    async def test_fractional_total_is_kept(self, client):
        await register(client)
        response = await create_order(client, total=12.5)

        assert response.json()["order"]["total"] == 12.5

    async def test_id_follows_existing_maximum(self, client, gateway, ledger):
        await register(client)
        await ledger.place("someone@x.com", 1)
        await ledger.place("someone@x.com", 1)

        response = await create_order(client)
        assert response.json()["order"]["order_id"] == 3

    async def test_unknown_client(self, client, gateway):
        response = await create_order(client, email="nobody@x.com")

        assert response.status_code == 404
        assert "message" in response.json()
        assert await gateway.find_many(ORDERS) == []

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": {"email": "a@x.com"}},
            {"data": {"total": 10}},
            {"data": {"email": "", "total": 10}},
            {"data": {"email": "a@x.com", "total": "lots"}},
        ],
    )
    async def test_invalid_payload(self, client, gateway, payload):
        await register(client)
        response = await client.post("/create-order", json=payload)

        assert response.status_code == 400
        assert list(response.json()) == ["message"]
        assert await gateway.find_many(ORDERS) == []

    async def test_store_failure_returns_500(self, client, gateway, monkeypatch):
        await register(client)

        async def unavailable(collection, record):
            raise StoreUnavailable()

        monkeypatch.setattr(gateway, "insert", unavailable)
        response = await create_order(client)

        assert response.status_code == 500
        assert list(response.json()) == ["message"]


class TestOrderScenario:
    """Register, place two orders, list them."""

    async def test_full_flow(self, client):
        assert (await client.post("/add-client", json={"data": {"email": "a@x.com", "name": "A"}})).status_code == 200

        first = await create_order(client, total=50)
        assert first.status_code == 200
        assert first.json()["order"]["order_id"] == 1

        second = await create_order(client, total=75)
        assert second.status_code == 200
        assert second.json()["order"]["order_id"] == 2

        listing = await client.get("/get-client-orders", params={"email": "a@x.com"})
        assert listing.status_code == 200
        orders = listing.json()["orders"]
        assert len(orders) == 2
        assert sorted(o["total"] for o in orders) == [50, 75]

    async def test_full_flow_with_counter_strategy(self, settings, gateway):
        settings.ORDER_ID_STRATEGY = "counter"
        app = create_app(settings, gateway)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            await register(client)
            ids = [(await create_order(client, total=t)).json()["order"]["order_id"] for t in (50, 75)]

        assert ids == [1, 2]
