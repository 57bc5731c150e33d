"""Tests for POST /add-client."""

import pytest

from client_orders.db.gateway import CLIENTS


class TestAddClient:

    async def test_register(self, client, gateway):
        response = await client.post("/add-client", json={"data": {"email": "a@x.com", "name": "A"}})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["message"]
        assert body["client"] == {"user_id": None, "email": "a@x.com", "name": "A", "isNew": False}

        stored = await gateway.find_many(CLIENTS, email="a@x.com")
        assert len(stored) == 1
        assert stored[0].is_new is False

    async def test_duplicate_is_rejected(self, client, gateway):
        payload = {"data": {"email": "a@x.com", "name": "A"}}
        await client.post("/add-client", json=payload)
        response = await client.post("/add-client", json=payload)

        assert response.status_code == 400
        assert "message" in response.json()
        assert len(await gateway.find_many(CLIENTS, email="a@x.com")) == 1

    async def test_provisioned_client_is_rejected(self, client):
        await client.get("/company-info", params={"email": "a@x.com"})
        response = await client.post("/add-client", json={"data": {"email": "a@x.com", "name": "A"}})
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": {"email": "a@x.com"}},
            {"data": {"name": "A"}},
            {"data": {"email": "", "name": "A"}},
            {"data": {"email": "a@x.com", "name": ""}},
        ],
    )
    async def test_missing_fields(self, client, gateway, payload):
        response = await client.post("/add-client", json=payload)

        assert response.status_code == 400
        assert list(response.json()) == ["message"]
        assert await gateway.find_many(CLIENTS) == []
