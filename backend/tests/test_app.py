"""Tests for application wiring: root, docs and error translation."""

import logging

from client_orders.api.errors import INVALID_BODY_MESSAGE
from client_orders.core.config import Settings
from client_orders.core.logging_config import setup_logging


class TestApp:

    async def test_root(self, client, settings):
        response = await client.get("/")

        assert response.status_code == 200
        assert settings.PROJECT_NAME in response.json()["message"]

    async def test_openapi_lists_endpoints(self, client):
        response = await client.get("/api-docs/openapi.json")

        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "Client Orders API"
        assert {"/company-info", "/get-client-orders", "/connect-operator", "/add-client", "/create-order"} <= set(schema["paths"])

    async def test_swagger_ui(self, client):
        response = await client.get("/api-docs")
        assert response.status_code == 200

    async def test_malformed_json_body(self, client):
        response = await client.post(
            "/add-client",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": INVALID_BODY_MESSAGE}

    async def test_settings_defaults(self, settings):
        assert settings.PORT == 3000
        assert settings.ORDER_ID_STRATEGY == "max_plus_one"
        assert settings.docs_link == "http://localhost:3000/api-docs"


class TestLoggingSetup:

    def test_level_from_settings(self, monkeypatch):
        captured = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
        setup_logging(Settings(LOG_LEVEL="debug"))

        assert captured["level"] == logging.DEBUG
        assert "%(levelname)s" in captured["format"]
