"""Shared fixtures: in-memory SQLite gateway, services and an HTTP client over the app."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from client_orders.core.config import Settings
from client_orders.db.database import create_engine
from client_orders.db.gateway import PersistenceGateway
from client_orders.main import create_app
from client_orders.services.client_directory import ClientDirectory
from client_orders.services.order_ledger import OrderLedger

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings():
    return Settings(DATABASE_URL=TEST_DATABASE_URL)


@pytest.fixture
async def gateway():
    """Gateway over a fresh in-memory database with the schema created."""
    engine = create_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    gateway = PersistenceGateway(engine)
    await gateway.create_schema()
    yield gateway
    await gateway.dispose()


@pytest.fixture
def directory(gateway):
    return ClientDirectory(gateway)


@pytest.fixture
def ledger(gateway):
    return OrderLedger(gateway)


@pytest.fixture
def app(settings, gateway):
    return create_app(settings, gateway)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
