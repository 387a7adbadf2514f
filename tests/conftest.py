"""
Pytest configuration and shared fixtures for testing.

This module provides reusable fixtures for:
- Database engine and sessions (in-memory SQLite through aiosqlite)
- FastAPI app and async HTTP client
- A mocked Mollie API (httpx.MockTransport)
- Sales channel, plugin settings and customer test data
"""

import uuid
from collections.abc import AsyncGenerator
from types import SimpleNamespace
from typing import Annotated

import httpx
import pytest
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from main import initialize_app
from mollie_components.config import Settings, get_settings
from mollie_components.database import make_session
from mollie_components.dependencies import get_db, get_mollie_client, get_plugin_settings
from mollie_components.models import Base, Customer, PluginSetting, SalesChannel
from mollie_components.mollie.client import MollieApiClient
from mollie_components.schemas import MollieSettingStruct

MOLLIE_PROFILE = {
    "resource": "profile",
    "id": "pfl_QkEhN94Ba",
    "mode": "test",
    "name": "My website name",
    "website": "https://shop.example.org",
    "status": "verified",
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an in-memory database, without a default sales channel."""

    return Settings(
        database_url="sqlite+aiosqlite://",
        default_sales_channel_id=None,
    )


@pytest.fixture
async def test_db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """
    Create a test database engine.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """

    engine = create_async_engine(
        test_settings.get_database_url(),
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db_session(test_db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for a test."""

    async with make_session(test_db_engine) as session:
        yield session


@pytest.fixture
async def sales_channel(test_db_session: AsyncSession) -> SalesChannel:
    """A German storefront with global plugin settings in test mode."""

    channel = SalesChannel(id=uuid.uuid4(), name="Storefront DE", locale_code="de_DE")
    test_db_session.add(channel)
    test_db_session.add(
        PluginSetting(
            sales_channel_id=None,
            test_mode=True,
            live_api_key="live_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM",
            test_api_key="test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM",
        )
    )
    await test_db_session.commit()
    return channel


@pytest.fixture
async def customer(test_db_session: AsyncSession, sales_channel: SalesChannel) -> Customer:
    customer = Customer(
        id=uuid.uuid4(),
        sales_channel_id=sales_channel.id,
        email="jane.doe@example.org",
        first_name="Jane",
        last_name="Doe",
        custom_fields={"newsletter": True},
    )
    test_db_session.add(customer)
    await test_db_session.commit()
    return customer


@pytest.fixture
def mollie_api():
    """
    Mocked Mollie API.

    Replace ``mollie_api.handler`` to change the answer; every request sent
    is recorded in ``mollie_api.requests``.
    """

    state = SimpleNamespace(requests=[])

    def default_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=MOLLIE_PROFILE)

    def dispatch(request: httpx.Request) -> httpx.Response:
        state.requests.append(request)
        return state.handler(request)

    state.handler = default_handler
    state.transport = httpx.MockTransport(dispatch)
    return state


@pytest.fixture
def app(test_settings: Settings, test_db_engine: AsyncEngine, mollie_api):
    """
    Create a FastAPI application instance for testing.

    Overrides the database session, settings and Mollie client dependencies.
    """

    app_instance = initialize_app()

    async def override_get_db():
        async with make_session(test_db_engine) as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def override_get_mollie_client(
        plugin_settings: Annotated[MollieSettingStruct, Depends(get_plugin_settings)],
    ):
        async with MollieApiClient(
            api_key=plugin_settings.api_key,
            transport=mollie_api.transport,
        ) as client:
            yield client

    app_instance.dependency_overrides[get_db] = override_get_db
    app_instance.dependency_overrides[get_settings] = lambda: test_settings
    app_instance.dependency_overrides[get_mollie_client] = override_get_mollie_client

    yield app_instance

    app_instance.dependency_overrides.clear()


@pytest.fixture
async def async_test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for the app.

    Requests go to http://test, so the shop URL rendered into scripts is
    http://test.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
