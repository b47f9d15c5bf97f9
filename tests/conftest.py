"""Test fixtures for the secret manager."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
import respx
from httpx import ASGITransport, AsyncClient

from secret_manager.config import NAMESPACE, STORE_URL
from secret_manager.controller import SecretEditController
from secret_manager.list_view import SecretListView
from secret_manager.store import SecretStoreClient, store_client

from .support.store import MockSecretStore, register_mock_store


@pytest.fixture
def mock_store(respx_mock: respx.Router) -> MockSecretStore:
    return register_mock_store(respx_mock, STORE_URL)


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[AsyncClient]:
    async with store_client(STORE_URL) as client:
        yield client


@pytest.fixture
def store(http_client: AsyncClient) -> SecretStoreClient:
    return SecretStoreClient(http_client=http_client)


@pytest.fixture
def list_view(store: SecretStoreClient) -> SecretListView:
    return SecretListView(store, NAMESPACE)


@pytest.fixture
def controller(store: SecretStoreClient, list_view: SecretListView) -> SecretEditController:
    return SecretEditController(store, list_view)


@pytest_asyncio.fixture
async def client(
    mock_store: MockSecretStore, monkeypatch: pytest.MonkeyPatch
) -> AsyncIterator[AsyncClient]:
    """Return an HTTP client talking to the web app.

    The app is imported here so that it is only built once the store is
    mocked. Each test gets an empty secret list so rows loaded by earlier
    tests never show up.
    """
    import main
    from main import app

    monkeypatch.setattr(main, "list_view", SecretListView(main.store, NAMESPACE))

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="https://example.com",
        headers={"HX-Request": "true"},
    ) as client:
        yield client
