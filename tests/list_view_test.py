"""Tests for the secret list."""

import asyncio

import pytest

from secret_manager.exceptions import StoreError
from secret_manager.list_view import SecretListView, SecretRow, summarize
from secret_manager.models import Secret

from .support.store import MockSecretStore


def test_summarize() -> None:
    assert summarize({}) == "No data"
    assert summarize({"user": "a"}) == "user: a"
    data = {"user": "a", "pass": "b", "host": "db"}
    summary = summarize(data)
    assert summary == "user: a, pass: b, host: db"
    assert not summary.endswith(", ")
    for key in data:
        assert summary.count(f"{key}: ") == 1


def test_row_first_pair() -> None:
    row = SecretRow.from_secret(Secret(name="x", namespace="sman", data={"user": "a", "pass": "b"}))
    assert (row.name, row.first_key, row.first_value) == ("x", "user", "a")
    assert row.summary == "user: a, pass: b"

    row = SecretRow.from_secret(Secret(name="empty", namespace="sman"))
    assert (row.first_key, row.first_value) == ("", "")
    assert row.summary == "No data"


@pytest.mark.asyncio
async def test_load(list_view: SecretListView, mock_store: MockSecretStore) -> None:
    assert await list_view.load() == []

    mock_store.add("sman", "db-pass", {"user": "a"})
    mock_store.add("sman", "api-key", {})
    rows = await list_view.load()
    assert [r.name for r in rows] == ["db-pass", "api-key"]
    assert list_view.rows == rows
    assert list_view.find("api-key").summary == "No data"
    assert list_view.find("nope") is None


@pytest.mark.asyncio
async def test_load_failure_keeps_rows(list_view: SecretListView, mock_store: MockSecretStore) -> None:
    mock_store.add("sman", "db-pass", {"user": "a"})
    rows = await list_view.load()

    mock_store.fail_next(500, "Error fetching secrets: boom")
    with pytest.raises(StoreError):
        await list_view.load()
    assert list_view.rows == rows


class SlowStore:
    """Store whose list calls wait until released, in any order."""

    def __init__(self) -> None:
        self.pending: list[tuple[asyncio.Event, list[Secret]]] = []

    async def list_secrets(self, namespace: str) -> list[Secret]:
        event = asyncio.Event()
        result: list[Secret] = []
        self.pending.append((event, result))
        await event.wait()
        return result

    def release(self, index: int, secrets: list[Secret]) -> None:
        event, result = self.pending[index]
        result.extend(secrets)
        event.set()


@pytest.mark.asyncio
async def test_stale_load_discarded() -> None:
    store = SlowStore()
    list_view = SecretListView(store, "sman")  # type: ignore[arg-type]

    first = asyncio.create_task(list_view.load())
    second = asyncio.create_task(list_view.load())
    await asyncio.sleep(0)
    assert len(store.pending) == 2

    store.release(1, [Secret(name="new", namespace="sman")])
    rows = await second
    assert [r.name for r in rows] == ["new"]

    store.release(0, [Secret(name="old", namespace="sman")])
    rows = await first
    assert [r.name for r in rows] == ["new"]
    assert [r.name for r in list_view.rows] == ["new"]
