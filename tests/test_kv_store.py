"""
Tests for the key-value stores.
"""

import pytest

from services.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def kv(request, tmp_path):
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return SqliteKeyValueStore(str(tmp_path / "nested" / "affirm.db"))


class TestKeyValueStore:
    @pytest.mark.asyncio
    async def test_missing_key_is_none(self, kv):
        assert await kv.get("pool-cache") is None

    @pytest.mark.asyncio
    async def test_set_get_overwrite(self, kv):
        await kv.set("pool-cache", "[1]")
        assert await kv.get("pool-cache") == "[1]"

        await kv.set("pool-cache", "[2]")
        assert await kv.get("pool-cache") == "[2]"

    @pytest.mark.asyncio
    async def test_keys_are_independent(self, kv):
        await kv.set("pool-cache", "pool")
        await kv.set("daily-selection-cache", "daily")

        assert await kv.get("pool-cache") == "pool"
        assert await kv.get("daily-selection-cache") == "daily"

    @pytest.mark.asyncio
    async def test_delete(self, kv):
        await kv.set("daily-selection-cache", "x")
        await kv.delete("daily-selection-cache")
        await kv.delete("never-set")

        assert await kv.get("daily-selection-cache") is None

    @pytest.mark.asyncio
    async def test_unicode_round_trip(self, kv):
        await kv.set("k", "Je suis calme \U0001F30A")
        assert await kv.get("k") == "Je suis calme \U0001F30A"


@pytest.mark.asyncio
async def test_sqlite_store_persists_across_instances(tmp_path):
    path = str(tmp_path / "affirm.db")
    await SqliteKeyValueStore(path).set("pool-cache", "persisted")

    assert await SqliteKeyValueStore(path).get("pool-cache") == "persisted"
