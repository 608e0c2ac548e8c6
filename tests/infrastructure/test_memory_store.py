"""In-Memory Store — ordering and copy isolation."""

from parcel_ledger.infrastructure.memory_store import InMemoryStore


async def test_get_missing_is_none():
    assert await InMemoryStore().get("nope") is None


async def test_values_ordered_by_key():
    store = InMemoryStore()
    for key in ("b", "c", "a"):
        await store.insert(key, {"k": key})
    assert [v["k"] for v in await store.values()] == ["a", "b", "c"]


async def test_returned_dicts_are_copies():
    store = InMemoryStore()
    record = {"history": [1]}
    await store.insert("k", record)
    record["history"].append(2)
    fetched = await store.get("k")
    fetched["history"].append(3)
    assert await store.get("k") == {"history": [1]}


async def test_contains_and_len():
    store = InMemoryStore()
    await store.insert("k", {})
    assert await store.contains("k")
    assert len(store) == 1
    assert await store.health_check()
