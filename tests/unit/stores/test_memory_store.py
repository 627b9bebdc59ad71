import pytest

from user_records.infrastructure.store import InMemoryRecordStore


@pytest.mark.asyncio
async def test_get_missing_returns_empty_item():
    store = InMemoryRecordStore()
    assert await store.get_item("users", {"email": "a@b.co"}) == {}


@pytest.mark.asyncio
async def test_put_overwrites_and_scan_keeps_insertion_order():
    store = InMemoryRecordStore()
    await store.put_item("users", {"email": "b@x.io", "firstName": "B", "lastName": ""})
    await store.put_item("users", {"email": "a@x.io", "firstName": "A", "lastName": ""})
    await store.put_item("users", {"email": "b@x.io", "firstName": "B2", "lastName": ""})

    items = await store.scan("users")
    assert [i["email"] for i in items] == ["b@x.io", "a@x.io"]
    assert items[0]["firstName"] == "B2"


@pytest.mark.asyncio
async def test_tables_are_isolated():
    store = InMemoryRecordStore()
    await store.put_item("one", {"email": "a@x.io"})
    assert await store.scan("two") == []
    assert await store.get_item("two", {"email": "a@x.io"}) == {}


@pytest.mark.asyncio
async def test_returned_items_are_copies():
    store = InMemoryRecordStore()
    await store.put_item("users", {"email": "a@x.io", "firstName": "A"})
    item = await store.get_item("users", {"email": "a@x.io"})
    item["firstName"] = "changed"
    assert (await store.get_item("users", {"email": "a@x.io"}))["firstName"] == "A"


@pytest.mark.asyncio
async def test_delete_missing_key_is_a_no_op():
    store = InMemoryRecordStore()
    await store.delete_item("users", {"email": "ghost@x.io"})
    await store.put_item("users", {"email": "a@x.io"})
    await store.delete_item("users", {"email": "a@x.io"})
    assert await store.scan("users") == []
