import json
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from user_records.exceptions import StoreError
from user_records.infrastructure.store.redis_store import RedisRecordStore

ITEM = {"email": "a@b.co", "firstName": "A", "lastName": "B"}


@pytest.mark.asyncio
async def test_get_item_decodes_hash_value():
    client = AsyncMock()
    client.hget.return_value = json.dumps(ITEM).encode()
    store = RedisRecordStore(client=client)

    assert await store.get_item("users", {"email": "a@b.co"}) == ITEM
    client.hget.assert_awaited_once_with("users", "a@b.co")


@pytest.mark.asyncio
async def test_get_item_miss_returns_empty_item():
    client = AsyncMock()
    client.hget.return_value = None
    store = RedisRecordStore(client=client)
    assert await store.get_item("users", {"email": "a@b.co"}) == {}


@pytest.mark.asyncio
async def test_put_item_writes_json_under_email_field():
    client = AsyncMock()
    store = RedisRecordStore(client=client)
    await store.put_item("users", ITEM)
    client.hset.assert_awaited_once_with("users", "a@b.co", json.dumps(ITEM))


@pytest.mark.asyncio
async def test_scan_decodes_every_value():
    client = AsyncMock()
    client.hvals.return_value = [json.dumps(ITEM).encode(), json.dumps({"email": "c@d.io"})]
    store = RedisRecordStore(client=client)
    assert await store.scan("users") == [ITEM, {"email": "c@d.io"}]


@pytest.mark.asyncio
async def test_delete_item_removes_field():
    client = AsyncMock()
    store = RedisRecordStore(client=client)
    await store.delete_item("users", {"email": "a@b.co"})
    client.hdel.assert_awaited_once_with("users", "a@b.co")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,op",
    [("hget", "get_item"), ("hset", "put_item"), ("hvals", "scan"), ("hdel", "delete_item")],
)
async def test_redis_errors_become_store_errors(method, op):
    client = AsyncMock()
    getattr(client, method).side_effect = RedisConnectionError("down")
    store = RedisRecordStore(client=client)

    args = {
        "get_item": ("users", {"email": "a@b.co"}),
        "put_item": ("users", ITEM),
        "scan": ("users",),
        "delete_item": ("users", {"email": "a@b.co"}),
    }[op]
    with pytest.raises(StoreError) as exc_info:
        await getattr(store, op)(*args)
    assert exc_info.value.operation == op
    assert isinstance(exc_info.value.cause, RedisConnectionError)


@pytest.mark.asyncio
async def test_corrupt_value_is_a_store_error():
    client = AsyncMock()
    client.hget.return_value = b"{not json"
    store = RedisRecordStore(client=client)
    with pytest.raises(StoreError):
        await store.get_item("users", {"email": "a@b.co"})


def test_url_required_without_client():
    with pytest.raises(ValueError):
        RedisRecordStore()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", [b"5", b'"x"', b"[1, 2]"])
async def test_non_object_value_is_reported_as_unmarshal_failure(raw):
    from user_records.domain.errors import ErrorKind
    from user_records.services.user_record_service import UserRecordService

    client = AsyncMock()
    client.hget.return_value = raw
    client.hvals.return_value = [raw]
    svc = UserRecordService(RedisRecordStore(client=client))

    assert (await svc.fetch_one("a@b.co", "users")).error is ErrorKind.FAILED_TO_UNMARSHAL_RECORD
    assert (await svc.fetch_all("users")).error is ErrorKind.FAILED_TO_UNMARSHAL_RECORD
