from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from user_records.exceptions import StoreError
from user_records.infrastructure.store.dynamodb import DynamoDBRecordStore

ITEM = {"email": "a@b.co", "firstName": "A", "lastName": "B"}


def _store():
    resource = MagicMock()
    table = resource.Table.return_value
    return DynamoDBRecordStore(resource=resource), resource, table


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
        operation,
    )


@pytest.mark.asyncio
async def test_get_item_returns_item():
    store, resource, table = _store()
    table.get_item.return_value = {"Item": ITEM}

    assert await store.get_item("users", {"email": "a@b.co"}) == ITEM
    resource.Table.assert_called_with("users")
    table.get_item.assert_called_once_with(Key={"email": "a@b.co"})


@pytest.mark.asyncio
async def test_get_item_without_item_key_is_a_miss():
    store, _, table = _store()
    table.get_item.return_value = {}
    assert await store.get_item("users", {"email": "a@b.co"}) == {}


@pytest.mark.asyncio
async def test_put_scan_delete_forward_to_table():
    store, _, table = _store()
    table.scan.return_value = {"Items": [ITEM]}

    await store.put_item("users", ITEM)
    assert await store.scan("users") == [ITEM]
    await store.delete_item("users", {"email": "a@b.co"})

    table.put_item.assert_called_once_with(Item=ITEM)
    table.scan.assert_called_once_with()
    table.delete_item.assert_called_once_with(Key={"email": "a@b.co"})


@pytest.mark.asyncio
async def test_scan_with_no_items():
    store, _, table = _store()
    table.scan.return_value = {"Items": []}
    assert await store.scan("users") == []


@pytest.mark.asyncio
async def test_client_errors_become_store_errors():
    store, _, table = _store()
    table.get_item.side_effect = _client_error("GetItem")
    table.delete_item.side_effect = _client_error("DeleteItem")

    with pytest.raises(StoreError) as exc_info:
        await store.get_item("users", {"email": "a@b.co"})
    assert exc_info.value.operation == "get_item"
    assert exc_info.value.table == "users"

    with pytest.raises(StoreError):
        await store.delete_item("users", {"email": "a@b.co"})
