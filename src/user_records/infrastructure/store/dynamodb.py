import time
from typing import Any

import boto3
from anyio import to_thread
from botocore.exceptions import BotoCoreError, ClientError

from ...exceptions import StoreError
from ...logging_config import get_logger
from ...metrics import record_store_operation

logger = get_logger(__name__)


class DynamoDBRecordStore:
    """Record store backed by DynamoDB tables.

    boto3 is blocking, so each call runs in a worker thread. Scans issue a
    single request and do not follow ``LastEvaluatedKey``.
    """

    def __init__(
        self,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        resource: Any = None,
    ):
        if resource is None:
            resource = boto3.resource(
                "dynamodb", region_name=region_name, endpoint_url=endpoint_url
            )
        self.resource = resource

    async def _call(self, operation: str, table: str, fn, **kwargs) -> dict[str, Any]:
        start = time.time()
        try:
            result = await to_thread.run_sync(lambda: fn(**kwargs))
        except (BotoCoreError, ClientError) as e:
            record_store_operation(operation, "dynamodb", time.time() - start, failed=True)
            logger.warning(
                "dynamodb_store_operation_failed", operation=operation, table=table, error=str(e)
            )
            raise StoreError(operation, table, e) from e
        record_store_operation(operation, "dynamodb", time.time() - start)
        return result or {}

    async def get_item(self, table: str, key: dict[str, str]) -> dict[str, Any]:
        result = await self._call("get_item", table, self.resource.Table(table).get_item, Key=key)
        return result.get("Item") or {}

    async def put_item(self, table: str, item: dict[str, Any]) -> None:
        await self._call("put_item", table, self.resource.Table(table).put_item, Item=item)

    async def scan(self, table: str) -> list[dict[str, Any]]:
        result = await self._call("scan", table, self.resource.Table(table).scan)
        return list(result.get("Items") or [])

    async def delete_item(self, table: str, key: dict[str, str]) -> None:
        await self._call("delete_item", table, self.resource.Table(table).delete_item, Key=key)

    async def close(self) -> None:
        return
