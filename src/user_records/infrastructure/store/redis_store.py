import json
import time
from typing import Any

import redis.asyncio as redis_asyncio
from redis.exceptions import RedisError

from ...domain.user import EMAIL_ATTR
from ...exceptions import StoreError
from ...logging_config import get_logger
from ...metrics import record_store_operation

logger = get_logger(__name__)


class RedisRecordStore:
    """Record store keeping each table in one Redis hash.

    Hash field is the record email, hash value the JSON-encoded item.
    """

    def __init__(self, url: str | None = None, client: Any = None):
        if client is None:
            if not url:
                raise ValueError("redis_url is required for the redis store backend")
            client = redis_asyncio.from_url(url, decode_responses=False)
        self.client = client

    def _fail(self, operation: str, table: str, start: float, exc: Exception) -> StoreError:
        record_store_operation(operation, "redis", time.time() - start, failed=True)
        logger.warning(
            "redis_store_operation_failed", operation=operation, table=table, error=str(exc)
        )
        return StoreError(operation, table, exc)

    async def get_item(self, table: str, key: dict[str, str]) -> dict[str, Any]:
        start = time.time()
        try:
            raw = await self.client.hget(table, key[EMAIL_ATTR])
            item = json.loads(raw) if raw else {}
        except (RedisError, ValueError) as e:
            raise self._fail("get_item", table, start, e) from e
        record_store_operation("get_item", "redis", time.time() - start)
        return item

    async def put_item(self, table: str, item: dict[str, Any]) -> None:
        start = time.time()
        try:
            await self.client.hset(table, item[EMAIL_ATTR], json.dumps(item))
        except RedisError as e:
            raise self._fail("put_item", table, start, e) from e
        record_store_operation("put_item", "redis", time.time() - start)

    async def scan(self, table: str) -> list[dict[str, Any]]:
        start = time.time()
        try:
            values = await self.client.hvals(table)
            items = [json.loads(v) for v in values]
        except (RedisError, ValueError) as e:
            raise self._fail("scan", table, start, e) from e
        record_store_operation("scan", "redis", time.time() - start)
        return items

    async def delete_item(self, table: str, key: dict[str, str]) -> None:
        start = time.time()
        try:
            await self.client.hdel(table, key[EMAIL_ATTR])
        except RedisError as e:
            raise self._fail("delete_item", table, start, e) from e
        record_store_operation("delete_item", "redis", time.time() - start)

    async def close(self) -> None:
        await self.client.aclose()
