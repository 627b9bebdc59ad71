import asyncio
import copy
import time
from typing import Any

from ...domain.user import EMAIL_ATTR
from ...metrics import record_store_operation


class InMemoryRecordStore:
    def __init__(self):
        # tables: table name -> {email: item}; dicts keep insertion order
        self.tables: dict[str, dict[str, dict[str, Any]]] = {}
        self.lock = asyncio.Lock()

    async def get_item(self, table: str, key: dict[str, str]) -> dict[str, Any]:
        start = time.time()
        async with self.lock:
            item = self.tables.get(table, {}).get(key[EMAIL_ATTR])
        record_store_operation("get_item", "in_memory", time.time() - start)
        return copy.deepcopy(item) if item else {}

    async def put_item(self, table: str, item: dict[str, Any]) -> None:
        start = time.time()
        async with self.lock:
            rows = self.tables.setdefault(table, {})
            rows[item[EMAIL_ATTR]] = copy.deepcopy(item)
        record_store_operation("put_item", "in_memory", time.time() - start)

    async def scan(self, table: str) -> list[dict[str, Any]]:
        start = time.time()
        async with self.lock:
            items = [copy.deepcopy(i) for i in self.tables.get(table, {}).values()]
        record_store_operation("scan", "in_memory", time.time() - start)
        return items

    async def delete_item(self, table: str, key: dict[str, str]) -> None:
        start = time.time()
        async with self.lock:
            self.tables.get(table, {}).pop(key[EMAIL_ATTR], None)
        record_store_operation("delete_item", "in_memory", time.time() - start)

    async def close(self) -> None:
        return
