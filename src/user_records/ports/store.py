from typing import Any, Protocol


class RecordStore(Protocol):
    """Protocol for the key-value store holding user records.

    Items and keys are plain attribute maps. Implementations raise
    ``StoreError`` when the backend call fails.
    """

    async def get_item(self, table: str, key: dict[str, str]) -> dict[str, Any]: ...

    async def put_item(self, table: str, item: dict[str, Any]) -> None: ...

    async def scan(self, table: str) -> list[dict[str, Any]]: ...

    async def delete_item(self, table: str, key: dict[str, str]) -> None: ...
