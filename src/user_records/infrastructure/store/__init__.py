"""Record store adapters.

Call `build_store(settings)` to obtain the adapter selected by configuration.
"""

from .memory import InMemoryRecordStore


def build_store(settings):
    """Return the record store adapter named by ``settings.store_backend``."""
    backend = settings.store_backend.lower()
    if backend == "memory":
        return InMemoryRecordStore()
    if backend == "redis":
        # import concrete adapters lazily so the memory backend needs neither client
        from .redis_store import RedisRecordStore

        return RedisRecordStore(settings.redis_url)
    if backend == "dynamodb":
        from .dynamodb import DynamoDBRecordStore

        return DynamoDBRecordStore(
            region_name=settings.aws_region or None,
            endpoint_url=settings.dynamodb_endpoint_url or None,
        )
    raise ValueError(f"unknown store backend: {settings.store_backend}")


__all__ = ["InMemoryRecordStore", "build_store"]
