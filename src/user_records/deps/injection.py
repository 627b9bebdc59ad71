"""Dependency injection functions for FastAPI.

This module provides FastAPI Depends() functions for the record store, the
user record service and the target table.
"""

from fastapi import Depends

from ..config import Settings
from ..ports.store import RecordStore
from ..services.user_record_service import UserRecordService
from .providers import get_settings, get_store_from_request


def get_table_name(settings: Settings = Depends(get_settings)) -> str:
    return settings.table_name


async def get_user_record_service(
    store: RecordStore = Depends(get_store_from_request),
) -> UserRecordService:
    return UserRecordService(store)
