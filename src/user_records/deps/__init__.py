"""Dependency injection for FastAPI.

- providers: Singleton providers (settings, record store)
- injection: Service and table dependency injection
"""

from .injection import get_table_name, get_user_record_service
from .providers import get_settings, get_store_from_request

__all__ = [
    # Providers
    "get_settings",
    "get_store_from_request",
    # Injection
    "get_table_name",
    "get_user_record_service",
]
