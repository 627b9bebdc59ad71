"""Singleton providers for application-wide settings and clients.

This module handles lazy initialization of the Settings instance and hands
out the record store wired on the running app.
"""

from typing import Any

from fastapi import Request

from ..config import Settings

# Lazy singleton to avoid import-time side-effects
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def get_store_from_request(request: Request) -> Any:
    """Return the record store attached to app.state by wiring/composition."""
    return request.app.state.record_store
