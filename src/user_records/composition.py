from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI

from .config import Settings
from .infrastructure.store import build_store
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class WireResult:
    app: Any
    store: Any
    teardown: Any


async def wire_app(app: FastAPI, settings: Settings | None = None) -> WireResult:
    """Build the configured record store and attach it to ``app.state``.

    Must not run at import time: tests set environment variables before any
    store client is created.
    """
    if settings is None:
        settings = Settings()  # type: ignore[call-arg]
    configure_logging(settings.log_level)

    store = build_store(settings)
    app.state.record_store = store
    logger.info(
        "initialized record store",
        backend=settings.store_backend,
        table=settings.table_name,
    )

    async def _teardown():
        current = getattr(app.state, "record_store", None)
        if current is not None:
            await current.close()
        logger.info("record store closed", backend=settings.store_backend)

    return WireResult(app=app, store=store, teardown=_teardown)
