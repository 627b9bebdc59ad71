"""API Gateway proxy entry point.

Dispatches on the event's ``httpMethod`` with the same semantics and response
shapes as the HTTP routes in ``routers.users``.
"""

import asyncio
import base64
from typing import Any

from .deps.providers import get_settings
from .infrastructure.store import build_store
from .logging_config import get_logger
from .responses import (
    JSON_HEADERS,
    STATUS_CREATED,
    STATUS_OK,
    encode_body,
    method_not_allowed,
    render,
)
from .services.user_record_service import UserRecordService

logger = get_logger(__name__)


def _query_param(event: dict[str, Any], name: str) -> str:
    params = event.get("queryStringParameters") or {}
    return params.get(name) or ""


def _body(event: dict[str, Any]) -> str | bytes:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body


def _proxy_response(status: int, body: Any) -> dict[str, Any]:
    return {"statusCode": status, "headers": dict(JSON_HEADERS), "body": encode_body(body)}


async def handle_event(
    event: dict[str, Any], service: UserRecordService, table: str
) -> dict[str, Any]:
    method = (event.get("httpMethod") or "").upper()
    if method == "GET":
        email = _query_param(event, "email")
        if email:
            status, body = render(await service.fetch_one(email, table), STATUS_OK)
        else:
            status, body = render(await service.fetch_all(table), STATUS_OK)
    elif method == "POST":
        status, body = render(await service.create(_body(event), table), STATUS_CREATED)
    elif method == "PUT":
        status, body = render(await service.update(_body(event), table), STATUS_OK)
    elif method == "DELETE":
        email = _query_param(event, "email")
        status, body = render(await service.delete(email, table), STATUS_OK)
    else:
        logger.info("method_not_allowed", method=method)
        status, body = method_not_allowed()
    return _proxy_response(status, body)


async def _run(event: dict[str, Any]) -> dict[str, Any]:
    settings = get_settings()
    # the store client is bound to this invocation's event loop
    store = build_store(settings)
    try:
        return await handle_event(event, UserRecordService(store), settings.table_name)
    finally:
        await store.close()


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    return asyncio.run(_run(event))
