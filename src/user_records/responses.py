"""Map service outcomes onto wire responses.

Both the FastAPI routes and the API Gateway handler go through here so the
status codes and body shapes stay identical.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse

from .domain.errors import ErrorKind, Outcome
from .domain.user import UserRecord
from .schemas.user import ErrorResponse, record_to_response

STATUS_OK = 200
STATUS_CREATED = 201
STATUS_METHOD_NOT_ALLOWED = 405
STATUS_INTERNAL_ERROR = 500

JSON_HEADERS = {"Content-Type": "application/json"}


def _jsonable(value: Any) -> Any:
    if isinstance(value, UserRecord):
        return record_to_response(value).model_dump(by_alias=True)
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def error_body(kind: ErrorKind) -> dict[str, str]:
    return ErrorResponse(error=kind.message).model_dump()


def render(outcome: Outcome, success_status: int = STATUS_OK) -> tuple[int, Any]:
    """Return (status, JSON-ready body) for a service outcome.

    Every taxonomy failure becomes a 500 with an ``{"error": message}`` body.
    """
    if not outcome.ok:
        return STATUS_INTERNAL_ERROR, error_body(outcome.error)
    return success_status, _jsonable(outcome.value)


def method_not_allowed() -> tuple[int, Any]:
    return STATUS_METHOD_NOT_ALLOWED, error_body(ErrorKind.METHOD_NOT_ALLOWED)


def encode_body(body: Any) -> str:
    return json.dumps(body)


def to_json_response(outcome: Outcome, success_status: int = STATUS_OK) -> JSONResponse:
    status, body = render(outcome, success_status)
    return JSONResponse(status_code=status, content=body, headers=JSON_HEADERS)
