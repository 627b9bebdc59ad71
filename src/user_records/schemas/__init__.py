"""Schema exports for API request/response models."""

from .user import (
    ErrorResponse,
    UserRecordPayload,
    UserRecordResponse,
    is_email_valid,
    record_to_response,
)

__all__ = [
    "UserRecordPayload",
    "UserRecordResponse",
    "ErrorResponse",
    "is_email_valid",
    "record_to_response",
]
