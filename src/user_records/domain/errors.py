from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failures a user record operation can report, with their fixed messages."""

    INVALID_USER_DATA = "invalid user data"
    INVALID_EMAIL = "invalid email"
    USER_ALREADY_EXISTS = "user already exists"
    USER_DOES_NOT_EXIST = "user does not exist"
    FAILED_TO_FETCH_RECORD = "failed to fetch record"
    FAILED_TO_UNMARSHAL_RECORD = "failed to unmarshal record"
    COULD_NOT_PUT_ITEM = "could not update record"
    COULD_NOT_MARSHAL_ITEM = "fail to marshal record"
    FAILED_TO_DELETE_RECORD = "failed to delete record"
    METHOD_NOT_ALLOWED = "method not allowed"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a service call: either a value or an ErrorKind, never both."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "Outcome[T]":
        return cls(error=error)
