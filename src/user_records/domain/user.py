from dataclasses import dataclass
from typing import Any, Mapping

# attribute names as stored and as sent over the wire
EMAIL_ATTR = "email"
FIRST_NAME_ATTR = "firstName"
LAST_NAME_ATTR = "lastName"


class RecordDecodeError(ValueError):
    """A stored item could not be turned into a UserRecord."""


class RecordEncodeError(ValueError):
    """A UserRecord could not be turned into a store item."""


@dataclass(frozen=True)
class UserRecord:
    email: str = ""
    first_name: str = ""
    last_name: str = ""

    @property
    def exists(self) -> bool:
        # an empty email is how a lookup miss is represented
        return len(self.email) != 0

    def key(self) -> dict[str, str]:
        return {EMAIL_ATTR: self.email}

    def to_item(self) -> dict[str, str]:
        item = {
            EMAIL_ATTR: self.email,
            FIRST_NAME_ATTR: self.first_name,
            LAST_NAME_ATTR: self.last_name,
        }
        for name, value in item.items():
            if not isinstance(value, str):
                raise RecordEncodeError(f"attribute {name} is not a string")
        return item

    @classmethod
    def from_item(cls, item: Mapping[str, Any] | None) -> "UserRecord":
        """Build a record from a store item; missing attributes become ""."""
        if item is None:
            return cls()
        if not isinstance(item, Mapping):
            raise RecordDecodeError(f"item has type {type(item).__name__}, expected a mapping")
        if not item:
            return cls()
        values = {}
        for name in (EMAIL_ATTR, FIRST_NAME_ATTR, LAST_NAME_ATTR):
            value = item.get(name, "")
            if not isinstance(value, str):
                raise RecordDecodeError(f"attribute {name} has type {type(value).__name__}")
            values[name] = value
        return cls(
            email=values[EMAIL_ATTR],
            first_name=values[FIRST_NAME_ATTR],
            last_name=values[LAST_NAME_ATTR],
        )


def key_for(email: str) -> dict[str, str]:
    return {EMAIL_ATTR: email}
