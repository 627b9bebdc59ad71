from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from ..domain.user import UserRecord

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


class UserRecordPayload(BaseModel):
    """Request body for creating or replacing a user record.

    Members that are absent default to "", unknown members are ignored and
    any present member must be a JSON string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: StrictStr = ""
    first_name: StrictStr = Field(default="", alias="firstName")
    last_name: StrictStr = Field(default="", alias="lastName")

    def to_domain(self) -> UserRecord:
        return UserRecord(email=self.email, first_name=self.first_name, last_name=self.last_name)


class UserRecordResponse(BaseModel):
    """Wire representation of a user record (field order email, firstName, lastName)."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class ErrorResponse(BaseModel):
    error: str


def is_email_valid(email: str) -> bool:
    """Check that ``email`` is a bare local-part@domain address."""
    try:
        normalized = _EMAIL_ADAPTER.validate_python(email)
    except ValidationError:
        return False
    # EmailStr strips surrounding whitespace and "Name <addr>" wrappers;
    # the stored key must be the bare address itself
    return normalized.casefold() == email.casefold()


def record_to_response(record: UserRecord) -> UserRecordResponse:
    return UserRecordResponse(
        email=record.email, first_name=record.first_name, last_name=record.last_name
    )
