from pydantic import ValidationError

from ..domain.errors import ErrorKind, Outcome
from ..domain.user import RecordDecodeError, RecordEncodeError, UserRecord, key_for
from ..exceptions import StoreError
from ..logging_config import get_logger
from ..metrics import RECORD_OUTCOMES
from ..ports.store import RecordStore
from ..schemas.user import UserRecordPayload, is_email_valid

logger = get_logger(__name__)


def _count(operation: str, outcome: Outcome) -> Outcome:
    result = "ok" if outcome.ok else outcome.error.name.lower()
    RECORD_OUTCOMES.labels(operation=operation, result=result).inc()
    return outcome


def parse_and_validate(raw_body: str | bytes, require_valid_email: bool) -> Outcome[UserRecord]:
    """Decode a raw request body into a UserRecord.

    Malformed JSON, a non-object document or a non-string member fails with
    INVALID_USER_DATA. The email format is only checked when
    ``require_valid_email`` is set (the create path).
    """
    try:
        record = UserRecordPayload.model_validate_json(raw_body or b"").to_domain()
    except ValidationError:
        return Outcome.failure(ErrorKind.INVALID_USER_DATA)
    if require_valid_email and not is_email_valid(record.email):
        return Outcome.failure(ErrorKind.INVALID_EMAIL)
    return Outcome.success(record)


class UserRecordService:
    """Create, read, replace and delete user records keyed by email.

    Every operation issues its store calls directly and reports failures as
    an ``Outcome`` carrying an ``ErrorKind``; store exceptions never escape.
    The service keeps no state between calls.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    async def fetch_one(self, email: str, table: str) -> Outcome[UserRecord]:
        """Look up one record. A miss yields a record whose fields are all empty."""
        return _count("fetch_one", await self._lookup(email, table))

    async def fetch_all(self, table: str) -> Outcome[list[UserRecord]]:
        try:
            items = await self.store.scan(table)
        except StoreError as e:
            logger.warning("user_record_scan_failed", table=table, error=str(e))
            return _count("fetch_all", Outcome.failure(ErrorKind.FAILED_TO_FETCH_RECORD))
        try:
            records = [UserRecord.from_item(i) for i in items]
        except RecordDecodeError as e:
            logger.warning("user_record_decode_failed", table=table, error=str(e))
            return _count("fetch_all", Outcome.failure(ErrorKind.FAILED_TO_UNMARSHAL_RECORD))
        return _count("fetch_all", Outcome.success(records))

    async def create(self, raw_body: str | bytes, table: str) -> Outcome[UserRecord]:
        parsed = parse_and_validate(raw_body, require_valid_email=True)
        if not parsed.ok:
            logger.info("user_record_create_rejected", reason=parsed.error.message)
            return _count("create", parsed)
        record = parsed.value

        existing = await self._lookup(record.email, table)
        # any lookup failure, decode errors included, is reported as a fetch failure here
        if not existing.ok:
            return _count("create", Outcome.failure(ErrorKind.FAILED_TO_FETCH_RECORD))
        if existing.value.exists:
            logger.info("user_record_create_rejected", reason="exists", email=record.email)
            return _count("create", Outcome.failure(ErrorKind.USER_ALREADY_EXISTS))

        # no conditional write: two concurrent creates can both land, last one wins
        saved = await self._put(record, table)
        if saved.ok:
            logger.info("user_record_created", table=table, email=record.email)
        return _count("create", saved)

    async def update(self, raw_body: str | bytes, table: str) -> Outcome[UserRecord]:
        parsed = parse_and_validate(raw_body, require_valid_email=False)
        if not parsed.ok:
            logger.info("user_record_update_rejected", reason=parsed.error.message)
            return _count("update", parsed)
        record = parsed.value

        existing = await self._lookup(record.email, table)
        # unlike create, the lookup failure is passed through unchanged
        if not existing.ok:
            return _count("update", existing)
        if not existing.value.exists:
            logger.info("user_record_update_rejected", reason="missing", email=record.email)
            return _count("update", Outcome.failure(ErrorKind.USER_DOES_NOT_EXIST))

        saved = await self._put(record, table)
        if saved.ok:
            logger.info("user_record_updated", table=table, email=record.email)
        return _count("update", saved)

    async def delete(self, email: str, table: str) -> Outcome[None]:
        """Delete by key. Deleting an absent record succeeds."""
        try:
            await self.store.delete_item(table, key_for(email))
        except StoreError as e:
            logger.warning("user_record_delete_failed", table=table, error=str(e))
            return _count("delete", Outcome.failure(ErrorKind.FAILED_TO_DELETE_RECORD))
        logger.info("user_record_deleted", table=table, email=email)
        return _count("delete", Outcome.success(None))

    async def _put(self, record: UserRecord, table: str) -> Outcome[UserRecord]:
        try:
            item = record.to_item()
        except RecordEncodeError:
            return Outcome.failure(ErrorKind.COULD_NOT_MARSHAL_ITEM)
        try:
            await self.store.put_item(table, item)
        except StoreError as e:
            logger.warning("user_record_put_failed", table=table, error=str(e))
            return Outcome.failure(ErrorKind.COULD_NOT_PUT_ITEM)
        return Outcome.success(record)

    async def _lookup(self, email: str, table: str) -> Outcome[UserRecord]:
        try:
            item = await self.store.get_item(table, key_for(email))
        except StoreError as e:
            logger.warning("user_record_fetch_failed", table=table, error=str(e))
            return Outcome.failure(ErrorKind.FAILED_TO_FETCH_RECORD)
        try:
            record = UserRecord.from_item(item)
        except RecordDecodeError as e:
            logger.warning("user_record_decode_failed", table=table, error=str(e))
            return Outcome.failure(ErrorKind.FAILED_TO_UNMARSHAL_RECORD)
        return Outcome.success(record)
