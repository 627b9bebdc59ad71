from types import SimpleNamespace

import pytest

from user_records.infrastructure.store import InMemoryRecordStore
from user_records.services.user_record_service import UserRecordService


@pytest.fixture
def store():
    """Return an empty InMemoryRecordStore for tests."""
    return InMemoryRecordStore()


@pytest.fixture
def service(store):
    return UserRecordService(store)


@pytest.fixture
def test_app(store):
    """Create an app wired to the in-memory store fixture.

    Yields (client, store); tests build an httpx.ASGITransport from client.app.
    """
    from user_records.wiring import create_app

    app = create_app(store=store)
    yield SimpleNamespace(app=app), store
