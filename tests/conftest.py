from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from record_store_api.app.core.config import Settings
from record_store_api.app.main import create_app
from record_store_api.app.services.record_service import RecordStore


class TickingClock:
    """Returns a new timestamp one second later on every call."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def settings():
    return Settings(project_name="Record Store Test", api_version="9.9.9", default_page_limit=10)


@pytest.fixture
def store(clock, settings):
    return RecordStore(clock=clock, default_limit=settings.default_page_limit)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def john():
    return {"name": "John", "email": "j@x.com", "age": 30}


@pytest.fixture
def jane():
    return {"name": "Jane", "email": "jane@x.com", "age": 25}
