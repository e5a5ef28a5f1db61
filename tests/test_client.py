"""Tests for ``RecordStoreClient`` driven through FastAPI's TestClient."""

import subprocess
import sys
import textwrap
from pathlib import Path

import pytest
import requests

from record_store_api.app.core.exceptions import (
    ConflictError,
    NotFoundError,
    RecordStoreError,
    ValidationError,
)
from record_store_client import RecordStoreClient


@pytest.fixture
def api(client):
    return RecordStoreClient(base_url="http://testserver/", session=client)


def test_client_crud_cycle(api, john):
    created = api.create(john)
    assert created["id"] == 1

    assert api.get(1)["email"] == "j@x.com"
    assert api.merge(1, {"age": 31})["age"] == 31
    replaced = api.replace(1, {"name": "Johnny"})
    assert replaced["email"] is None

    assert api.delete(1) is None
    with pytest.raises(NotFoundError) as excinfo:
        api.get(1)
    assert excinfo.value.record_id == 1


def test_client_list_passes_filters_and_paging(api):
    for name, age in [("Alice", 20), ("Bob", 40), ("Alina", 45), ("Carl", 50)]:
        api.create({"name": name, "age": age})
    page = api.list({"min_age": 30, "name_contains": None}, offset=1, limit=1)
    assert page["total"] == 3
    assert [r["name"] for r in page["items"]] == ["Alina"]


def test_client_raises_conflict(api, john):
    api.create(john)
    with pytest.raises(ConflictError) as excinfo:
        api.create({"name": "Clone", "email": " J@X.com "})
    assert excinfo.value.email == "j@x.com"


def test_client_raises_validation_error(api):
    with pytest.raises(ValidationError) as excinfo:
        api.create({"name": "A", "age": 500})
    assert excinfo.value.errors


class _BrokenSession:
    def request(self, *args, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_client_wraps_transport_errors():
    api = RecordStoreClient(base_url="http://nowhere", session=_BrokenSession())
    with pytest.raises(RecordStoreError):
        api.get(1)


def test_importing_client_does_not_build_server_app():
    script = textwrap.dedent(
        """
        import logging, sys
        import record_store_client
        print(len(logging.getLogger().handlers), "record_store_api.app.main" in sys.modules)
        """
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=Path(__file__).resolve().parent.parent,
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.split() == ["0", "False"]
