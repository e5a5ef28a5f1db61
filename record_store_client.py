"""Record Store API client.

This module defines a small client wrapper around the record endpoints
of the Record Store API.  It mirrors the store's operations over HTTP
so code written against ``RecordStore`` can talk to a remote service
instead:

* :meth:`RecordStoreClient.create` – create a record.
* :meth:`RecordStoreClient.list` – list records with filters and paging.
* :meth:`RecordStoreClient.get` – fetch a single record.
* :meth:`RecordStoreClient.replace` – overwrite a record.
* :meth:`RecordStoreClient.merge` – partially update a record.
* :meth:`RecordStoreClient.delete` – delete a record.

Error responses are raised as the store's own error types
(``NotFoundError``, ``ConflictError``, ``ValidationError``); any other
failure, including transport errors, becomes ``RecordStoreError``.
Responses are returned as plain dictionaries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from record_store_api.app.core.exceptions import (
    ConflictError,
    NotFoundError,
    RecordStoreError,
    ValidationError,
)
from record_store_api.app.schemas.record import normalise_email


logger = logging.getLogger(__name__)


class RecordStoreClient:
    """Client for the ``/api/v1/records`` endpoints."""

    RECORDS_PATH = "/api/v1/records"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session (or anything with the same
                ``request`` signature, such as FastAPI's ``TestClient``).
                A session is created when not supplied.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        record_id: int | None = None,
    ) -> Optional[Any]:
        """Perform an HTTP request and return the parsed JSON body.

        Returns ``None`` for empty responses (e.g. 204 on delete).
        Raises the matching store error for 404, 409, 400 and 422.
        """
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise RecordStoreError(str(exc)) from exc

        if response.status_code >= 400:
            detail = self._error_detail(response)
            logger.error("API request failed (%s): %s", response.status_code, detail)
            if response.status_code == 404:
                raise NotFoundError(record_id if record_id is not None else -1)
            if response.status_code == 409:
                email = json_body.get("email") if isinstance(json_body, dict) else None
                raise ConflictError(normalise_email(email) or "")
            if response.status_code in (400, 422):
                errors = detail if isinstance(detail, list) else []
                raise ValidationError(str(detail), errors)
            raise RecordStoreError(f"Unexpected status {response.status_code}: {detail}")

        if response.content:
            return response.json()
        return None

    @staticmethod
    def _error_detail(response: Any) -> Any:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return body.get("detail") or body.get("message") or body
        return body

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------
    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", f"{self.RECORDS_PATH}/", json_body=fields)

    def list(
        self,
        criteria: Optional[Dict[str, Any]] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Return a page dict with ``items``, ``total``, ``offset`` and ``limit``.

        ``criteria`` may contain ``min_age``, ``max_age``,
        ``name_contains`` and ``email``; ``None`` values are dropped.
        """
        params: Dict[str, Any] = {k: v for k, v in (criteria or {}).items() if v is not None}
        params["offset"] = offset
        if limit is not None:
            params["limit"] = limit
        return self._request("GET", f"{self.RECORDS_PATH}/", params=params)

    def get(self, record_id: int) -> Dict[str, Any]:
        return self._request("GET", f"{self.RECORDS_PATH}/{record_id}", record_id=record_id)

    def replace(self, record_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "PUT", f"{self.RECORDS_PATH}/{record_id}", json_body=fields, record_id=record_id
        )

    def merge(self, record_id: int, partial_fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "PATCH", f"{self.RECORDS_PATH}/{record_id}", json_body=partial_fields, record_id=record_id
        )

    def delete(self, record_id: int) -> None:
        self._request("DELETE", f"{self.RECORDS_PATH}/{record_id}", record_id=record_id)
