"""
Error types raised by the record store.

Every store operation fails with exactly one of three kinds of error,
all deriving from ``RecordStoreError``.  None of them leaves the store
in a changed state and none is retried internally; the caller decides
what to do next.  The HTTP layer maps them to 422, 409 and 404
responses.
"""

from typing import Any, Dict, List, Optional


class RecordStoreError(Exception):
    """Base class for record store failures."""


class ValidationError(RecordStoreError):
    """Input is missing, malformed or out of range.

    ``errors`` holds one ``{"loc": [...], "msg": "..."}`` entry per
    offending field so that callers can report all problems at once.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConflictError(RecordStoreError):
    """Another live record already uses the given email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already in use")
        self.email = email


class NotFoundError(RecordStoreError):
    """No live record has the given identifier."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Record {record_id} not found")
        self.record_id = record_id
