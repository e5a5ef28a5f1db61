"""
Business logic for records.

``RecordStore`` keeps records in memory and implements the six
operations of the store contract: ``create``, ``list``, ``get``,
``replace``, ``merge`` and ``delete``.  Inputs are plain mappings (or
the pydantic input schemas) and outputs are immutable ``RecordRead``
snapshots, so any caller (HTTP handler, test, another transport) can
use the store directly.

Identifiers come from a counter that only ever moves forward; a
deleted record's identifier is never handed out again.  Emails are
kept unique among live records through an email-to-id index.

All state is guarded by one re-entrant lock.  FastAPI runs sync
endpoints in a thread pool, so concurrent requests reach the store
from several threads at once.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..schemas.record import (
    RecordCreate,
    RecordFilter,
    RecordPage,
    RecordRead,
    RecordReplace,
    RecordUpdate,
)

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)
Fields = Union[Mapping[str, Any], BaseModel]

DEFAULT_PAGE_LIMIT = 50


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate(schema: Type[SchemaT], fields: Any) -> SchemaT:
    """Validate caller input against ``schema``.

    pydantic models are dumped with ``exclude_unset`` first so that a
    partial update keeps track of which fields the caller actually sent.
    pydantic's own error is converted into the store's
    ``ValidationError``.
    """
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(fields)
    except PydanticValidationError as exc:
        errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
        raise ValidationError("Invalid record fields", errors) from exc


class RecordStore:
    """In-memory, insertion-ordered store of records."""

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        default_limit: int = DEFAULT_PAGE_LIMIT,
    ) -> None:
        self._records: Dict[int, RecordRead] = {}
        self._ids_by_email: Dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        self._clock = clock or _utcnow
        self.default_limit = default_limit

    # ------------------------------------------------------------------
    # Contract operations
    # ------------------------------------------------------------------
    def create(self, fields: Fields) -> RecordRead:
        """Validate ``fields``, assign the next identifier and store the record.

        Raises ``ValidationError`` for missing or malformed fields and
        ``ConflictError`` when the email belongs to a live record.  The
        identifier counter only advances when the record is stored.
        """
        data = _validate(RecordCreate, fields)
        with self._lock:
            self._ensure_email_free(data.email)
            record_id = self._next_id
            now = self._clock()
            record = RecordRead(id=record_id, created_at=now, updated_at=now, **data.model_dump())
            self._next_id += 1
            self._records[record_id] = record
            if record.email is not None:
                self._ids_by_email[record.email] = record_id
        logger.info("Created record %s", record_id)
        return record

    def list(
        self,
        criteria: Union[RecordFilter, Mapping[str, Any], None] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> RecordPage:
        """Return one page of the records matching every criterion.

        Records come back in insertion order.  ``total`` counts all
        matches before the page is cut.  An empty result is not an
        error; a negative ``offset`` or a ``limit`` below one is.
        """
        if criteria is None:
            criteria = RecordFilter()
        elif not isinstance(criteria, RecordFilter):
            criteria = _validate(RecordFilter, criteria)
        if limit is None:
            limit = self.default_limit
        errors = []
        if not isinstance(offset, int) or isinstance(offset, bool) or offset < 0:
            errors.append({"loc": ["offset"], "msg": "Offset must be a non-negative integer"})
        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
            errors.append({"loc": ["limit"], "msg": "Limit must be a positive integer"})
        if errors:
            raise ValidationError("Invalid pagination bounds", errors)

        with self._lock:
            matches = [record for record in self._records.values() if criteria.matches(record)]
        return RecordPage(
            items=matches[offset:offset + limit],
            total=len(matches),
            offset=offset,
            limit=limit,
        )

    def get(self, record_id: int) -> RecordRead:
        """Return the live record with ``record_id`` or raise ``NotFoundError``."""
        with self._lock:
            return self._get_live(record_id)

    def replace(self, record_id: int, fields: Fields) -> RecordRead:
        """Overwrite every mutable field of a record.

        Optional fields missing from ``fields`` are cleared.  Keeping the
        record's own email is not a conflict.
        """
        with self._lock:
            current = self._get_live(record_id)
            data = _validate(RecordReplace, fields)
            self._ensure_email_free(data.email, record_id)
            updated = current.model_copy(update={**data.model_dump(), "updated_at": self._clock()})
            self._put(current, updated)
        logger.info("Replaced record %s", record_id)
        return updated

    def merge(self, record_id: int, partial_fields: Fields) -> RecordRead:
        """Apply only the fields present in ``partial_fields``.

        An empty payload leaves the record (and its ``updated_at``)
        untouched.
        """
        with self._lock:
            current = self._get_live(record_id)
            data = _validate(RecordUpdate, partial_fields)
            changes = data.model_dump(exclude_unset=True)
            if not changes:
                return current
            if "email" in changes:
                self._ensure_email_free(changes["email"], record_id)
            changes["updated_at"] = self._clock()
            updated = current.model_copy(update=changes)
            self._put(current, updated)
        logger.info("Merged fields %s into record %s", sorted(changes), record_id)
        return updated

    def delete(self, record_id: int) -> None:
        """Remove a record.  Its identifier is retired, its email freed."""
        with self._lock:
            current = self._get_live(record_id)
            del self._records[record_id]
            if current.email is not None:
                self._ids_by_email.pop(current.email, None)
        logger.info("Deleted record %s", record_id)

    def count(self) -> int:
        """Number of live records."""
        with self._lock:
            return len(self._records)

    # ------------------------------------------------------------------
    # Internal helpers (callers hold the lock)
    # ------------------------------------------------------------------
    def _get_live(self, record_id: int) -> RecordRead:
        record = self._records.get(record_id)
        if record is None:
            logger.debug("Record %s not found", record_id)
            raise NotFoundError(record_id)
        return record

    def _ensure_email_free(self, email: Optional[str], record_id: Optional[int] = None) -> None:
        if email is None:
            return
        owner = self._ids_by_email.get(email)
        if owner is not None and owner != record_id:
            logger.warning("Email already used by record %s", owner)
            raise ConflictError(email)

    def _put(self, current: RecordRead, updated: RecordRead) -> None:
        # Assigning to an existing key keeps the record's position.
        self._records[updated.id] = updated
        if current.email is not None and current.email != updated.email:
            self._ids_by_email.pop(current.email, None)
        if updated.email is not None:
            self._ids_by_email[updated.email] = updated.id
