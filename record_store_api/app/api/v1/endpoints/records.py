"""
Record endpoints for API v1.

Thin HTTP wrappers around ``RecordStore``: each route parses the
request, calls exactly one store operation and translates the store's
errors into HTTP responses (404 not found, 409 email conflict, 422
invalid input).  The routes are plain functions, so FastAPI runs them
in its thread pool; the store serializes access itself.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from record_store_api.app.core.exceptions import (
    ConflictError,
    NotFoundError,
    RecordStoreError,
    ValidationError,
)
from record_store_api.app.schemas.record import (
    RecordCreate,
    RecordFilter,
    RecordPage,
    RecordRead,
    RecordReplace,
    RecordUpdate,
)
from record_store_api.app.services.record_service import RecordStore

router = APIRouter()


def get_record_store(request: Request) -> RecordStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.record_store


def _to_http_error(exc: RecordStoreError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=exc.errors or str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.post("/", response_model=RecordRead, status_code=status.HTTP_201_CREATED)
def create_record(
    record_in: RecordCreate,
    store: RecordStore = Depends(get_record_store),
) -> RecordRead:
    """Create a record and return it with its assigned identifier."""
    try:
        return store.create(record_in)
    except RecordStoreError as e:
        raise _to_http_error(e) from e


@router.get("/", response_model=RecordPage)
def list_records(
    request: Request,
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    min_age: Optional[int] = Query(None, ge=0),
    max_age: Optional[int] = Query(None, ge=0),
    name_contains: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    store: RecordStore = Depends(get_record_store),
) -> RecordPage:
    """Return a page of records in creation order.

    Filters combine with AND.  ``total`` in the response counts every
    match, not just the returned page.  ``limit`` may not exceed the
    application's ``max_page_limit``.
    """
    max_limit = request.app.state.settings.max_page_limit
    if limit is not None and limit > max_limit:
        raise HTTPException(
            status_code=422,
            detail=[{"loc": ["query", "limit"], "msg": f"Limit must not exceed {max_limit}"}],
        )
    criteria = RecordFilter(
        min_age=min_age,
        max_age=max_age,
        name_contains=name_contains,
        email=email,
    )
    try:
        return store.list(criteria, offset=offset, limit=limit)
    except RecordStoreError as e:
        raise _to_http_error(e) from e


@router.get("/{record_id}", response_model=RecordRead)
def get_record(record_id: int, store: RecordStore = Depends(get_record_store)) -> RecordRead:
    """Retrieve a single record by ID."""
    try:
        return store.get(record_id)
    except RecordStoreError as e:
        raise _to_http_error(e) from e


@router.put("/{record_id}", response_model=RecordRead)
def replace_record(
    record_id: int,
    record_in: RecordReplace,
    store: RecordStore = Depends(get_record_store),
) -> RecordRead:
    """Replace all mutable fields of a record.

    Optional fields left out of the body are cleared.
    """
    try:
        return store.replace(record_id, record_in)
    except RecordStoreError as e:
        raise _to_http_error(e) from e


@router.patch("/{record_id}", response_model=RecordRead)
def merge_record(
    record_id: int,
    record_in: RecordUpdate,
    store: RecordStore = Depends(get_record_store),
) -> RecordRead:
    """Update only the fields present in the body."""
    try:
        return store.merge(record_id, record_in)
    except RecordStoreError as e:
        raise _to_http_error(e) from e


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(record_id: int, store: RecordStore = Depends(get_record_store)) -> None:
    """Delete a record.  Its identifier is never reused."""
    try:
        store.delete(record_id)
    except RecordStoreError as e:
        raise _to_http_error(e) from e
    return None
