"""
Information endpoint for API v1.

Returns the service name, its version and the number of live records,
which is enough for clients and load balancers to check that the
service is up and which build they are talking to.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from record_store_api.app.services.record_service import RecordStore
from .records import get_record_store

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
def get_info(request: Request, store: RecordStore = Depends(get_record_store)) -> Dict[str, Any]:
    """Return service metadata and the live record count."""
    app_settings = request.app.state.settings
    return {
        "project_name": app_settings.project_name,
        "version": app_settings.api_version,
        "records": store.count(),
    }
