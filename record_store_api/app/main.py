"""
Main entrypoint for the Record Store API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds a configured app
that owns a fresh ``RecordStore``; a default instance is created at
import time as ``app`` so the service can be run with uvicorn::

    uvicorn record_store_api.app.main:app --reload

Each call to ``create_app`` yields an independent store, which keeps
tests isolated from one another.
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.record_service import RecordStore


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[RecordStore]
        Store to serve.  A new empty store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store and
    # routers log through the configured handlers.
    setup_logging(settings.log_level, settings.log_file or None, settings.store_log_level or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.record_store = store or RecordStore(default_limit=settings.default_page_limit)

    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
