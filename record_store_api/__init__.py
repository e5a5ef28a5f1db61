"""
Top-level package for the Record Store API.

All functionality lives in submodules under ``app``: the in-memory
store in ``app.services.record_service`` and the FastAPI application
in ``app.main``.
"""

__all__ = []
