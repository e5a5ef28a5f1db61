"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import info, records

router = APIRouter()

router.include_router(records.router, prefix="/records", tags=["records"])
router.include_router(info.router, prefix="/info", tags=["info"])
