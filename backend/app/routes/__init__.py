"""API route registration."""

from fastapi import APIRouter
from .students import router as students_router


def register_all_routes(api_router: APIRouter):
    """Include all route modules on the main API router."""
    api_router.include_router(students_router)
