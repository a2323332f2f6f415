"""
Error taxonomy and FastAPI exception handlers.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import logger


class StudentServiceError(Exception):
    """Base class for errors raised by the student service."""


class StoreUnavailableError(StudentServiceError):
    """The document store could not be reached or rejected the operation."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Student store unavailable during {operation}: {cause}")


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error(f"❌ {request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": f"Student store unavailable during {exc.operation}"},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"⚠️ Malformed input on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
