"""
Exception handlers mapping store and validation failures to HTTP responses.

Register with register_exception_handlers(app).
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.constants import COMMON_ERROR_MESSAGE, VALIDATION_ERROR_MESSAGE
from app.core.exceptions import StoreError
from app.core.logging import get_logger

logger = get_logger(__name__)


def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Log the failure and return a fixed message that leaks no internals."""
    logger.error(
        f"Store failure during {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": COMMON_ERROR_MESSAGE},
    )


def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info(f"Rejected invalid request to {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": VALIDATION_ERROR_MESSAGE,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any other unhandled failure (timeouts, dropped connections...) gets the same fixed 500."""
    logger.error(
        f"Unhandled error during {request.method} {request.url.path}: {exc!r}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": COMMON_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
