"""Global exception handlers — domain errors to 4xx, anything else to a bare 500.

Missing entities never reach this module: services return ``None`` and the
endpoints answer 404 themselves.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    DependentEntitiesError,
    DuplicateEntityError,
    InvalidOperationError,
    MissingReferenceError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[Exception], int] = {
    MissingReferenceError: status.HTTP_400_BAD_REQUEST,
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
    DependentEntitiesError: status.HTTP_409_CONFLICT,
    DuplicateEntityError: status.HTTP_409_CONFLICT,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        app.add_exception_handler(error_type, _domain_error_handler(status_code))
    app.add_exception_handler(Exception, _generic_error_handler)


def _domain_error_handler(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.info(
            "%s on %s: %s", type(exc).__name__, request.url.path, exc,
        )
        return JSONResponse(status_code=status_code, content={"message": str(exc)})

    return handler


async def _generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all — never leaks internal details."""
    logger.error(
        "Unhandled exception on %s: %s", request.url.path, exc, exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An unexpected error occurred"},
    )
