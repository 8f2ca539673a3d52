"""Error Handlers — global exception handlers for the REST routes.

Invariants:
    - TodoError → its own HTTP status and to_response() envelope
    - Anything else → 500 INTERNAL_ERROR, message never includes exception text

GraphQL errors never reach these handlers; graphql/errors.py formats them.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from todo_api.core.errors import ErrorCategory, ErrorSeverity, TodoError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    logger.error(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
