"""Error Handlers — map rejected state and unexpected failures to the error envelope.

Invariants:
    - TopoGuardError → its own to_response() body and http_status (422 for rejections)
    - Any other exception → opaque 500 body; details only reach the log
    - Malformed JSON bodies are left to FastAPI's built-in 422 handler

Design Decisions:
    - Handlers registered from one function so main.py stays a wiring file
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from topoguard.core.errors import TopoGuardError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TopoGuardError, handle_topoguard_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_topoguard_error(request: Request, exc: TopoGuardError) -> JSONResponse:
    logger.warning(
        "Rejected %s request: %s", request.url.path, exc.message,
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "validator": exc.context.validator,
            "generation": exc.context.generation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s: %s", request.url.path, exc,
        exc_info=True, extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=INTERNAL_ERROR_BODY,
    )
