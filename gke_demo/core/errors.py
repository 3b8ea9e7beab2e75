"""Global error handlers.

A fault inside a handler or while serializing its response is answered with
a complete 500 JSON body. Internal details never reach the client.

``RequestContextMiddleware`` answers faults raised below it, so they still
carry the request-ID headers. The catch-all handler covers anything raised
outside that middleware.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

log = structlog.get_logger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
    },
}


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log the fault with its traceback and build the 500 response."""
    log.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=repr(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the catch-all error handler on the FastAPI app."""

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        return internal_error_response(request, exc)
