"""Error Handlers - global exception handlers for the Acme Invoices API.

Invariants:
    - AcmeError -> structured JSON with error code, message, severity
    - Exception (catch-all) -> never leaks internal details
    - Form field errors never reach these handlers as RequestValidationError:
      forms are read raw and validated by validate_invoice

Design Decisions:
    - Two-layer handler: domain (AcmeError), catch-all (Exception)
    - Extracted from main.py to keep the app factory short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import AcmeError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_acme_error_handler(app)
    _register_generic_error_handler(app)


def _register_acme_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(AcmeError)
    async def acme_error_handler(request: Request, exc: AcmeError):
        """Handle all Acme domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"AcmeError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "invoice_id": exc.context.invoice_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
