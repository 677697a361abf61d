"""Error Handlers - global exception handlers for the inventory API.

Invariants:
    - InventoryError -> its own envelope and http_status
    - RequestValidationError -> 400 with field-level details
    - Exception (catch-all) -> 500, never leaks internal details
    - Only critical errors are logged at ERROR; validation/not-found are routine (INFO)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from inventory_api.core.errors import ErrorCategory, ErrorSeverity, InventoryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inventory_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_inventory_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        """Handle all inventory domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "product_id": exc.context.product_id,
        }
        if exc.is_critical:
            logger.error(f"InventoryError: {exc.message}", extra=extra)
        else:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies and path parameters."""
        logger.info(
            f"Request validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
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
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _field_path(loc: tuple) -> list[str]:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "path", "query"):
        parts = parts[1:]
    return parts


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response.

    field_errors is keyed by top-level field; union members (quantity.int,
    quantity.str) collapse onto their field, first message wins.
    """
    details = []
    field_errors: dict[str, str] = {}
    for e in exc.errors():
        path = _field_path(e["loc"])
        details.append({
            "field": ".".join(path),
            "message": e["msg"],
            "type": e["type"],
        })
        field_errors.setdefault(path[0], e["msg"])
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.WARNING.value,
            "details": details,
            "field_errors": field_errors,
        },
    }
