"""Error Handlers: global exception handlers for the Country Atlas API.

Invariants:
    - CountryAtlasError -> structured JSON with error code, message, severity
    - RequestValidationError -> every field-level failure listed, status 400
    - Unparseable JSON bodies -> INVALID_JSON with the parse error detail
    - Exception (catch-all) -> 500, logged with traceback, never swallowed

Design Decisions:
    - Three-layer handler: domain (CountryAtlasError), validation (Pydantic), catch-all
    - Extracted from main.py: keeps app assembly readable
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from countries_api.core.errors import CountryAtlasError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Country Atlas domain/store error handler."""

    @app.exception_handler(CountryAtlasError)
    async def country_atlas_error_handler(request: Request, exc: CountryAtlasError):
        """Handle all Country Atlas domain/store errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CountryAtlasError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors and malformed JSON bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: generic server failure with the error detail attached."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "Internal Server Error",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                    "detail": str(exc),
                },
            },
        )


def _json_decode_error(exc: RequestValidationError) -> dict | None:
    for e in exc.errors():
        if e.get("type") == "json_invalid":
            return e
    return None


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    decode_error = _json_decode_error(exc)
    if decode_error is not None:
        reason = (decode_error.get("ctx") or {}).get("error", decode_error["msg"])
        return {
            "error": {
                "code": "INVALID_JSON",
                "message": f'invalid request body format : "{reason}"',
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
            },
        }
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
