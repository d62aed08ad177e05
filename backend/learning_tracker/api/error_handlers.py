"""Error Handlers — map exceptions raised under /api/* to the JSON error envelope.

Invariants:
    - Every error body has the shape {"error": {code, message, category, severity, ...}}
    - Domain ValidationError and malformed request bodies both answer 400 VALIDATION_ERROR
      with a "details" list of {field, message, type}
    - Anything unexpected answers 500 INTERNAL_ERROR without the exception text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from learning_tracker.core.errors import ErrorCategory, ErrorSeverity, TrackerError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain, request-validation and fallback handlers to the app."""
    app.add_exception_handler(TrackerError, handle_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_tracker_error(request: Request, exc: TrackerError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level, "%s on %s: %s", exc.code, request.url.path, exc.message,
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "project_id": exc.context.project_id,
            "step_id": exc.context.step_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            # Drop the "body"/"query"/"path" prefix so fields read like the domain ones
            "field": ".".join(str(part) for part in e["loc"][1:]) or str(e["loc"][0]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        "Malformed request on %s", request.url.path,
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return _error_json(
        status.HTTP_400_BAD_REQUEST,
        code="VALIDATION_ERROR",
        message="Invalid request data",
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.ERROR,
        details=details,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled %s on %s", type(exc).__name__, request.url.path,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return _error_json(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="INTERNAL_ERROR",
        message="An unexpected error occurred",
        category=ErrorCategory.INTERNAL,
        severity=ErrorSeverity.CRITICAL,
    )


def _error_json(
    status_code: int,
    *,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> JSONResponse:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})
