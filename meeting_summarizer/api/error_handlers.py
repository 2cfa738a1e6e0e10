"""Error Handlers - global exception handlers for the Meeting Summarizer API.

Invariants:
    - MeetingSummarizerError → its own envelope and http_status; 4xx logged as warning, 5xx as error
    - RequestValidationError (bad JSON, wrong types) → 400 VALIDATION_ERROR whose
      "requirement" repeats the endpoint's required-field message
    - Validation details name fields by their wire name (toEmail, not body.toEmail)
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from meeting_summarizer.core.enforce_input import EMAIL_FIELDS_MESSAGE, SUMMARY_FIELDS_MESSAGE
from meeting_summarizer.core.errors import ErrorCategory, ErrorSeverity, MeetingSummarizerError

logger = logging.getLogger(__name__)

_ENDPOINT_REQUIREMENTS: dict[str, str] = {
    "/api/summarize": SUMMARY_FIELDS_MESSAGE,
    "/api/send-email": EMAIL_FIELDS_MESSAGE,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register domain, request-validation and catch-all handlers on the app."""
    app.add_exception_handler(MeetingSummarizerError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_domain_error(request: Request, exc: MeetingSummarizerError):
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{type(exc).__name__} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [_describe(e) for e in exc.errors()]
    logger.warning(
        f"Rejected request body on {request.url.path}: "
        f"{', '.join(d['field'] or d['type'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "requirement": _ENDPOINT_REQUIREMENTS.get(request.url.path),
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all - the response never carries the exception text."""
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
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


def _describe(error: dict) -> dict:
    """One validation detail; body-level problems (bad JSON) have no field."""
    location, *path = error["loc"]
    field = ".".join(str(p) for p in path)
    if error["type"] == "json_invalid":
        field = None
    return {
        "field": field,
        "location": location,
        "message": error["msg"],
        "type": error["type"],
    }
