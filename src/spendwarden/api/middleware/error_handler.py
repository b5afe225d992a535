"""Global error handling.

All exceptions are converted to a standardized JSON body with an error code
from the catalog and an appropriate HTTP status code.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from spendwarden.budgeting.admission import AdmissionOutcome
from spendwarden.config import settings
from spendwarden.core.errors import error_body
from spendwarden.core.exceptions import LimitExceededError, SpendWardenError, StoreUnavailableError

logger = logging.getLogger(__name__)


async def handle_spendwarden_error(request: Request, exc: SpendWardenError) -> JSONResponse:
    """Handle domain exceptions (validation, limit, store availability)."""
    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}

    if isinstance(exc, LimitExceededError):
        logger.info(f"Limit exceeded: {exc.error_code}", extra=extra)
        content = error_body(exc.error_code, message=exc.message)
        content["outcome"] = AdmissionOutcome.reject_over_limit.value
        content["details"] = exc.details
        return JSONResponse(status_code=exc.http_status, content=content)

    if isinstance(exc, StoreUnavailableError):
        # Store failures are reported generically; details stay in debug logs.
        if settings.debug:
            extra["details"] = exc.details
        logger.error(f"Store unavailable: {exc.error_code}", extra=extra)
        return JSONResponse(status_code=exc.http_status, content=error_body(exc.error_code))

    logger.warning(f"Request rejected: {exc.error_code}", extra=extra)
    content = error_body(exc.error_code)
    content["details"] = exc.details
    return JSONResponse(status_code=exc.http_status, content=content)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic request validation errors."""
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = errors
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VAL_001", message=" | ".join(error_messages)),
    )


async def handle_integrity_error(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity errors."""
    # Do not log str(exc): it can include SQL + bound parameters.
    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        logger.exception(f"Database integrity error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Database integrity error on {request.url.path}", extra=extra)

    error_msg = str(exc).lower()
    if "unique" in error_msg or "duplicate" in error_msg:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error_body("DB_002"))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("DB_001")
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without exposing internal details."""
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    # In non-debug: do not log str(exc) or traceback (may include sensitive data).
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("SYS_001")
    )
