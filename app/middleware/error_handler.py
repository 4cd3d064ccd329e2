import logging
import traceback
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.schemas.common import error_response
from app.utils.exceptions import AppException, ErrorCode

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses (our custom exceptions)."""
    detail = exc.detail
    error = detail.get("error", {})
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(
            detail.get("message", "An error occurred"),
            error.get("code", ErrorCode.INTERNAL_SERVER_ERROR),
            error.get("details"),
            error.get("field"),
        ),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle Pydantic validation errors (422).
    Converts FastAPI's default validation error format into our standardized format.
    """
    details = []
    for error in exc.errors():
        # loc is a tuple like ("body", "engineers", 0, "id")
        loc = error.get("loc", [])
        field = ".".join(str(l) for l in loc if l != "body") if loc else "unknown"
        details.append({
            "field": field,
            "message": error.get("msg", "Invalid value"),
        })

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response("Validation error. Please check your input.",
                               ErrorCode.VALIDATION_ERROR, details),
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """
    Handle any SQLAlchemy error (I/O failure, constraint violation, ...).
    The request fails with 500 and the underlying message; nothing is retried.
    """
    message = str(getattr(exc, "orig", None) or exc)
    logger.error(f"Store error on {request.method} {request.url}: {message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response(message, ErrorCode.STORE_ERROR),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions.
    Logs the full traceback, returns a safe 500 response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url}\n"
        f"{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("An unexpected error occurred. Please try again later.",
                               ErrorCode.INTERNAL_SERVER_ERROR),
    )
