"""
Central error handling for SmartBizFlow HR Portal
"""
import logging
import traceback

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from smartbizflow.core.config import settings
from smartbizflow.core.exceptions import (
    AppendOnlyCollectionError,
    NotFoundError,
    StoreError,
    UnknownCollectionError,
)

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, detail, **extra) -> JSONResponse:
    content = {
        "error": True,
        "status_code": status_code,
        "detail": detail,
        "path": str(request.url.path)
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """
    Handle HTTPException with consistent JSON response format

    Args:
        request: FastAPI request object
        exc: HTTPException instance

    Returns:
        JSONResponse with error details
    """
    response = _error_response(request, exc.status_code, exc.detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle RequestValidationError with consistent JSON response format

    Does not leak internal validation details in production.
    """
    # In production, return generic error message
    if settings.APP_ENV == "prod":
        return _error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "Validation error: Invalid request data"
        )

    # In development/staging, return detailed errors (sanitize for JSON: e.g. ctx.error ValueError -> str)
    errors = []
    for e in exc.errors():
        err = dict(e)
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {
                k: (str(v) if not isinstance(v, (str, int, float, bool, type(None))) else v)
                for k, v in err["ctx"].items()
            }
        errors.append(err)
    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation error",
        errors=errors
    )


async def store_exception_handler(request: Request, exc: StoreError) -> JSONResponse:
    """
    Map record store errors onto HTTP responses

    NotFoundError -> 404, caller mistakes (unknown collection, append-only
    violation) -> 400, anything else (init / IO failures) -> 500.
    """
    if isinstance(exc, NotFoundError):
        return _error_response(request, status.HTTP_404_NOT_FOUND, str(exc))
    if isinstance(exc, (UnknownCollectionError, AppendOnlyCollectionError)):
        return _error_response(request, status.HTTP_400_BAD_REQUEST, str(exc))

    logger.error(f"Record store failure: {exc}")
    detail = "Data store unavailable" if settings.APP_ENV == "prod" else str(exc)
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, detail)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions with consistent JSON response format

    Does not leak internal error details in production.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    # In production, return generic error message
    if settings.APP_ENV == "prod":
        return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # In development/staging, return error details
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc),
        traceback=traceback.format_exc() if settings.APP_ENV == "local" else None
    )
