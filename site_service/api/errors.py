"""Exception to HTTP error body mapping"""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from site_service.core.clock import utc_now
from site_service.core.exceptions import SiteServiceError
from site_service.models.site import ErrorResponse

logger = logging.getLogger(__name__)

_REQUEST_PARTS = ("body", "query", "header", "path", "cookie")


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    errors: Optional[dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=utc_now(),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def handle_site_service_error(request: Request, exc: SiteServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message}", exc_info=exc.__cause__ or exc)
    else:
        logger.warning(f"{exc.error}: {exc.message}")
    return error_response(request, exc.status_code, exc.error, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part not in _REQUEST_PARTS)
        errors[field or "body"] = err["msg"]

    logger.warning(f"Validation error: {errors}")
    return error_response(request, 400, "Validation Failed", "Invalid request parameters", errors)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        error = HTTPStatus(exc.status_code).phrase
    except ValueError:
        error = "Error"
    return error_response(request, exc.status_code, error, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # Details stay in the server log
    logger.error(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(request, 500, "Internal Server Error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SiteServiceError, handle_site_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
