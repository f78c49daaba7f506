"""Exception handlers rendering every failure as an error envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campaign_panel.api.validation import format_errors
from campaign_panel.core.exceptions import NotFoundError, StorageError, ValidationError
from campaign_panel.schemas.envelope import ApiError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiError(error=message).model_dump(),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = ", ".join(format_errors(exc.errors())) or "Invalid input"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    # Cause was logged where it was caught; only the generic message goes out
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
